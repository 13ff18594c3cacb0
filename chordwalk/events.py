"""Timed note events and the delta-time cursor shared by every stage.

Stages never compute absolute timestamps. They advance a ``DeltaCursor`` as
musical time passes and every emitted event takes whatever time is pending
on the cursor, which resets it to zero. Events emitted back to back
therefore share the same instant, and silent stretches collapse into a
single growing delta on the next event.

Example:
	```python
	performer = Performer(DeltaCursor(), EventEmitter())
	performer.chord_on([60, 64, 67])          # deltas 0, 0, 0
	performer.chord_off([60, 64, 67], 480)    # deltas 480, 0, 0
	```
"""

import dataclasses
import logging
import typing

import chordwalk.constants.velocity
import chordwalk.event_emitter


logger = logging.getLogger(__name__)

NOTE_ON = "note_on"
NOTE_OFF = "note_off"


@dataclasses.dataclass
class TimedEvent:

	"""
	A note-on or note-off, timed in ticks since the previous emitted event.
	"""

	kind: str
	channel: int
	note: int
	velocity: typing.Optional[int] = None
	delta: int = 0


	@property
	def is_note_on (self) -> bool:

		return self.kind == NOTE_ON


@dataclasses.dataclass
class ChordMiss:

	"""A chord slot that produced no events, and why."""

	section: str
	label: str
	reason: str


class DeltaCursor:

	"""
	Ticks accumulated since the last emitted event.
	"""

	def __init__ (self) -> None:

		self.pending: int = 0
		self.emitted: int = 0


	@property
	def elapsed (self) -> int:

		"""Absolute ticks covered so far, emitted and pending."""

		return self.emitted + self.pending


	def advance (self, ticks: int) -> None:

		if ticks < 0:
			raise ValueError(f"Cannot move the cursor backwards ({ticks} ticks)")

		self.pending += ticks


	def set (self, ticks: int) -> None:

		"""Overwrite the pending time. Only valid straight after a flush."""

		if self.pending != 0:
			raise ValueError(f"Cannot overwrite {self.pending} pending ticks")

		self.advance(ticks)


	def flush (self) -> int:

		"""Return the pending delta and reset it to zero."""

		delta = self.pending
		self.emitted += delta
		self.pending = 0

		return delta


class Performer:

	"""
	Emits timed note events for one channel through an event emitter.

	Every event is published as ``"event"``; misses are logged and
	published as ``"chord_missing"``.
	"""

	def __init__ (
		self,
		cursor: DeltaCursor,
		emitter: chordwalk.event_emitter.EventEmitter,
		channel: int = chordwalk.constants.velocity.DEFAULT_CHANNEL,
		velocity: int = chordwalk.constants.velocity.DEFAULT_VELOCITY
	) -> None:

		if not chordwalk.constants.velocity.MIN_VELOCITY <= velocity <= chordwalk.constants.velocity.MAX_VELOCITY:
			raise ValueError(f"Velocity must be 1-127, got {velocity}")

		if not 0 <= channel <= chordwalk.constants.velocity.MAX_CHANNEL:
			raise ValueError(f"Channel must be 0-15, got {channel}")

		self.cursor = cursor
		self.emitter = emitter
		self.channel = channel
		self.velocity = velocity


	def note_on (self, note: int) -> TimedEvent:

		event = TimedEvent(NOTE_ON, self.channel, note, self.velocity, self.cursor.flush())
		self.emitter.emit("event", event)

		return event


	def note_off (self, note: int) -> TimedEvent:

		event = TimedEvent(NOTE_OFF, self.channel, note, None, self.cursor.flush())
		self.emitter.emit("event", event)

		return event


	def chord_on (self, pitches: typing.Iterable[int]) -> None:

		"""Press every pitch at once; the first note takes the pending delta."""

		for pitch in pitches:
			self.note_on(pitch)


	def chord_off (self, pitches: typing.Iterable[int], after: int) -> None:

		"""Release every pitch ``after`` ticks from now."""

		self.cursor.advance(after)

		for pitch in pitches:
			self.note_off(pitch)


	def hold (self, pitches: typing.Sequence[int], duration: int) -> None:

		"""Sound ``pitches`` together for ``duration`` ticks."""

		self.chord_on(pitches)
		self.chord_off(pitches, duration)


	def missing (self, section: str, label: str, reason: str) -> ChordMiss:

		miss = ChordMiss(section=section, label=label, reason=reason)
		logger.warning(f"{section}: {label} skipped ({reason})")
		self.emitter.emit("chord_missing", miss)

		return miss
