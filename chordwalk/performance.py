import dataclasses
import logging
import random
import typing

import chordwalk.chords
import chordwalk.constants
import chordwalk.constants.velocity
import chordwalk.event_emitter
import chordwalk.events
import chordwalk.improvisation
import chordwalk.intervals
import chordwalk.progression
import chordwalk.scale_chords
import chordwalk.selection


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class GenerationResult:

	"""
	Everything one generation pass produced.
	"""

	selection: chordwalk.selection.Selection
	events: typing.List[chordwalk.events.TimedEvent] = dataclasses.field(default_factory=list)
	misses: typing.List[chordwalk.events.ChordMiss] = dataclasses.field(default_factory=list)
	walk: typing.Optional[chordwalk.scale_chords.WalkResult] = None
	improv: typing.Optional[chordwalk.improvisation.ImprovResult] = None


	@property
	def total_ticks (self) -> int:

		return sum(event.delta for event in self.events)


class Performance:

	"""
	Generates the full performance and streams its events to listeners.

	A pass selects a root, scale and progression, then plays the
	progression textures, the scale-chord walk and the euclidean
	improvisation in that order. All randomness comes from one
	``random.Random``, so a fixed seed repeats the same performance.

	Listeners subscribe with ``on()``:

	- ``"selected"`` - the ``Selection``, before any note is played
	- ``"section"`` - the name of each stage as it starts
	- ``"event"`` - every ``TimedEvent``, in emission order
	- ``"chord_missing"`` - every ``ChordMiss``

	Example:
		```python
		performance = Performance(seed=7)
		sink = chordwalk.midi_file.MidiFileSink("output.mid")
		performance.on("event", sink.emit)
		performance.generate(root="C")
		sink.save()
		```
	"""

	def __init__ (
		self,
		ticks_per_quarter: int = chordwalk.constants.TICKS_PER_QUARTER,
		octave: int = 3,
		velocity: int = chordwalk.constants.velocity.DEFAULT_VELOCITY,
		channel: int = chordwalk.constants.velocity.DEFAULT_CHANNEL,
		seed: typing.Optional[int] = None,
		rng: typing.Optional[random.Random] = None
	) -> None:

		"""
		Parameters:
			ticks_per_quarter: Tick resolution; must be a positive multiple of 4.
			octave: Octave the improvisation's second voice is drawn from (-1 to 7).
			velocity: Note-on velocity for every note (1-127).
			channel: MIDI channel for every note (0-15).
			seed: Seed for a new random source. Ignored when ``rng`` is given.
			rng: An existing random source to draw from.

		Raises:
			ValueError: If any setting is out of range.
		"""

		if ticks_per_quarter <= 0 or ticks_per_quarter % 4 != 0:
			raise ValueError(f"ticks_per_quarter must be a positive multiple of 4, got {ticks_per_quarter}")

		lowest, highest = chordwalk.improvisation.voice_octave_range()

		if not lowest <= octave <= highest:
			raise ValueError(f"Octave must be {lowest}-{highest}, got {octave}")

		if not chordwalk.constants.velocity.MIN_VELOCITY <= velocity <= chordwalk.constants.velocity.MAX_VELOCITY:
			raise ValueError(f"Velocity must be 1-127, got {velocity}")

		if not 0 <= channel <= chordwalk.constants.velocity.MAX_CHANNEL:
			raise ValueError(f"Channel must be 0-15, got {channel}")

		self.ticks_per_quarter = ticks_per_quarter
		self.octave = octave
		self.velocity = velocity
		self.channel = channel
		self.rng = rng if rng is not None else random.Random(seed)
		self.resolve: chordwalk.progression.ChordResolver = chordwalk.chords.resolve_chord
		self._emitter = chordwalk.event_emitter.EventEmitter()


	def on (self, event_name: str, callback: chordwalk.event_emitter.CallbackType) -> None:

		self._emitter.on(event_name, callback)


	def off (self, event_name: str, callback: chordwalk.event_emitter.CallbackType) -> None:

		self._emitter.off(event_name, callback)


	def select (
		self,
		root: typing.Optional[str] = None,
		frequency: typing.Optional[float] = None,
		minor: bool = False
	) -> chordwalk.selection.Selection:

		"""Run the selection stage and publish ``"selected"``."""

		selection = chordwalk.selection.select(self.rng, note_name=root, frequency=frequency, minor=minor)
		_, names = chordwalk.intervals.scale_degrees(selection.root_pc, selection.scale)

		logger.info(f"Notes in scale: {names}")

		self._emitter.emit("selected", selection)

		return selection


	def play (self, selection: chordwalk.selection.Selection, scale_run: bool = False) -> GenerationResult:

		"""Play every stage for an existing selection."""

		result = GenerationResult(selection=selection)
		performer = chordwalk.events.Performer(
			chordwalk.events.DeltaCursor(),
			self._emitter,
			channel=self.channel,
			velocity=self.velocity
		)

		collect = result.events.append
		self._emitter.on("event", collect)

		try:

			if scale_run:
				self._emitter.emit("section", "scale run")
				chordwalk.scale_chords.play_scale(performer, selection.root_pc, selection.scale, self.ticks_per_quarter)

			self._emitter.emit("section", chordwalk.progression.SECTION)
			result.misses.extend(chordwalk.progression.play_progression(
				performer,
				selection.root_pc,
				selection.scale,
				selection.progression,
				self.ticks_per_quarter,
				resolve=self.resolve
			))

			self._emitter.emit("section", chordwalk.scale_chords.SECTION)
			result.walk = chordwalk.scale_chords.play_scale_chords(
				performer,
				selection.root_pc,
				selection.scale,
				self.ticks_per_quarter,
				resolve=self.resolve
			)
			result.misses.extend(result.walk.misses)

			self._emitter.emit("section", "improvisation")
			result.improv = chordwalk.improvisation.euclidean_improv(
				performer,
				selection.root_pc,
				selection.scale,
				self.octave,
				self.ticks_per_quarter,
				self.rng
			)

		finally:
			self._emitter.off("event", collect)

		logger.info(f"Generated {len(result.events)} events over {result.total_ticks} ticks")

		return result


	def generate (
		self,
		root: typing.Optional[str] = None,
		frequency: typing.Optional[float] = None,
		minor: bool = False,
		scale_run: bool = False
	) -> GenerationResult:

		"""Select a root, scale and progression, then play every stage.

		Parameters:
			root: Explicit root note name (e.g. ``"C"``, ``"F#"``).
			frequency: Frequency in Hz used as the root when no name is given.
			minor: Use the melodic minor scale instead of major.
			scale_run: Play an ascending scale run before the progression.

		Raises:
			ValueError: If ``root`` is not a note name or ``frequency`` is not positive.
		"""

		return self.play(self.select(root=root, frequency=frequency, minor=minor), scale_run=scale_run)


def generate (
	root: typing.Optional[str] = None,
	frequency: typing.Optional[float] = None,
	octave: int = 3,
	minor: bool = False,
	seed: typing.Optional[int] = None,
	ticks_per_quarter: int = chordwalk.constants.TICKS_PER_QUARTER
) -> typing.List[chordwalk.events.TimedEvent]:

	"""Generate a performance and return its events."""

	performance = Performance(ticks_per_quarter=ticks_per_quarter, octave=octave, seed=seed)

	return performance.generate(root=root, frequency=frequency, minor=minor).events
