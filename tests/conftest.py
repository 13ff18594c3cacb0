import random
import typing

import pytest

import chordwalk.chords
import chordwalk.event_emitter
import chordwalk.events


class Recording:

	"""A performer wired to in-memory lists of events and misses."""

	def __init__ (self) -> None:

		self.cursor = chordwalk.events.DeltaCursor()
		self.emitter = chordwalk.event_emitter.EventEmitter()
		self.events: typing.List[chordwalk.events.TimedEvent] = []
		self.misses: typing.List[chordwalk.events.ChordMiss] = []
		self.emitter.on("event", self.events.append)
		self.emitter.on("chord_missing", self.misses.append)
		self.performer = chordwalk.events.Performer(self.cursor, self.emitter)


	@property
	def total_ticks (self) -> int:

		return sum(event.delta for event in self.events)


def absolute_times (events: typing.Sequence[chordwalk.events.TimedEvent]) -> typing.List[int]:

	"""Running sum of deltas, one entry per event."""

	times = []
	now = 0

	for event in events:
		now += event.delta
		times.append(now)

	return times


def assert_paired (events: typing.Sequence[chordwalk.events.TimedEvent]) -> None:

	"""Every note-on has exactly one later note-off for the same channel and note."""

	held: typing.Set[typing.Tuple[int, int]] = set()

	for event in events:

		assert event.delta >= 0
		key = (event.channel, event.note)

		if event.is_note_on:
			assert key not in held, f"note {key} pressed twice"
			held.add(key)
		else:
			assert key in held, f"note {key} released before it was pressed"
			held.remove(key)

	assert not held, f"notes never released: {sorted(held)}"


def resolver_without (*missing: str) -> typing.Callable[[str], typing.Optional[chordwalk.chords.ChordVoicing]]:

	"""A chord resolver that misses the given abbreviations."""

	def resolve (abbreviation: str) -> typing.Optional[chordwalk.chords.ChordVoicing]:

		if abbreviation in missing:
			return None

		return chordwalk.chords.resolve_chord(abbreviation)

	return resolve


@pytest.fixture
def recording () -> Recording:

	"""A fresh performer and its recorded output."""

	return Recording()


@pytest.fixture
def rng () -> random.Random:

	"""A seeded random source for repeatable tests."""

	return random.Random(1234)
