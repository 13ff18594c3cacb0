"""Two-voice euclidean improvisation.

Voice A holds the root in a fixed octave; voice B holds a random scale
degree. Every bar both voices draw a fresh euclidean rhythm (a random pulse
count over sixteen steps) and the stage walks the sixteen steps, pressing
and releasing each voice as its rhythm turns on and off.

Time is coalesced through the shared delta cursor: a step where nothing
sounds or stops emits no events and only grows the pending delta, while
events falling on the same step share a zero delta. Absolute time still
advances by exactly one step per step, so every bar covers sixteen steps
however many of them are silent.
"""

import dataclasses
import logging
import random
import typing

import chordwalk.chords
import chordwalk.constants
import chordwalk.constants.ticks
import chordwalk.events
import chordwalk.intervals
import chordwalk.sequence_utils


logger = logging.getLogger(__name__)

IMPROV_ROOT_OCTAVE = 3
BARS = 4

RhythmGenerator = typing.Callable[[int, int], typing.List[bool]]


@dataclasses.dataclass
class Voice:

	"""
	One improvising voice and its press state across steps.
	"""

	name: str
	note: int
	pressed: bool = False
	was_pressed: bool = False


	def step (self, on: bool) -> None:

		self.was_pressed = self.pressed
		self.pressed = on


	@property
	def released (self) -> bool:

		"""The voice sounded last step and is silent now."""

		return self.was_pressed and not self.pressed


	@property
	def active (self) -> bool:

		"""Something sounded or stopped on this step."""

		return self.pressed or self.was_pressed


@dataclasses.dataclass
class ImprovResult:

	"""The voices used and the rhythm each one played, bar by bar."""

	voices: typing.List[Voice]
	bars: typing.List[typing.List[typing.List[bool]]] = dataclasses.field(default_factory=list)


def voice_octave_range () -> typing.Tuple[int, int]:

	"""Lowest and highest ``octave`` that keep voice B inside MIDI notes 0-127 for every root and scale."""

	top_degree = 11 + max(max(intervals) for intervals in chordwalk.intervals.INTERVAL_DEFINITIONS.values())
	semitones = chordwalk.constants.SEMITONES_PER_OCTAVE

	lowest = (chordwalk.constants.MIN_NOTE // semitones) - 1
	highest = ((chordwalk.constants.MAX_NOTE - top_degree) // semitones) - 1

	return lowest, highest


def choose_voices (root_pc: int, scale: str, octave: int, rng: random.Random) -> typing.List[Voice]:

	"""Voice A on the root at ``IMPROV_ROOT_OCTAVE``, voice B on a random scale degree.

	Voice B's degrees are raised into ``octave``. The pitch of voice A is
	never chosen for voice B, so the two voices never share a note.
	"""

	note_a = chordwalk.chords.note_number(root_pc, IMPROV_ROOT_OCTAVE)
	pitches, _ = chordwalk.intervals.scale_degrees(root_pc, scale)
	bump = chordwalk.constants.SEMITONES_PER_OCTAVE * (octave + 1)
	candidates = [pitch + bump for pitch in pitches if pitch + bump != note_a]

	return [Voice("A", note_a), Voice("B", rng.choice(candidates))]


def play_bar (
	performer: chordwalk.events.Performer,
	voices: typing.Sequence[Voice],
	rhythms: typing.Sequence[typing.Sequence[bool]],
	step_ticks: int
) -> None:

	"""Play one bar of rhythms, one rhythm per voice.

	Per step every voice first updates its press state. Voices that are on
	are pressed (a voice still held from the previous step is released at
	the same instant and pressed again), then voices that just went silent
	are released. If anything sounded or stopped the next step starts one
	step after these events; otherwise the step is a rest and its time
	is added to the pending delta.
	"""

	steps = min(len(rhythm) for rhythm in rhythms)

	for step in range(steps):

		for voice, rhythm in zip(voices, rhythms):
			voice.step(rhythm[step])

		for voice in voices:
			if voice.pressed:
				if voice.was_pressed:
					performer.note_off(voice.note)
				performer.note_on(voice.note)

		for voice in voices:
			if voice.released:
				performer.note_off(voice.note)

		if any(voice.active for voice in voices):
			performer.cursor.set(step_ticks)
			continue

		performer.cursor.advance(step_ticks)


def release_all (performer: chordwalk.events.Performer, voices: typing.Sequence[Voice]) -> None:

	"""Release any voice still pressed after the last bar."""

	for voice in voices:
		if voice.pressed:
			performer.note_off(voice.note)
			voice.step(False)


def euclidean_improv (
	performer: chordwalk.events.Performer,
	root_pc: int,
	scale: str,
	octave: int,
	ticks_per_quarter: int,
	rng: random.Random,
	bars: int = BARS,
	rhythm: RhythmGenerator = chordwalk.sequence_utils.euclidean_rhythm
) -> ImprovResult:

	"""Improvise two voices over ``bars`` bars of sixteenth-note steps.

	Parameters:
		performer: Event output for the stage.
		root_pc: Root pitch class.
		scale: Scale name voice B picks its degree from.
		octave: Octave voice B's degrees are raised into.
		ticks_per_quarter: Tick resolution; one step is a quarter of it.
		rng: Random source for voice B's pitch and the per-bar pulse counts.
		bars: Number of bars to play.
		rhythm: Rhythm generator, ``euclidean_rhythm(pulses, steps)`` by default.

	Returns:
		An ``ImprovResult`` with the voices and the rhythms played per bar.
	"""

	steps = chordwalk.constants.ticks.STEPS_PER_BAR
	step_ticks = ticks_per_quarter // 4
	voices = choose_voices(root_pc, scale, octave, rng)
	result = ImprovResult(voices=voices)

	logger.info(f"Euclidean improvisation: A={voices[0].note} B={voices[1].note}")

	for bar in range(bars):

		rhythms = [rhythm(rng.randrange(steps), steps) for _ in voices]
		result.bars.append(rhythms)

		logger.debug(
			f"Bar {bar + 1}: "
			+ ", ".join(f"{voice.name} {chordwalk.sequence_utils.sequence_to_indices(r)}" for voice, r in zip(voices, rhythms))
		)

		play_bar(performer, voices, rhythms, step_ticks)

	release_all(performer, voices)

	return result
