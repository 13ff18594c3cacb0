import dataclasses
import logging
import typing

import chordwalk.chords
import chordwalk.constants
import chordwalk.events
import chordwalk.intervals


logger = logging.getLogger(__name__)

SECTION = "scale chords"

WALK_OCTAVE_BUMP = 2 * chordwalk.constants.SEMITONES_PER_OCTAVE
SCALE_RUN_OCTAVE_BUMP = 4 * chordwalk.constants.SEMITONES_PER_OCTAVE

ChordResolver = typing.Callable[[str], typing.Optional[chordwalk.chords.ChordVoicing]]


@dataclasses.dataclass
class WalkResult:

	"""
	What the scale-chord walk played: one cadence per completed quality pass.
	"""

	cadences: typing.List[chordwalk.chords.ChordVoicing] = dataclasses.field(default_factory=list)
	misses: typing.List[chordwalk.events.ChordMiss] = dataclasses.field(default_factory=list)


def raise_degrees (pitches: typing.Sequence[int], bump: int) -> typing.List[int]:

	"""
	Move degree pitches up by ``bump`` semitones, keeping the walk ascending.

	Any degree that would land below the first degree is raised one more
	octave.

	Example:
		```python
		raise_degrees([9, 11, 1, 2], 24)  # → [33, 35, 37, 38]
		```
	"""

	if not pitches:
		return []

	start = pitches[0] + bump
	raised = []

	for pitch in pitches:
		pitch += bump
		if pitch < start:
			pitch += chordwalk.constants.SEMITONES_PER_OCTAVE
		raised.append(pitch)

	return raised


def play_scale_chords (
	performer: chordwalk.events.Performer,
	root_pc: int,
	scale: str,
	ticks_per_quarter: int,
	resolve: ChordResolver = chordwalk.chords.resolve_chord
) -> WalkResult:

	"""Play every diatonic chord of the scale, once per chord-quality variant.

	Each chord is held for two quarter notes with its root on the raised
	scale degree. After each quality pass the tonic chord of that pass is
	replayed an octave higher as a cadence. Out-of-range degrees and unknown
	chords are reported and skipped without taking any time.

	Parameters:
		performer: Event output for the stage.
		root_pc: Root pitch class of the scale.
		scale: Scale name (``"major"`` or ``"melodic_minor"``).
		ticks_per_quarter: Tick resolution.
		resolve: Chord lookup, ``chordwalk.chords.resolve_chord`` by default.

	Returns:
		A ``WalkResult`` with the cadences played and the misses reported.
	"""

	hold = ticks_per_quarter * 2
	pitches, _ = chordwalk.intervals.scale_degrees(root_pc, scale)
	keys = raise_degrees(pitches, WALK_OCTAVE_BUMP)
	numerals = chordwalk.intervals.roman_numerals(scale)
	result = WalkResult()

	logger.info("Chords in scale")

	for quality in range(chordwalk.intervals.quality_count(scale)):

		logger.info(f"Chord type {quality}")
		tonic: typing.Optional[chordwalk.chords.ChordVoicing] = None

		for degree, numeral in enumerate(numerals):

			abbreviation = None
			if degree < len(keys):
				abbreviation = chordwalk.intervals.chord_abbreviation(scale, keys[degree], degree, quality)

			if abbreviation is None:
				result.misses.append(performer.missing(SECTION, numeral, f"no chord of type {quality}"))
				continue

			voicing = resolve(abbreviation)

			if voicing is None:
				result.misses.append(performer.missing(SECTION, abbreviation, "unknown chord"))
				continue

			logger.info(f"{numeral}\t{voicing.label}")
			voicing = voicing.rooted_at(keys[degree])

			if degree == 0:
				tonic = voicing

			performer.hold(voicing.pitches, hold)

		# back to the first chord
		if tonic is None:
			result.misses.append(performer.missing(SECTION, "cadence", f"no tonic chord of type {quality}"))
			continue

		cadence = tonic.transpose(chordwalk.constants.SEMITONES_PER_OCTAVE)
		performer.hold(cadence.pitches, hold)
		result.cadences.append(cadence)

	return result


def play_scale (
	performer: chordwalk.events.Performer,
	root_pc: int,
	scale: str,
	ticks_per_quarter: int
) -> None:

	"""Play the scale upwards, one quarter note per degree, then the octave."""

	pitches, names = chordwalk.intervals.scale_degrees(root_pc, scale)
	keys = raise_degrees(pitches, SCALE_RUN_OCTAVE_BUMP)

	logger.info(f"Scale run: {' '.join(names)}")

	for key in keys:
		performer.hold((key,), ticks_per_quarter)

	performer.hold((keys[0] + chordwalk.constants.SEMITONES_PER_OCTAVE,), ticks_per_quarter)
