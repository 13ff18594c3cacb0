"""Chord progression playback with arpeggiation textures.

The progression is replayed once per texture. Each texture re-attacks the
resolved chord for a number of repeats derived from the ratio between the
tick resolution and the texture's rate, so every texture covers the same
musical length at any resolution:

- ``RepeatedChords(rate)`` - full voicing, ``tpq * 2 // rate`` repeats.
- ``DownUp(rate)`` - ``tpq * 4 // rate`` repeats alternating between the
  lowest voice an octave down (even repeats) and the full voicing (odd
  repeats).

Every repeat lasts ``rate`` ticks, so a texture spans ``repeats * rate``
ticks per chord.
"""

import dataclasses
import logging
import typing

import chordwalk.chords
import chordwalk.constants
import chordwalk.events
import chordwalk.intervals


logger = logging.getLogger(__name__)

SECTION = "progression"

# Chords are voiced two octaves above the base position.
PROGRESSION_OCTAVE_BUMP = 2 * chordwalk.constants.SEMITONES_PER_OCTAVE

ChordResolver = typing.Callable[[str], typing.Optional[chordwalk.chords.ChordVoicing]]


@dataclasses.dataclass
class RepeatedChords:

	"""Re-attack the full voicing every ``rate`` ticks."""

	rate: int
	ticks_per_quarter: int


	@property
	def name (self) -> str:

		return f"repeated chords ({self.rate} ticks)"


	@property
	def repeats (self) -> int:

		return self.ticks_per_quarter * 2 // self.rate


	@property
	def duration (self) -> int:

		return self.repeats * self.rate


	def play (self, performer: chordwalk.events.Performer, voicing: chordwalk.chords.ChordVoicing) -> None:

		pitches = voicing.transpose(PROGRESSION_OCTAVE_BUMP).pitches

		for _ in range(self.repeats):
			performer.hold(pitches, self.rate)


@dataclasses.dataclass
class DownUp:

	"""Alternate a low pedal on the root with the full voicing.

	The "down" pass sounds only the lowest-indexed voice, an octave below the
	voicing. The "up" pass sounds the whole voicing.
	"""

	rate: int
	ticks_per_quarter: int


	@property
	def name (self) -> str:

		return f"down-up ({self.rate} ticks)"


	@property
	def repeats (self) -> int:

		return self.ticks_per_quarter * 4 // self.rate


	@property
	def duration (self) -> int:

		return self.repeats * self.rate


	def play (self, performer: chordwalk.events.Performer, voicing: chordwalk.chords.ChordVoicing) -> None:

		up = voicing.transpose(PROGRESSION_OCTAVE_BUMP).pitches
		down = (up[0] - chordwalk.constants.SEMITONES_PER_OCTAVE,)

		for n in range(self.repeats):
			performer.hold(down if n % 2 == 0 else up, self.rate)


Texture = typing.Union[RepeatedChords, DownUp]


def default_textures (ticks_per_quarter: int) -> typing.List[Texture]:

	"""The four textures in playing order: two chord rates, then two down-up rates."""

	return [
		RepeatedChords(ticks_per_quarter * 2, ticks_per_quarter),
		RepeatedChords(ticks_per_quarter, ticks_per_quarter),
		DownUp(ticks_per_quarter, ticks_per_quarter),
		DownUp(ticks_per_quarter // 2, ticks_per_quarter),
	]


def chord_quality (degree: int) -> int:

	"""Even degrees get the seventh (quality 1), odd degrees the triad (quality 0)."""

	return 1 if degree % 2 == 0 else 0


def play_progression (
	performer: chordwalk.events.Performer,
	root_pc: int,
	scale: str,
	progression: typing.Sequence[int],
	ticks_per_quarter: int,
	resolve: ChordResolver = chordwalk.chords.resolve_chord,
	textures: typing.Optional[typing.List[Texture]] = None
) -> typing.List[chordwalk.events.ChordMiss]:

	"""Play the whole progression once for each texture.

	A slot whose chord cannot be resolved is reported and skipped: it emits
	nothing and consumes no time.

	Parameters:
		performer: Event output for the stage.
		root_pc: Root pitch class of the scale.
		scale: Scale name (``"major"`` or ``"melodic_minor"``).
		progression: 0-based scale-degree indices.
		ticks_per_quarter: Tick resolution.
		resolve: Chord lookup, ``chordwalk.chords.resolve_chord`` by default.
		textures: Textures to play, ``default_textures()`` by default.

	Returns:
		The misses reported while playing.
	"""

	if textures is None:
		textures = default_textures(ticks_per_quarter)

	keys, _ = chordwalk.intervals.scale_degrees(root_pc, scale)
	numerals = chordwalk.intervals.roman_numerals(scale)
	misses: typing.List[chordwalk.events.ChordMiss] = []

	logger.info("Chord progression:")

	for pass_index, texture in enumerate(textures):

		logger.debug(f"Texture {texture.name}: {texture.repeats} repeats")

		for degree in progression:

			if degree < 0 or degree >= len(keys):
				misses.append(performer.missing(SECTION, f"degree {degree}", "not in scale"))
				continue

			abbreviation = chordwalk.intervals.chord_abbreviation(scale, keys[degree], degree, chord_quality(degree))

			if abbreviation is None:
				misses.append(performer.missing(SECTION, numerals[degree], "no chord at this quality"))
				continue

			if pass_index == 0:
				logger.info(f"{numerals[degree]}\t{abbreviation}")

			voicing = resolve(abbreviation)

			if voicing is None:
				misses.append(performer.missing(SECTION, abbreviation, "unknown chord"))
				continue

			texture.play(performer, voicing)

	return misses
