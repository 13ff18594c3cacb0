import dataclasses
import logging
import random
import typing

import chordwalk.chords
import chordwalk.intervals


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Selection:

	"""
	The root, scale and progression a performance is built on.
	"""

	root_pc: int
	scale: str
	progression: typing.List[int]


	@property
	def root_name (self) -> str:

		return chordwalk.chords.PC_TO_NOTE_NAME[self.root_pc]


	@property
	def scale_name (self) -> str:

		"""Human-readable name, e.g. ``"C major scale"``."""

		return f"{self.root_name} {self.scale.replace('_', ' ')} scale"


def select_root (note_name: typing.Optional[str], frequency: typing.Optional[float], rng: random.Random) -> int:

	"""Choose the root pitch class.

	An explicit note name wins, then a frequency (converted to its nearest
	note), then a uniform random choice over the twelve pitch classes.

	Raises:
		ValueError: If the note name is unknown or the frequency is not positive.
	"""

	if note_name:
		return chordwalk.chords.key_name_to_pc(note_name)

	if frequency:
		return chordwalk.chords.frequency_to_note(frequency) % 12

	return rng.randrange(12)


def select_scale (minor: bool) -> str:

	return chordwalk.intervals.MELODIC_MINOR if minor else chordwalk.intervals.MAJOR


def select_progression (scale: str, rng: random.Random) -> typing.List[int]:

	"""Pick one of the scale's known progressions uniformly at random."""

	return list(rng.choice(chordwalk.intervals.progressions(scale)))


def select (
	rng: random.Random,
	note_name: typing.Optional[str] = None,
	frequency: typing.Optional[float] = None,
	minor: bool = False
) -> Selection:

	"""Run the whole selection stage."""

	root_pc = select_root(note_name, frequency, rng)
	scale = select_scale(minor)
	selection = Selection(root_pc=root_pc, scale=scale, progression=select_progression(scale, rng))

	logger.info(f"{selection.scale_name}, progression {selection.progression}")

	return selection
