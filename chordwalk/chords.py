"""Chord definitions and pitch class utilities.

This module provides chord suffix definitions, pitch class mappings, and the
`ChordVoicing` class for representing resolved chords.

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g., `"C"`, `"F#"`, `"Bb"`) to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Maps pitch classes to note names
- `CHORD_INTERVALS`: Maps chord suffixes (e.g., `"m7"`, `"maj9"`) to interval lists (semitones from root)

Module-level helpers:
- `key_name_to_pc(key_name)`: Validate a note name and return its pitch class (0–11).
  Raises `ValueError` for unknown names.
- `frequency_to_note(frequency)`: Nearest MIDI note number for a frequency in Hz.
- `resolve_chord(abbreviation)`: Parse an abbreviation such as `"Dm7"` into a
  `ChordVoicing`, or return `None` when it is not known.
"""

import dataclasses
import math
import typing

import chordwalk.constants


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

# A4 = 440 Hz = MIDI note 69
REFERENCE_FREQUENCY = 440.0
REFERENCE_NOTE = 69


def key_name_to_pc (key_name: str) -> int:

	"""Validate a note name and return its pitch class (0–11).

	The letter is case-insensitive, so ``"f#"`` and ``"bb"`` are accepted.

	Parameters:
		key_name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Returns:
		Pitch class integer (0–11).

	Raises:
		ValueError: If the note name is not recognised.

	Example:
		```python
		key_name_to_pc("C")   # → 0
		key_name_to_pc("f#")  # → 6
		key_name_to_pc("Bb")  # → 10
		```
	"""

	normalized = key_name.strip()
	normalized = normalized[:1].upper() + normalized[1:]

	if normalized not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {key_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[normalized]


def frequency_to_note (frequency: float) -> int:

	"""Return the MIDI note number nearest to a frequency in Hz.

	Example:
		```python
		frequency_to_note(440.0)   # → 69  (A4)
		frequency_to_note(261.63)  # → 60  (C4)
		```
	"""

	if frequency <= 0:
		raise ValueError(f"Frequency must be positive, got {frequency}")

	return int(round(REFERENCE_NOTE + chordwalk.constants.SEMITONES_PER_OCTAVE * math.log2(frequency / REFERENCE_FREQUENCY)))


def note_number (pitch_class: int, octave: int) -> int:

	"""Convert a pitch class and octave to a MIDI note number (C4 = 60)."""

	return (octave + 1) * chordwalk.constants.SEMITONES_PER_OCTAVE + pitch_class


CHORD_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"": [0, 4, 7],
	"m": [0, 3, 7],
	"dim": [0, 3, 6],
	"+": [0, 4, 8],
	"aug": [0, 4, 8],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
	"6": [0, 4, 7, 9],
	"m6": [0, 3, 7, 9],
	"7": [0, 4, 7, 10],
	"maj7": [0, 4, 7, 11],
	"m7": [0, 3, 7, 10],
	"mMaj7": [0, 3, 7, 11],
	"m7b5": [0, 3, 6, 10],
	"dim7": [0, 3, 6, 9],
	"maj7#5": [0, 4, 8, 11],
	"add9": [0, 4, 7, 14],
	"9": [0, 4, 7, 10, 14],
	"maj9": [0, 4, 7, 11, 14],
	"m9": [0, 3, 7, 10, 14],
}


@dataclasses.dataclass(frozen=True)
class ChordVoicing:

	"""
	A resolved chord: a human-readable label and its absolute MIDI pitches.
	"""

	label: str
	pitches: typing.Tuple[int, ...]


	def __post_init__ (self) -> None:

		if not self.pitches:
			raise ValueError(f"Chord {self.label!r} has no pitches")


	@property
	def root (self) -> int:

		"""Lowest-indexed voice of the chord."""

		return self.pitches[0]


	def transpose (self, semitones: int) -> "ChordVoicing":

		"""Return a copy of the voicing shifted by ``semitones``.

		Example:
			```python
			chord = resolve_chord("C")    # pitches (0, 4, 7)
			chord.transpose(24).pitches   # (24, 28, 31)
			```
		"""

		return ChordVoicing(label=self.label, pitches=tuple(p + semitones for p in self.pitches))


	def rooted_at (self, root_midi: int) -> "ChordVoicing":

		"""Return a copy of the voicing moved so its root sits on ``root_midi``."""

		return self.transpose(root_midi - self.root)


def split_abbreviation (abbreviation: str) -> typing.Optional[typing.Tuple[str, str]]:

	"""Split ``"C#m7"`` into ``("C#", "m7")``. Returns ``None`` if there is no valid root."""

	abbreviation = abbreviation.strip()

	for length in (2, 1):
		root_name = abbreviation[:length]
		if root_name in NOTE_NAME_TO_PC:
			return root_name, abbreviation[length:]

	return None


def resolve_chord (abbreviation: str) -> typing.Optional[ChordVoicing]:

	"""Resolve a chord abbreviation to a voicing in the base octave.

	Pitches are ``root_pc + interval``, so a chord on B reaches into the
	second octave (``"B"`` → 11, 15, 18). Callers move the voicing to the
	register they need.

	Parameters:
		abbreviation: Root name followed by a suffix from ``CHORD_INTERVALS``
			(e.g. ``"C"``, ``"Dm7"``, ``"Bdim"``, ``"Ebmaj9"``).

	Returns:
		The resolved ``ChordVoicing``, or ``None`` when the root or suffix is
		unknown.

	Example:
		```python
		resolve_chord("Am").pitches    # (9, 12, 16)
		resolve_chord("Cm13")          # None
		```
	"""

	parts = split_abbreviation(abbreviation)

	if parts is None:
		return None

	root_name, suffix = parts

	if suffix not in CHORD_INTERVALS:
		return None

	root_pc = NOTE_NAME_TO_PC[root_name]

	return ChordVoicing(
		label=f"{root_name}{suffix}",
		pitches=tuple(root_pc + interval for interval in CHORD_INTERVALS[suffix])
	)
