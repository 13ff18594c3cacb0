import typing

import chordwalk.chords


MAJOR = "major"
MELODIC_MINOR = "melodic_minor"


INTERVAL_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"major_ionian": [0, 2, 4, 5, 7, 9, 11],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
}


# ---------------------------------------------------------------------------
# Rich diatonic chord tables.
#
# One row per scale degree (I–VII). Each row lists chord suffixes by quality
# index: 0 = triad, 1 = seventh, 2 = extension. Rows are not all the same
# length, so any lookup by (degree, quality) must be bounds-checked.
# ---------------------------------------------------------------------------

MAJOR_RICH_CHORDS: typing.List[typing.List[str]] = [
	["", "maj7", "maj9"],
	["m", "m7", "m9"],
	["m", "m7"],
	["", "maj7", "maj9"],
	["", "7", "9"],
	["m", "m7", "m9"],
	["dim", "m7b5"],
]

MELODIC_MINOR_RICH_CHORDS: typing.List[typing.List[str]] = [
	["m", "mMaj7", "m6"],
	["m", "m7"],
	["+", "maj7#5"],
	["", "7", "9"],
	["", "7", "9"],
	["dim", "m7b5"],
	["dim", "m7b5"],
]


MAJOR_ROMAN_NUMERALS: typing.List[str] = [
	"I", "ii", "iii", "IV", "V", "vi", "vii°"
]

MELODIC_MINOR_ROMAN_NUMERALS: typing.List[str] = [
	"i", "ii", "III+", "IV", "V", "vi°", "vii°"
]


# Progressions are 0-based scale-degree indices.

MAJOR_PROGRESSIONS: typing.List[typing.List[int]] = [
	[0, 3, 4, 0],     # I  IV V  I
	[0, 4, 5, 3],     # I  V  vi IV
	[0, 5, 3, 4],     # I  vi IV V
	[1, 4, 0],        # ii V  I
	[0, 3, 0, 4],     # I  IV I  V
	[5, 3, 0, 4],     # vi IV I  V
	[0, 2, 3, 4],     # I  iii IV V
	[0, 5, 1, 4],     # I  vi ii V
]

MINOR_PROGRESSIONS: typing.List[typing.List[int]] = [
	[0, 3, 4, 0],     # i  IV V  i
	[0, 1, 4, 0],     # i  ii V  i
	[0, 3, 0, 4],     # i  IV i  V
	[0, 2, 3, 4],     # i  III+ IV V
	[0, 6, 0, 4],     # i  vii° i V
	[1, 4, 0],        # ii V  i
]


# Map scale names to (interval_key, rich chords, roman numerals, progressions).
SCALE_MAP: typing.Dict[str, typing.Tuple[str, typing.List[typing.List[str]], typing.List[str], typing.List[typing.List[int]]]] = {
	MAJOR:         ("major_ionian",  MAJOR_RICH_CHORDS,         MAJOR_ROMAN_NUMERALS,         MAJOR_PROGRESSIONS),
	MELODIC_MINOR: ("melodic_minor", MELODIC_MINOR_RICH_CHORDS, MELODIC_MINOR_ROMAN_NUMERALS, MINOR_PROGRESSIONS),
}


def _scale_entry (scale: str) -> typing.Tuple[str, typing.List[typing.List[str]], typing.List[str], typing.List[typing.List[int]]]:

	if scale not in SCALE_MAP:
		raise ValueError(f"Unknown scale '{scale}'. Available: {sorted(SCALE_MAP)}")

	return SCALE_MAP[scale]


def get_intervals (name: str) -> typing.List[int]:

	"""
	Return a named interval list from the registry.
	"""

	if name not in INTERVAL_DEFINITIONS:
		raise ValueError(f"Unknown interval set: {name}")

	return list(INTERVAL_DEFINITIONS[name])


def scale_degrees (root_pc: int, scale: str) -> typing.Tuple[typing.List[int], typing.List[str]]:

	"""
	Return the degree pitches and note names of a scale.

	Pitches are placed in the base octave as ``root_pc + interval``, so they
	ascend but may pass 11 (e.g. A major ends on G# = 20).

	Parameters:
		root_pc: Root pitch class (0 = C, 1 = C#/Db, …, 11 = B).
		scale: ``"major"`` or ``"melodic_minor"``.

	Returns:
		``(pitches, names)``, both ordered from the first degree.

	Example:
		```python
		scale_degrees(0, "major")
		# → ([0, 2, 4, 5, 7, 9, 11], ["C", "D", "E", "F", "G", "A", "B"])
		```
	"""

	interval_key, _, _, _ = _scale_entry(scale)
	pitches = [root_pc + interval for interval in get_intervals(interval_key)]
	names = [chordwalk.chords.PC_TO_NOTE_NAME[p % 12] for p in pitches]

	return pitches, names


def rich_scale_chords (scale: str) -> typing.List[typing.List[str]]:

	"""Return the chord suffix table of a scale, one row per degree."""

	return _scale_entry(scale)[1]


def roman_numerals (scale: str) -> typing.List[str]:

	"""Return the roman numeral label of each scale degree."""

	return _scale_entry(scale)[2]


def progressions (scale: str) -> typing.List[typing.List[int]]:

	"""Return the known progression templates of a scale."""

	return _scale_entry(scale)[3]


def quality_count (scale: str) -> int:

	"""Number of chord-quality variants offered by the richest degree."""

	return max(len(row) for row in rich_scale_chords(scale))


def chord_abbreviation (scale: str, degree_pitch: int, degree: int, quality: int) -> typing.Optional[str]:

	"""
	Build the chord abbreviation for a scale degree at a quality index.

	Returns ``None`` when the degree or quality falls outside the scale's
	chord table.

	Example:
		```python
		chord_abbreviation("major", 7, 4, 1)   # → "G7"
		chord_abbreviation("major", 11, 6, 2)  # → None (vii° has no extension)
		```
	"""

	table = rich_scale_chords(scale)

	if degree < 0 or degree >= len(table):
		return None

	if quality < 0 or quality >= len(table[degree]):
		return None

	return f"{chordwalk.chords.PC_TO_NOTE_NAME[degree_pitch % 12]}{table[degree][quality]}"
