import pytest

import chordwalk.intervals
import chordwalk.scale_chords

import conftest


TPQ = 480
HOLD = TPQ * 2


def test_raise_degrees_keeps_walk_ascending () -> None:

	"""Degrees that wrap below the first one are lifted an octave."""

	assert chordwalk.scale_chords.raise_degrees([9, 11, 1, 2], 24) == [33, 35, 37, 38]
	assert chordwalk.scale_chords.raise_degrees([0, 2, 4], 24) == [24, 26, 28]
	assert chordwalk.scale_chords.raise_degrees([], 24) == []


def test_walk_c_major (recording: conftest.Recording) -> None:

	"""C major: three quality passes, iii and vii° have no extended chord."""

	result = chordwalk.scale_chords.play_scale_chords(recording.performer, 0, "major", TPQ)

	assert len(result.cadences) == 3
	assert [m.label for m in result.misses] == ["iii", "vii°"]
	assert recording.total_ticks == (8 + 8 + 6) * HOLD
	conftest.assert_paired(recording.events)


def test_walk_first_pass_chords (recording: conftest.Recording) -> None:

	"""The first pass plays the diatonic triads rooted on the raised degrees, then the cadence."""

	chordwalk.scale_chords.play_scale_chords(recording.performer, 0, "major", TPQ)

	ons = [e.note for e in recording.events if e.is_note_on]

	assert ons[:6] == [24, 28, 31, 26, 29, 33]   # C, Dm
	assert ons[18:21] == [35, 38, 41]            # Bdim
	assert ons[21:24] == [36, 40, 43]            # C an octave up


def test_walk_chords_are_held_two_quarters (recording: conftest.Recording) -> None:

	"""Each chord's note-offs come two quarter notes after its note-ons."""

	chordwalk.scale_chords.play_scale_chords(recording.performer, 0, "major", TPQ)

	offs = [e for e in recording.events if not e.is_note_on and e.delta > 0]

	assert all(e.delta == HOLD for e in offs)
	assert all(e.delta == 0 for e in recording.events if e.is_note_on)


def test_two_qualities_give_two_cadences (recording: conftest.Recording, monkeypatch: pytest.MonkeyPatch) -> None:

	"""A seven-degree scale with two chord qualities closes two passes."""

	interval_key, _, numerals, progressions = chordwalk.intervals.SCALE_MAP["major"]
	table = [["", "maj7"], ["m", "m7"], ["m", "m7"], ["", "maj7"], ["", "7"], ["m", "m7"], ["dim", "m7b5"]]
	monkeypatch.setitem(chordwalk.intervals.SCALE_MAP, "major", (interval_key, table, numerals, progressions))

	result = chordwalk.scale_chords.play_scale_chords(recording.performer, 0, "major", TPQ)

	assert [c.label for c in result.cadences] == ["C", "Cmaj7"]
	assert result.misses == []
	assert recording.total_ticks == 16 * HOLD


def test_cadence_is_tonic_an_octave_up (recording: conftest.Recording) -> None:

	"""The cadence transposes the captured tonic chord by twelve semitones."""

	result = chordwalk.scale_chords.play_scale_chords(recording.performer, 2, "major", TPQ)

	assert result.cadences[0].pitches == (38, 42, 45)
	assert result.cadences[1].pitches == (38, 42, 45, 49)


def test_unknown_chord_is_skipped (recording: conftest.Recording) -> None:

	"""A lookup miss is reported and takes no time."""

	result = chordwalk.scale_chords.play_scale_chords(
		recording.performer, 0, "major", TPQ, resolve=conftest.resolver_without("Dm")
	)

	assert "Dm" in [m.label for m in result.misses]
	assert recording.total_ticks == (7 + 8 + 6) * HOLD
	conftest.assert_paired(recording.events)


def test_missing_tonic_skips_the_cadence (recording: conftest.Recording) -> None:

	"""Without a resolved first chord there is nothing to return to."""

	result = chordwalk.scale_chords.play_scale_chords(
		recording.performer, 0, "major", TPQ, resolve=conftest.resolver_without("C")
	)

	assert len(result.cadences) == 2
	assert "cadence" in [m.label for m in result.misses]
	assert recording.total_ticks == (6 + 8 + 6) * HOLD


def test_walk_melodic_minor (recording: conftest.Recording) -> None:

	"""Melodic minor offers extended chords on i, IV and V only."""

	result = chordwalk.scale_chords.play_scale_chords(recording.performer, 9, "melodic_minor", TPQ)

	assert [c.label for c in result.cadences] == ["Am", "AmMaj7", "Am6"]
	assert [m.label for m in result.misses] == ["ii", "III+", "vi°", "vii°"]
	conftest.assert_paired(recording.events)


def test_scale_run (recording: conftest.Recording) -> None:

	"""The scale run climbs one quarter note per degree, then plays the octave."""

	chordwalk.scale_chords.play_scale(recording.performer, 0, "major", TPQ)

	ons = [e.note for e in recording.events if e.is_note_on]

	assert ons == [48, 50, 52, 53, 55, 57, 59, 60]
	assert recording.total_ticks == 8 * TPQ
	conftest.assert_paired(recording.events)
