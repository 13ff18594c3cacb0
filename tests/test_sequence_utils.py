import pytest

import chordwalk.sequence_utils


def test_euclidean_known_patterns () -> None:

	"""Classic tresillo and four-on-the-floor patterns."""

	assert chordwalk.sequence_utils.generate_euclidean_sequence(8, 3) == [1, 0, 0, 1, 0, 0, 1, 0]
	assert chordwalk.sequence_utils.generate_euclidean_sequence(16, 4) == [1, 0, 0, 0] * 4


def test_euclidean_rhythm_length_and_on_count () -> None:

	"""Every pulse count from 0 to 16 gives 16 steps with exactly that many onsets."""

	for pulses in range(17):
		rhythm = chordwalk.sequence_utils.euclidean_rhythm(pulses, 16)

		assert len(rhythm) == 16
		assert sum(rhythm) == pulses
		assert all(isinstance(step, bool) for step in rhythm)


def test_euclidean_rhythm_other_lengths () -> None:

	"""Length and on-count hold for step counts other than 16."""

	for steps in (1, 5, 7, 12):
		for pulses in range(steps + 1):
			rhythm = chordwalk.sequence_utils.euclidean_rhythm(pulses, steps)
			assert len(rhythm) == steps
			assert sum(rhythm) == pulses


def test_euclidean_zero_pulses_is_silent () -> None:

	"""No pulses means no onsets."""

	assert chordwalk.sequence_utils.euclidean_rhythm(0, 16) == [False] * 16


def test_euclidean_starts_on_an_onset () -> None:

	"""Non-empty rhythms are rotated so the first step is on."""

	for pulses in range(1, 17):
		assert chordwalk.sequence_utils.euclidean_rhythm(pulses, 16)[0] is True


def test_euclidean_too_many_pulses_raises () -> None:

	"""Pulses cannot exceed steps."""

	with pytest.raises(ValueError, match="cannot be greater"):
		chordwalk.sequence_utils.generate_euclidean_sequence(4, 5)


def test_euclidean_negative_raises () -> None:

	"""Negative counts are rejected."""

	with pytest.raises(ValueError):
		chordwalk.sequence_utils.euclidean_rhythm(-1, 16)


def test_sequence_to_indices () -> None:

	"""Hit indices are extracted from both int and bool sequences."""

	assert chordwalk.sequence_utils.sequence_to_indices([1, 0, 0, 1]) == [0, 3]
	assert chordwalk.sequence_utils.sequence_to_indices([False, True, True]) == [1, 2]
	assert chordwalk.sequence_utils.sequence_to_indices([]) == []
