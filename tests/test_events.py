import pytest

import chordwalk.event_emitter
import chordwalk.events

import conftest


def test_cursor_flush_returns_pending_and_resets () -> None:

	"""flush() hands over the pending delta exactly once."""

	cursor = chordwalk.events.DeltaCursor()
	cursor.advance(120)
	cursor.advance(240)

	assert cursor.flush() == 360
	assert cursor.flush() == 0
	assert cursor.elapsed == 360


def test_cursor_elapsed_counts_pending () -> None:

	"""Absolute time includes ticks not yet flushed."""

	cursor = chordwalk.events.DeltaCursor()
	cursor.advance(100)
	cursor.flush()
	cursor.advance(20)

	assert cursor.elapsed == 120


def test_cursor_rejects_negative_time () -> None:

	"""Time only moves forward."""

	cursor = chordwalk.events.DeltaCursor()

	with pytest.raises(ValueError):
		cursor.advance(-1)


def test_cursor_set_requires_flushed_cursor () -> None:

	"""set() must not discard pending time."""

	cursor = chordwalk.events.DeltaCursor()
	cursor.set(60)

	assert cursor.pending == 60

	with pytest.raises(ValueError):
		cursor.set(60)


def test_chord_on_shares_one_delta (recording: conftest.Recording) -> None:

	"""The first note of a chord takes the pending delta, the rest are simultaneous."""

	recording.cursor.advance(480)
	recording.performer.chord_on([60, 64, 67])

	assert [e.delta for e in recording.events] == [480, 0, 0]
	assert all(e.is_note_on for e in recording.events)
	assert all(e.velocity == 99 for e in recording.events)


def test_hold_releases_after_duration (recording: conftest.Recording) -> None:

	"""hold() presses and releases a chord with the release after the duration."""

	recording.performer.hold((60, 64), 960)

	assert [(e.kind, e.note, e.delta) for e in recording.events] == [
		("note_on", 60, 0),
		("note_on", 64, 0),
		("note_off", 60, 960),
		("note_off", 64, 0),
	]
	assert recording.events[2].velocity is None
	conftest.assert_paired(recording.events)


def test_missing_is_published (recording: conftest.Recording) -> None:

	"""Misses are returned and published as chord_missing."""

	miss = recording.performer.missing("progression", "Cm13", "unknown chord")

	assert recording.misses == [miss]
	assert miss.label == "Cm13"
	assert recording.events == []


def test_performer_validates_velocity_and_channel () -> None:

	"""Out-of-range MIDI values are rejected up front."""

	cursor = chordwalk.events.DeltaCursor()
	emitter = chordwalk.event_emitter.EventEmitter()

	with pytest.raises(ValueError):
		chordwalk.events.Performer(cursor, emitter, velocity=128)

	with pytest.raises(ValueError):
		chordwalk.events.Performer(cursor, emitter, velocity=0)

	with pytest.raises(ValueError):
		chordwalk.events.Performer(cursor, emitter, channel=16)
