import logging
import typing

import mido

import chordwalk.constants
import chordwalk.events


logger = logging.getLogger(__name__)

DEFAULT_COPYRIGHT = "Generated by chordwalk"


@typing.runtime_checkable
class EventSink (typing.Protocol):

	"""
	Protocol for anything that consumes timed events in emission order.
	"""

	def emit (self, event: chordwalk.events.TimedEvent) -> None:

		...


class EventList:

	"""
	Collects timed events in memory.
	"""

	def __init__ (self) -> None:

		self.events: typing.List[chordwalk.events.TimedEvent] = []


	def emit (self, event: chordwalk.events.TimedEvent) -> None:

		self.events.append(event)


	def __len__ (self) -> int:

		return len(self.events)


	def __iter__ (self) -> typing.Iterator[chordwalk.events.TimedEvent]:

		return iter(self.events)


def to_message (event: chordwalk.events.TimedEvent) -> mido.Message:

	"""Convert a timed event to a mido message whose ``time`` is the delta."""

	if event.is_note_on:
		return mido.Message('note_on', channel=event.channel, note=event.note, velocity=event.velocity, time=event.delta)

	return mido.Message('note_off', channel=event.channel, note=event.note, velocity=0, time=event.delta)


class MidiFileSink:

	"""
	Writes timed events to a single-track Standard MIDI File.

	Events are appended as they arrive; nothing touches the disk until
	``save()`` is called.
	"""

	def __init__ (
		self,
		filename: str,
		ticks_per_quarter: int = chordwalk.constants.TICKS_PER_QUARTER,
		track_name: typing.Optional[str] = None,
		copyright: typing.Optional[str] = DEFAULT_COPYRIGHT
	) -> None:

		"""
		Parameters:
			filename: Destination ``.mid`` path.
			ticks_per_quarter: Resolution written to the file header.
			track_name: Optional track name meta event.
			copyright: Optional copyright meta event.
		"""

		self.filename = filename
		self.midi_file = mido.MidiFile(type=0, ticks_per_beat=ticks_per_quarter)
		self.track = mido.MidiTrack()
		self.midi_file.tracks.append(self.track)
		self.event_count = 0

		if copyright:
			self.track.append(mido.MetaMessage('copyright', text=copyright, time=0))

		if track_name:
			self.set_track_name(track_name)


	def set_track_name (self, name: str) -> None:

		"""Add a track name meta event at the current position."""

		self.track.append(mido.MetaMessage('track_name', name=name, time=0))


	def emit (self, event: chordwalk.events.TimedEvent) -> None:

		self.track.append(to_message(event))
		self.event_count += 1


	def save (self) -> None:

		"""Write the file. ``OSError`` propagates if the path cannot be written."""

		logger.info(f"Saving {self.event_count} events to {self.filename}...")

		self.midi_file.save(self.filename)

		logger.info(f"Saved {self.filename}")
