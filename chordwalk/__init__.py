"""
chordwalk - procedural chord progressions, scale-chord walks and euclidean
improvisation rendered as timed MIDI note events.

One generation pass picks a root, a scale (major or melodic minor) and a
chord progression, then plays three sections:

- **Progression textures.** The progression is replayed with four
  arpeggiation textures: repeated chords at two rates, then a down-up
  bass-pedal pattern at two rates.
- **Scale-chord walk.** Every diatonic chord of the scale, once for each
  chord-quality variant (triads, sevenths, extensions), each pass closing
  with the tonic chord an octave up.
- **Euclidean improvisation.** Two voices, the root and a random scale
  degree, driven by fresh euclidean rhythms every bar for four bars.

Output is a stream of note-on/note-off events with delta times in ticks.
Any callable can listen to the stream; ``MidiFileSink`` writes it to a
Standard MIDI File with mido.

Minimal example:

    ```python
    import chordwalk

    performance = chordwalk.Performance(seed=42)
    sink = chordwalk.MidiFileSink("output.mid")
    performance.on("event", sink.emit)
    performance.generate(root="C")
    sink.save()
    ```

Package-level exports: ``Performance``, ``MidiFileSink``, ``EventList``, ``generate``.
"""

import chordwalk.midi_file
import chordwalk.performance


Performance = chordwalk.performance.Performance
MidiFileSink = chordwalk.midi_file.MidiFileSink
EventList = chordwalk.midi_file.EventList
generate = chordwalk.performance.generate
