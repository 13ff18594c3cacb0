"""Constants for chordwalk.

This package contains two sets of constants:

- ``chordwalk.constants.ticks`` - Tick-based MIDI timing at the default resolution
- ``chordwalk.constants.velocity`` - MIDI velocity and channel defaults

The default resolution is re-exported here, so ``chordwalk.constants.TICKS_PER_QUARTER``
works without importing the submodule.
"""

# Matches chordwalk.constants.ticks.TICKS_PER_QUARTER.
TICKS_PER_QUARTER = 480

SEMITONES_PER_OCTAVE = 12

MIN_NOTE = 0
MAX_NOTE = 127
