"""Tick-based MIDI timing constants.

Generated files use **480 ticks per quarter note** unless the caller asks for
another resolution. Every stage derives its durations from the resolution it
is given, so only the step grid is fixed.
"""

TICKS_PER_QUARTER = 480

# The improvisation grid: sixteen sixteenth-note steps per bar.
STEPS_PER_BAR = 16
