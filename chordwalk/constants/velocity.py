"""MIDI velocity and channel constants.

Velocity is the MIDI attack strength (1-127). A note-on with velocity 0 reads
as a note-off, so 0 is not accepted. Every generated note-on uses the
same velocity; only the value handed to ``Performance`` changes it.
"""

# Primary defaults
DEFAULT_VELOCITY = 99
DEFAULT_CHANNEL = 0

# MIDI standard range
MIN_VELOCITY = 1
MAX_VELOCITY = 127
MAX_CHANNEL = 15
