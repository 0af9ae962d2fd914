"""MIDI velocity constants.

Velocity is the MIDI attack strength. Note-on velocity 0 means note-off, so
note events always carry a velocity in ``MIN_VELOCITY``..``MAX_VELOCITY``.
"""

# Anchor for velocity compression when no note is selected
DEFAULT_MEDIAN_VELOCITY = 64

# MIDI note-on range
MIN_VELOCITY = 1
MAX_VELOCITY = 127
