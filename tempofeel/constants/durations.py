"""Beat-based duration constants.

All values are in **beats**, where 1.0 = one quarter note. Swung phrases are
written on a triplet grid, so the two swing eighths of a beat sit near
``SWING_EIGHTH_FIRST`` and ``SWING_EIGHTH_SECOND``::

    import tempofeel.constants.durations as dur

    # The off-beat swing eighth of beat 3
    position = 2 + dur.SWING_EIGHTH_SECOND
"""

# Triplet subdivision points inside a beat

SWING_EIGHTH_FIRST = 1 / 3
SWING_EIGHTH_SECOND = 2 / 3

# Notes within this window of a grid point are considered on that point

GRID_TOLERANCE = 0.15

# Shortest duration a note may be shrunk to

MIN_DURATION = 0.01
