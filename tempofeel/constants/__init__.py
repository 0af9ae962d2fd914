"""Constants for tempofeel.

- ``tempofeel.constants.durations`` - Beat-based durations and swing grid values
- ``tempofeel.constants.velocity`` - MIDI velocity constants
- ``tempofeel.constants.gm_drums`` - General MIDI drum notes and their drum-voice subsets

Everything in the engine is expressed in **beats** (1.0 = one quarter note)
and milliseconds. MIDI ticks only appear at the export boundary, see
``MIDI_TICKS_PER_BEAT``.
"""

# Resolution used when phrases are exported to Standard MIDI Files.

MIDI_TICKS_PER_BEAT = 480

# Reference tempo of recorded swing phrases.

BASELINE_TEMPO = 120.0
