"""General MIDI Level 1 drum notes and their drum-voice subsets.

Standard MIDI percussion assignments for channel 10 (0-indexed channel 9).
``GM_DRUM_SUBSETS`` groups these notes into the voices the drums adapter
treats differently (ride and hi-hat keep time, the snare leans ahead, crashes
push hardest)::

    import tempofeel.drum_kit

    key_map = tempofeel.drum_kit.DrumKeyMap.gm()
    key_map.get_subset(tempofeel.constants.gm_drums.RIDE_1)    # DrumSubset.CYMBAL
"""

import typing

import tempofeel.drum_kit


# ─── Individual note constants ───────────────────────────────────────
#
# General MIDI Level 1 percussion key map (notes 27-87).
# Names follow the GM specification with underscores for readability.

HIGH_Q = 27
SLAP = 28
SCRATCH_PUSH = 29
SCRATCH_PULL = 30
STICKS = 31
SQUARE_CLICK = 32
METRONOME_CLICK = 33
METRONOME_BELL = 34
KICK_2 = 35
KICK_1 = 36
SIDE_STICK = 37
SNARE_1 = 38
HAND_CLAP = 39
SNARE_2 = 40
LOW_FLOOR_TOM = 41
HI_HAT_CLOSED = 42
HIGH_FLOOR_TOM = 43
HI_HAT_PEDAL = 44
LOW_TOM = 45
HI_HAT_OPEN = 46
LOW_MID_TOM = 47
HIGH_MID_TOM = 48
CRASH_1 = 49
HIGH_TOM = 50
RIDE_1 = 51
CHINESE_CYMBAL = 52
RIDE_BELL = 53
TAMBOURINE = 54
SPLASH_CYMBAL = 55
COWBELL = 56
CRASH_2 = 57
VIBRASLAP = 58
RIDE_2 = 59
HIGH_BONGO = 60
LOW_BONGO = 61
MUTE_HIGH_CONGA = 62
OPEN_HIGH_CONGA = 63
LOW_CONGA = 64
HIGH_TIMBALE = 65
LOW_TIMBALE = 66
HIGH_AGOGO = 67
LOW_AGOGO = 68
CABASA = 69
MARACAS = 70
SHORT_WHISTLE = 71
LONG_WHISTLE = 72
SHORT_GUIRO = 73
LONG_GUIRO = 74
CLAVES = 75
HIGH_WOODBLOCK = 76
LOW_WOODBLOCK = 77
MUTE_CUICA = 78
OPEN_CUICA = 79
MUTE_TRIANGLE = 80
OPEN_TRIANGLE = 81
SHAKER = 82
JINGLE_BELL = 83
BELL_TREE = 84
CASTANETS = 85
MUTE_SURDO = 86
OPEN_SURDO = 87


# ─── Drum-voice subsets ──────────────────────────────────────────────
#
# Notes 27-34 (clicks, scratches, sticks) are deliberately unclassified.

_S = tempofeel.drum_kit.DrumSubset

GM_DRUM_SUBSETS: typing.Dict[int, tempofeel.drum_kit.DrumSubset] = {
	KICK_2: _S.BASS,
	KICK_1: _S.BASS,
	SIDE_STICK: _S.SNARE,
	SNARE_1: _S.SNARE,
	HAND_CLAP: _S.SNARE,
	SNARE_2: _S.SNARE,
	LOW_FLOOR_TOM: _S.TOM,
	HI_HAT_CLOSED: _S.HI_HAT,
	HIGH_FLOOR_TOM: _S.TOM,
	HI_HAT_PEDAL: _S.HI_HAT,
	LOW_TOM: _S.TOM,
	HI_HAT_OPEN: _S.HI_HAT,
	LOW_MID_TOM: _S.TOM,
	HIGH_MID_TOM: _S.TOM,
	CRASH_1: _S.CRASH,
	HIGH_TOM: _S.TOM,
	RIDE_1: _S.CYMBAL,
	CHINESE_CYMBAL: _S.CRASH,
	RIDE_BELL: _S.CYMBAL,
	SPLASH_CYMBAL: _S.CRASH,
	CRASH_2: _S.CRASH,
	RIDE_2: _S.CYMBAL,
}

# Latin and auxiliary percussion (tambourine to open surdo), cymbals excepted

GM_DRUM_SUBSETS.update({
	pitch: _S.PERCUSSION
	for pitch in range(TAMBOURINE, OPEN_SURDO + 1)
	if pitch not in GM_DRUM_SUBSETS
})
