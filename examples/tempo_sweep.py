import logging
import random

import tempofeel
import tempofeel.__main__ as demo
import tempofeel.midi_utils

logging.basicConfig(level=logging.INFO)

# Render the same four-bar demo at a range of tempos so the files
# can be compared side by side in a DAW.
TEMPOS = [60, 100, 140, 180, 220, 260]

bass_profile = tempofeel.SwingProfile.create(intensity=1.0)

# Drums feel a little stiff at full intensity on the slow end
drums_profile = tempofeel.SwingProfile.create_for_drums(intensity=0.8)

for tempo in TEMPOS:

	rng = random.Random(tempo)

	bass = demo.build_demo_bass()
	drums = demo.build_demo_drums()

	beat_range = tempofeel.BeatRange(0.0, demo.BARS * tempofeel.FOUR_FOUR.beats_per_bar)

	tempofeel.SwingBassTempoAdapter(bass_profile, tempofeel.FOUR_FOUR, rng=rng).adapt_to_tempo(bass, beat_range, None, tempo)
	tempofeel.SwingDrumsTempoAdapter(drums_profile, tempofeel.FOUR_FOUR, tempofeel.DrumKeyMap.gm(), rng=rng).adapt_to_tempo(drums, beat_range, None, tempo)

	logging.info(f"{tempo} BPM: {bass_profile.describe(tempo)}")

	tempofeel.midi_utils.save_phrases([bass, drums], tempo, f"sweep_{tempo}bpm.mid")
