import logging
import os
import random
import sys

import yaml

import tempofeel.bass_adapter
import tempofeel.beat_range
import tempofeel.constants.durations as dur
import tempofeel.constants.gm_drums as gm_drums
import tempofeel.drum_kit
import tempofeel.drums_adapter
import tempofeel.midi_utils
import tempofeel.note_event
import tempofeel.phrase
import tempofeel.swing_profile
import tempofeel.time_signature


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

BASS_CHANNEL = 1
DRUM_CHANNEL = 9
BARS = 4


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_demo_bass () -> tempofeel.phrase.Phrase:

	"""
	A walking line in F: quarter notes with a swung pickup into every second bar.
	"""

	phrase = tempofeel.phrase.Phrase(channel=BASS_CHANNEL)
	line = [41, 45, 48, 50, 46, 50, 53, 52, 41, 43, 45, 47, 48, 46, 45, 43]

	for beat, pitch in enumerate(line):
		phrase.add(tempofeel.note_event.NoteEvent(pitch=pitch, velocity=84 + (6 if beat % 2 == 0 else 0), position=float(beat), duration=0.9))

	for bar in (1, 3):
		position = bar * 4 - 1 + dur.SWING_EIGHTH_SECOND
		phrase.add(tempofeel.note_event.NoteEvent(pitch=44, velocity=70, position=position, duration=0.3))

	return phrase


def build_demo_drums () -> tempofeel.phrase.Phrase:

	"""
	Ride "ding ding-a ding", hi-hat on 2 and 4, feathered kick and a crash on the top.
	"""

	phrase = tempofeel.phrase.Phrase(channel=DRUM_CHANNEL, is_drums=True)

	def hit (pitch: int, position: float, velocity: int) -> None:
		phrase.add(tempofeel.note_event.NoteEvent(pitch=pitch, velocity=velocity, position=position, duration=0.1))

	for bar in range(BARS):
		start = bar * 4.0
		for beat in range(4):
			hit(gm_drums.RIDE_1, start + beat, 90 if beat % 2 else 80)
			hit(gm_drums.KICK_1, start + beat, 45)
		for beat in (1, 3):
			hit(gm_drums.RIDE_1, start + beat + dur.SWING_EIGHTH_SECOND, 70)
			hit(gm_drums.HI_HAT_PEDAL, start + beat, 75)
		hit(gm_drums.SNARE_1, start + 3 + dur.SWING_EIGHTH_SECOND, 55)

	hit(gm_drums.CRASH_1, 0.0, 100)

	return phrase


def main () -> None:

	"""
	Render the demo phrases at the configured tempo and save them as MIDI.
	"""

	config_path = sys.argv[1] if len(sys.argv) > 1 else 'config.yaml'
	config = load_config(config_path)

	adapter_config = config.get('adapter', {})
	tempo = float(adapter_config.get('tempo', 190))
	intensity = float(adapter_config.get('intensity', 1.0))
	seed = adapter_config.get('seed')
	filename = config.get('output', {}).get('filename', f"tempofeel_{int(tempo)}bpm.mid")

	logger.info(f"Adapting demo phrases to {tempo} BPM (intensity {intensity})")

	rng = random.Random(seed)
	ts = tempofeel.time_signature.FOUR_FOUR
	beat_range = tempofeel.beat_range.BeatRange(0.0, BARS * ts.beats_per_bar)

	bass_profile = tempofeel.swing_profile.SwingProfile.create(intensity)
	drums_profile = tempofeel.swing_profile.SwingProfile.create_for_drums(intensity)

	logger.info(f"Profile at {tempo} BPM: {bass_profile.describe(tempo)}")

	bass = build_demo_bass()
	drums = build_demo_drums()

	bass_adapter = tempofeel.bass_adapter.SwingBassTempoAdapter(bass_profile, ts, rng=rng)
	drums_adapter = tempofeel.drums_adapter.SwingDrumsTempoAdapter(drums_profile, ts, tempofeel.drum_kit.DrumKeyMap.gm(), rng=rng)

	changed_bass = bass_adapter.adapt_to_tempo(bass, beat_range, None, tempo)
	changed_drums = drums_adapter.adapt_to_tempo(drums, beat_range, None, tempo)

	logger.info(f"Changed {changed_bass} bass note(s) and {changed_drums} drum note(s)")

	try:
		tempofeel.midi_utils.save_phrases([bass, drums], tempo, filename)
	except OSError as e:
		logger.error(f"Failed to save MIDI file: {e}")


if __name__ == "__main__":
	main()
