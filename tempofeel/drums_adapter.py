import random
import typing

import tempofeel.drum_kit
import tempofeel.note_event
import tempofeel.swing_profile
import tempofeel.tempo_adapter
import tempofeel.time_signature


# Forward lean scale per drum voice. Ride and hi-hat keep time, so they stay
# closest to the grid; the snare and crashes push ahead.
FORWARD_LEAN_MULTIPLIERS: typing.Dict[tempofeel.drum_kit.DrumSubset, float] = {
	tempofeel.drum_kit.DrumSubset.CYMBAL: 0.5,
	tempofeel.drum_kit.DrumSubset.HI_HAT: 0.5,
	tempofeel.drum_kit.DrumSubset.BASS: 1.0,
	tempofeel.drum_kit.DrumSubset.TOM: 1.0,
	tempofeel.drum_kit.DrumSubset.SNARE: 1.2,
	tempofeel.drum_kit.DrumSubset.CRASH: 1.5,
}

DEFAULT_FORWARD_LEAN_MULTIPLIER = 1.0

# Only the time-keeping voices are accented on downbeats
ACCENTED_SUBSETS: typing.FrozenSet[tempofeel.drum_kit.DrumSubset] = frozenset({
	tempofeel.drum_kit.DrumSubset.CYMBAL,
	tempofeel.drum_kit.DrumSubset.HI_HAT,
})

# Hits quieter than the threshold are ghost notes; at fast tempos they are
# softened, but never below the floor
GHOST_VELOCITY_THRESHOLD = 60
GHOST_VELOCITY_REDUCTION = 5
GHOST_VELOCITY_FLOOR = 30
GHOST_TEMPO_MIN = 160.0


class SwingDrumsTempoAdapter (tempofeel.tempo_adapter.TempoAdapter):

	"""
	Adapt a swung drum-kit phrase to a new tempo.

	Each voice leans ahead by its own amount (see
	``FORWARD_LEAN_MULTIPLIERS``), only ride and hi-hat notes are accented on
	downbeats, and note durations are never changed. With
	``apply_ghost_note_reduction`` on, quiet ghost notes are softened further at
	fast tempos.
	"""

	accepts_drums = True

	def __init__ (self, profile: tempofeel.swing_profile.SwingProfile, time_signature: tempofeel.time_signature.TimeSignature, key_map: tempofeel.drum_kit.DrumKeyMap, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Parameters:
			key_map: Classifies each pitch into a drum voice.
		"""

		super().__init__(profile, time_signature, rng)

		if key_map is None:
			raise ValueError("SwingDrumsTempoAdapter needs a DrumKeyMap, got None")

		self.key_map = key_map


	def forward_lean_multiplier (self, ne: tempofeel.note_event.NoteEvent) -> float:

		subset = self.key_map.get_subset(ne.pitch)

		if subset is None:
			return DEFAULT_FORWARD_LEAN_MULTIPLIER

		return FORWARD_LEAN_MULTIPLIERS.get(subset, DEFAULT_FORWARD_LEAN_MULTIPLIER)


	def accepts_accent (self, ne: tempofeel.note_event.NoteEvent) -> bool:

		return self.key_map.get_subset(ne.pitch) in ACCENTED_SUBSETS


	def base_velocity (self, ne: tempofeel.note_event.NoteEvent, params: tempofeel.tempo_adapter.TempoParameters) -> int:

		velocity = ne.velocity

		if not self.profile.apply_ghost_note_reduction or params.tempo < GHOST_TEMPO_MIN:
			return velocity

		if velocity >= GHOST_VELOCITY_THRESHOLD or velocity <= GHOST_VELOCITY_FLOOR:
			return velocity

		return max(GHOST_VELOCITY_FLOOR, velocity - GHOST_VELOCITY_REDUCTION)
