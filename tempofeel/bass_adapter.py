import tempofeel.beat_range
import tempofeel.constants.durations
import tempofeel.note_event
import tempofeel.phrase
import tempofeel.tempo_adapter


# A note shortened to fit a beat range ends this far before the range end
RANGE_END_DURATION_MARGIN = 0.05

# Chromatic approach notes: one or two semitones from the next note, played
# shorter from this tempo up
APPROACH_INTERVALS = (1, 2)
APPROACH_TEMPO_MIN = 160.0
APPROACH_DURATION_FACTOR = 0.93


def is_approach_note (ne: tempofeel.note_event.NoteEvent, phrase: tempofeel.phrase.Phrase) -> bool:

	"""
	True when the note after ``ne`` in ``phrase`` is a half or whole step away.
	"""

	following = phrase.higher(ne)

	if following is None:
		return False

	return abs(following.pitch - ne.pitch) in APPROACH_INTERVALS


class SwingBassTempoAdapter (tempofeel.tempo_adapter.TempoAdapter):

	"""
	Adapt a swung bass (or other melodic) phrase to a new tempo.

	Forward lean is applied uniformly, every downbeat note gets the accent,
	and durations follow the profile's legato curve: walking lines get
	slightly shorter and more detached as the tempo rises. With
	``apply_approach_shortening`` on, chromatic approach notes are clipped a
	little further at fast tempos.

	Example::

		adapter = SwingBassTempoAdapter(SwingProfile.create(0.8), FOUR_FOUR, rng=random.Random(7))
		adapter.adapt_to_tempo(bass_phrase, BeatRange(0, 16), None, tempo=210)
	"""

	accepts_drums = False

	def adapt_duration (self, ne: tempofeel.note_event.NoteEvent, params: tempofeel.tempo_adapter.TempoParameters, phrase: tempofeel.phrase.Phrase) -> float:

		if not self.profile.apply_duration_adjustment:
			return ne.duration

		duration = ne.duration * params.legato_percent

		if self.profile.apply_approach_shortening and params.tempo >= APPROACH_TEMPO_MIN and is_approach_note(ne, phrase):
			duration *= APPROACH_DURATION_FACTOR

		return max(tempofeel.constants.durations.MIN_DURATION, duration)


	def clamp_duration (self, position: float, duration: float, beat_range: tempofeel.beat_range.BeatRange) -> float:

		if position + duration > beat_range.end:
			duration = max(tempofeel.constants.durations.MIN_DURATION, beat_range.end - RANGE_END_DURATION_MARGIN - position)

		return duration
