"""Shared orchestration for the swing tempo adapters.

Recorded swing phrases sound right at the tempo they were played at (about
120 BPM). A :class:`TempoAdapter` re-renders such a phrase for another tempo:
every selected note goes through the same position pipeline

1. swing-ratio repositioning,
2. forward lean (scaled per note by the concrete adapter),
3. microtiming scaling,
4. humanization jitter,

then gets its velocity adjusted (downbeat accent and compression toward the
batch median) and, for adapters that allow it, its duration. All changed notes
are swapped into the phrase with one :meth:`~tempofeel.phrase.Phrase.replace_all`
call.

An adapter owns its random generator, so it must not be shared between
threads. Give each thread its own adapter, or pass ``rng`` per call.
"""

import dataclasses
import logging
import math
import random
import typing

import tempofeel.beat_range
import tempofeel.constants
import tempofeel.constants.velocity
import tempofeel.note_event
import tempofeel.phrase
import tempofeel.swing_profile
import tempofeel.time_signature
import tempofeel.transformations


logger = logging.getLogger(__name__)


NoteTester = typing.Callable[[tempofeel.note_event.NoteEvent], bool]

# Latest position allowed before the end of a clamping beat range
RANGE_END_POSITION_MARGIN = 0.1


def round_half_up (value: float) -> int:

	"""Round to the nearest integer, halves away from negative infinity."""

	return int(math.floor(value + 0.5))


def median_velocity (notes: typing.Sequence[tempofeel.note_event.NoteEvent]) -> int:

	"""
	Median velocity of ``notes``; the upper of the two middle values for an
	even count. An empty sequence gives ``DEFAULT_MEDIAN_VELOCITY``.
	"""

	if not notes:
		return tempofeel.constants.velocity.DEFAULT_MEDIAN_VELOCITY

	velocities = sorted(n.velocity for n in notes)
	return velocities[len(velocities) // 2]


@dataclasses.dataclass(frozen=True)
class TempoParameters:

	"""
	Values that are the same for every note of one adaptation pass.
	"""

	tempo: float
	median_velocity: int
	accent_delta: int
	velocity_compression: float
	legato_percent: float


class TempoAdapter:

	"""
	Base class for the bass and drums adapters.

	Subclasses say which kind of phrase they accept (``accepts_drums``) and
	override the per-note hooks :meth:`forward_lean_multiplier`,
	:meth:`accepts_accent`, :meth:`base_velocity`, :meth:`adapt_duration` and
	:meth:`clamp_duration`.
	"""

	accepts_drums: bool = False

	def __init__ (self, profile: tempofeel.swing_profile.SwingProfile, time_signature: tempofeel.time_signature.TimeSignature, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Bind the adapter to a profile and a time signature.

		Parameters:
			profile: Calibration to apply. Shared, never modified.
			time_signature: Used to find downbeats.
			rng: Random generator for humanization jitter. Seed it for
				reproducible output. Defaults to a fresh ``random.Random()``.
		"""

		if profile is None:
			raise ValueError(f"{type(self).__name__} needs a SwingProfile, got None")

		if time_signature is None:
			raise ValueError(f"{type(self).__name__} needs a TimeSignature, got None")

		self.profile = profile
		self.time_signature = time_signature
		self.rng: random.Random = rng or random.Random()


	def adapt_to_tempo (
		self,
		phrase: tempofeel.phrase.Phrase,
		beat_range: typing.Optional[tempofeel.beat_range.BeatRange] = None,
		tester: typing.Optional[NoteTester] = None,
		tempo: float = tempofeel.constants.BASELINE_TEMPO,
		rng: typing.Optional[random.Random] = None
	) -> int:

		"""
		Re-render the notes of ``phrase`` for ``tempo``, in place.

		Does nothing when the phrase is empty, is of the wrong kind for this
		adapter (drums vs melodic) or the profile intensity is 0.

		Parameters:
			phrase: Phrase to modify.
			beat_range: Only notes starting in this range are processed, and
				results are kept inside it. ``None`` processes every note.
			tester: Only notes for which this returns true are processed.
				``None`` accepts every note.
			tempo: Target tempo in BPM, must be positive. Defaults to the
				120 BPM the phrases were recorded at.
			rng: Random generator for this call only. Defaults to the
				adapter's own.

		Returns:
			The number of notes replaced.
		"""

		if phrase is None:
			raise ValueError("adapt_to_tempo() needs a Phrase, got None")

		if tempo <= 0:
			raise ValueError(f"Tempo must be positive, got {tempo}")

		if phrase.is_empty() or phrase.is_drums != self.accepts_drums or self.profile.is_disabled():
			logger.debug("%s skipped: phrase=%r intensity=%s", type(self).__name__, phrase, self.profile.intensity)
			return 0

		if rng is None:
			rng = self.rng

		selected = [
			ne for ne in phrase
			if (beat_range is None or beat_range.contains_note(ne)) and (tester is None or tester(ne))
		]

		params = TempoParameters(
			tempo = tempo,
			median_velocity = median_velocity(selected),
			accent_delta = round_half_up(self.profile.get_accent_delta(tempo)),
			velocity_compression = self.profile.get_velocity_compression(tempo),
			legato_percent = self.profile.get_legato_percent(tempo),
		)

		logger.debug("%s tempo=%s range=%s selected=%d params=%s", type(self).__name__, tempo, beat_range, len(selected), params)

		replacements: typing.Dict[tempofeel.note_event.NoteEvent, tempofeel.note_event.NoteEvent] = {}

		for ne in selected:

			new_ne = self._adapt_note(ne, params, beat_range, rng, phrase)

			if new_ne is not None:
				replacements[ne] = new_ne

		if replacements:
			phrase.replace_all(replacements)

		logger.debug("%s replaced %d of %d selected notes", type(self).__name__, len(replacements), len(selected))

		return len(replacements)


	def _adapt_note (
		self,
		ne: tempofeel.note_event.NoteEvent,
		params: TempoParameters,
		beat_range: typing.Optional[tempofeel.beat_range.BeatRange],
		rng: random.Random,
		phrase: tempofeel.phrase.Phrase
	) -> typing.Optional[tempofeel.note_event.NoteEvent]:

		"""
		Compute the replacement for one note, or ``None`` if nothing changed.
		"""

		profile = self.profile
		tempo = params.tempo
		on_downbeat = self.time_signature.is_downbeat(self.time_signature.beat_in_bar(ne.position))

		position = tempofeel.transformations.apply_swing_ratio(ne.position, tempo, profile)
		position = tempofeel.transformations.apply_forward_lean(position, tempo, profile, self.forward_lean_multiplier(ne))
		position = tempofeel.transformations.apply_microtiming(position, tempo, profile)
		position = tempofeel.transformations.apply_jitter(position, tempo, profile, rng, on_downbeat=on_downbeat)

		velocity = self._adapt_velocity(ne, params, on_downbeat)
		duration = self.adapt_duration(ne, params, phrase)

		if beat_range is not None:
			# The start bound wins when the range is narrower than the end margin
			position = max(beat_range.start, min(position, beat_range.end - RANGE_END_POSITION_MARGIN))
			duration = self.clamp_duration(position, duration, beat_range)

		if position == ne.position and velocity == ne.velocity and duration == ne.duration:
			return None

		return ne.set_all(ne.pitch, duration, velocity, position, ne.accidental, copy_properties=True)


	def _adapt_velocity (self, ne: tempofeel.note_event.NoteEvent, params: TempoParameters, on_downbeat: bool) -> int:

		velocity = ne.velocity

		if self.profile.apply_velocity_dynamics:

			velocity = self.base_velocity(ne, params)

			if on_downbeat and self.accepts_accent(ne):
				velocity += params.accent_delta

			if params.velocity_compression > 0:
				median = params.median_velocity
				velocity = round_half_up(median + (velocity - median) * (1.0 - params.velocity_compression))

		return max(tempofeel.constants.velocity.MIN_VELOCITY, min(tempofeel.constants.velocity.MAX_VELOCITY, velocity))


	# ── Per-instrument hooks ─────────────────────────────────────────

	def forward_lean_multiplier (self, ne: tempofeel.note_event.NoteEvent) -> float:

		"""Scale applied to the profile's forward lean for this note."""

		return 1.0


	def accepts_accent (self, ne: tempofeel.note_event.NoteEvent) -> bool:

		"""Whether a downbeat accent may be added to this note."""

		return True


	def base_velocity (self, ne: tempofeel.note_event.NoteEvent, params: TempoParameters) -> int:

		"""Velocity the accent and compression steps start from, before clamping."""

		return ne.velocity


	def adapt_duration (self, ne: tempofeel.note_event.NoteEvent, params: TempoParameters, phrase: tempofeel.phrase.Phrase) -> float:

		"""New duration of the note before range clamping."""

		return ne.duration


	def clamp_duration (self, position: float, duration: float, beat_range: tempofeel.beat_range.BeatRange) -> float:

		"""Duration of a note at ``position`` once kept inside ``beat_range``."""

		return duration
