"""Single-note timing transformations.

Each function takes a note position (in beats) and returns a new position.
They hold no state: tempo-dependent magnitudes come from the
:class:`~tempofeel.swing_profile.SwingProfile` passed in, and each one is a
pass-through when its ``apply_*`` flag on the profile is off. Results are
never negative.
"""

import math
import random
import typing

import tempofeel.constants.durations
import tempofeel.swing_profile


# Swing ratios closer than this to the recorded baseline leave notes in place
SWING_RATIO_EPSILON = 0.05

# Hard limit for humanization jitter, in milliseconds
MAX_JITTER_MS = 7.0

# Jitter is scaled by this factor on downbeats to keep the pulse steady
DOWNBEAT_JITTER_FACTOR = 0.5


def _check_tempo (tempo: float) -> None:

	if tempo <= 0:
		raise ValueError(f"Tempo must be positive, got {tempo}")


def ms_to_beats (ms: float, tempo: float) -> float:

	"""
	Convert a duration in milliseconds to beats at ``tempo`` BPM.
	"""

	_check_tempo(tempo)
	return (ms / 60000.0) * tempo


def beats_to_ms (beats: float, tempo: float) -> float:

	"""
	Convert a duration in beats to milliseconds at ``tempo`` BPM.
	"""

	_check_tempo(tempo)
	return beats * 60000.0 / tempo


def nearest_grid_position (position: float, subdivision: int = 3) -> float:

	"""
	Snap ``position`` to the nearest multiple of ``1 / subdivision`` beat.

	The default subdivision of 3 is the triplet grid swung phrases are
	written on.
	"""

	if subdivision <= 0:
		raise ValueError("Subdivision must be positive")

	return math.floor(position * subdivision + 0.5) / subdivision


def _swing_eighth_index (position: float) -> typing.Optional[typing.Tuple[int, float]]:

	"""
	Identify which swing eighth of its beat ``position`` sits on.

	Returns ``(1, residual)`` or ``(2, residual)`` for the first or second
	swing eighth, where ``residual`` is the distance from the triplet grid
	point, or ``None`` when the note is not near either one.
	"""

	frac = position - math.floor(position)
	tolerance = tempofeel.constants.durations.GRID_TOLERANCE

	residual = frac - tempofeel.constants.durations.SWING_EIGHTH_FIRST
	if abs(residual) <= tolerance:
		return 1, residual

	residual = frac - tempofeel.constants.durations.SWING_EIGHTH_SECOND
	if abs(residual) <= tolerance:
		return 2, residual

	return None


def apply_swing_ratio (position: float, tempo: float, profile: tempofeel.swing_profile.SwingProfile) -> float:

	"""
	Move a swing eighth so the pair matches the profile's ratio at ``tempo``.

	For a target ratio ``r`` the off-beat eighth lands at ``r / (r + 1)`` of
	the beat and the first triplet eighth halfway to it. The note's original
	distance from its grid point is kept on top of the new offset. Notes near
	a beat boundary, and all notes when the target ratio is within 0.05 of the
	recorded baseline, are returned unchanged.
	"""

	if not profile.apply_swing_ratio:
		return position

	target_ratio = profile.get_swing_ratio(tempo)
	if abs(target_ratio - profile.baseline_swing_ratio) < SWING_RATIO_EPSILON:
		return position

	located = _swing_eighth_index(position)
	if located is None:
		return position

	index, residual = located
	target_offset = target_ratio / (target_ratio + 1.0)

	if index == 1:
		new_offset = target_offset / 2.0
	else:
		new_offset = target_offset

	return max(0.0, math.floor(position) + new_offset + residual)


def apply_forward_lean (position: float, tempo: float, profile: tempofeel.swing_profile.SwingProfile, multiplier: float = 1.0) -> float:

	"""
	Shift a note by the profile's forward lean at ``tempo``, scaled by ``multiplier``.
	"""

	if not profile.apply_forward_lean:
		return position

	lean_ms = profile.get_forward_lean_ms(tempo) * multiplier
	if lean_ms == 0:
		return position

	return max(0.0, position + ms_to_beats(lean_ms, tempo))


def apply_microtiming (position: float, tempo: float, profile: tempofeel.swing_profile.SwingProfile) -> float:

	"""
	Scale the note's deviation from the nearest triplet grid point.
	"""

	if not profile.apply_microtiming:
		return position

	grid = nearest_grid_position(position, subdivision=3)
	deviation = position - grid

	return max(0.0, grid + deviation * profile.get_microtiming_scale(tempo))


def apply_jitter (position: float, tempo: float, profile: tempofeel.swing_profile.SwingProfile, rng: random.Random, on_downbeat: bool = False) -> float:

	"""
	Add one clamped Gaussian timing deviation to a note.

	The sample (milliseconds, standard deviation from the profile) is limited
	to +/-7 ms and halved on downbeats.
	"""

	if not profile.apply_humanization:
		return position

	sd = profile.get_jitter_sd_ms(tempo)
	if sd <= 0:
		return position

	jitter = rng.gauss(0.0, sd)
	jitter = max(-MAX_JITTER_MS, min(MAX_JITTER_MS, jitter))

	if on_downbeat:
		jitter *= DOWNBEAT_JITTER_FACTOR

	return max(0.0, position + ms_to_beats(jitter, tempo))
