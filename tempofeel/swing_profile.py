"""Tempo calibration for the swing tempo adapters.

A :class:`SwingProfile` describes a "feel": for each of four calibration
tempos it stores one value on seven curves (swing ratio, forward lean,
legato, accent, velocity compression, microtiming scale and jitter). Asking
the profile for a value at any other tempo interpolates linearly between the
two surrounding calibration points, and holds the end values outside the
calibrated span.

``intensity`` dials the whole feel up or down:

- Swing ratio and legato are anchored to their 120 BPM baseline. Intensity
  scales the deviation from that baseline, so 0.0 gives the baseline at every
  tempo.
- Microtiming scale is anchored to 1.0 (no scaling) the same way.
- Forward lean, accent, compression and jitter are scaled directly, so 0.0
  removes them.

Profiles are immutable and may be shared between any number of adapters::

    profile = SwingProfile.create(intensity=0.8, apply_microtiming=True)
    profile.get_swing_ratio(190)    # between 2.0 and 1.8
"""

import dataclasses
import typing

import tempofeel.constants


CALIBRATION_TEMPOS: typing.Tuple[float, ...] = (50.0, 120.0, 190.0, 240.0)
BASELINE_INDEX = 1

MIN_INTENSITY = 0.0
MAX_INTENSITY = 1.5

CurveType = typing.Tuple[float, ...]


def interpolate (tempo: float, values: typing.Sequence[float]) -> float:

	"""
	Piecewise-linear lookup of ``values`` (one per calibration tempo) at ``tempo``.

	Tempos at or below 50 BPM return the first value, at or above 240 BPM the
	last one.
	"""

	if len(values) != len(CALIBRATION_TEMPOS):
		raise ValueError(f"Calibration curve needs exactly {len(CALIBRATION_TEMPOS)} values (one per tempo in {CALIBRATION_TEMPOS}), got {len(values)}")

	if tempo <= CALIBRATION_TEMPOS[0]:
		return float(values[0])

	if tempo >= CALIBRATION_TEMPOS[-1]:
		return float(values[-1])

	for i in range(len(CALIBRATION_TEMPOS) - 1):

		low = CALIBRATION_TEMPOS[i]
		high = CALIBRATION_TEMPOS[i + 1]

		if tempo == low:
			return float(values[i])

		if tempo < high:
			t = (tempo - low) / (high - low)
			return values[i] + (values[i + 1] - values[i]) * t

	return float(values[-1])


@dataclasses.dataclass(frozen=True)
class SwingProfile:

	"""
	An immutable tempo to parameter calibration.

	Build one with :meth:`create` (melodic phrases) or :meth:`create_for_drums`
	(duration adjustment forced off). Each curve holds one value per tempo in
	``CALIBRATION_TEMPOS``, in ascending tempo order.

	Parameters:
		intensity: Overall strength of the feel, 0.0-1.5.
		swing_ratios: Long/short ratio of a swung eighth pair.
		forward_leans_ms: Timing shift in milliseconds (negative = ahead).
		legato_percents: Duration multiplier.
		accent_deltas: Velocity added to downbeat notes.
		velocity_compressions: Fraction of distance to the batch median
			velocity removed (0.0 = no compression).
		microtiming_scales: Multiplier for deviations from the triplet grid.
		jitter_sds_ms: Standard deviation of the random timing jitter.
		apply_approach_shortening: Shorten chromatic approach notes in
			bass lines at fast tempos.
		apply_ghost_note_reduction: Soften quiet drum hits at fast tempos.
	"""

	intensity: float = 1.0

	swing_ratios: CurveType = (2.3, 2.0, 1.8, 1.6)
	forward_leans_ms: CurveType = (0.0, -2.0, -5.0, -7.0)
	legato_percents: CurveType = (0.98, 0.95, 0.90, 0.88)
	accent_deltas: CurveType = (6.0, 4.0, 3.0, 2.0)
	velocity_compressions: CurveType = (0.0, 0.0, 0.15, 0.25)
	microtiming_scales: CurveType = (1.05, 1.0, 0.6, 0.35)
	jitter_sds_ms: CurveType = (3.0, 2.5, 2.0, 1.5)

	apply_swing_ratio: bool = True
	apply_forward_lean: bool = True
	apply_microtiming: bool = False
	apply_humanization: bool = True
	apply_velocity_dynamics: bool = True
	apply_duration_adjustment: bool = True

	# Articulation refinements, off unless asked for
	apply_approach_shortening: bool = False
	apply_ghost_note_reduction: bool = False

	def __post_init__ (self) -> None:

		if not MIN_INTENSITY <= self.intensity <= MAX_INTENSITY:
			raise ValueError(f"intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}, got {self.intensity}")

		for field in CURVE_FIELDS:
			values = tuple(float(v) for v in getattr(self, field))
			if len(values) != len(CALIBRATION_TEMPOS):
				raise ValueError(f"{field} needs exactly {len(CALIBRATION_TEMPOS)} values (one per tempo in {CALIBRATION_TEMPOS}), got {len(values)}")
			object.__setattr__(self, field, values)

		for i, ratio in enumerate(self.swing_ratios):
			if ratio <= 0:
				raise ValueError(f"swing_ratios[{i}] must be positive, got {ratio}")


	# ── Construction ─────────────────────────────────────────────────

	@staticmethod
	def create (intensity: float = 1.0, **overrides: typing.Any) -> "SwingProfile":

		"""
		Create a profile for melodic (bass) phrases.

		Any curve or ``apply_*`` flag can be overridden by keyword.
		"""

		return SwingProfile(intensity=intensity, **overrides)


	@staticmethod
	def create_for_drums (intensity: float = 1.0, **overrides: typing.Any) -> "SwingProfile":

		"""
		Create a profile for drum phrases.

		Duration adjustment is always disabled, whatever ``overrides`` say.
		"""

		overrides["apply_duration_adjustment"] = False
		return SwingProfile(intensity=intensity, **overrides)


	def with_changes (self, **overrides: typing.Any) -> "SwingProfile":

		"""Return a validated copy with some fields replaced."""

		return dataclasses.replace(self, **overrides)


	def is_disabled (self) -> bool:

		return self.intensity == 0


	# ── Per-tempo values ─────────────────────────────────────────────

	@property
	def baseline_swing_ratio (self) -> float:

		"""Swing ratio of the recorded phrases (the 120 BPM calibration value)."""

		return self.swing_ratios[BASELINE_INDEX]


	def get_swing_ratio (self, tempo: float) -> float:

		baseline = self.swing_ratios[BASELINE_INDEX]
		return baseline + (interpolate(tempo, self.swing_ratios) - baseline) * self.intensity


	def get_legato_percent (self, tempo: float) -> float:

		baseline = self.legato_percents[BASELINE_INDEX]
		return baseline + (interpolate(tempo, self.legato_percents) - baseline) * self.intensity


	def get_forward_lean_ms (self, tempo: float) -> float:

		return interpolate(tempo, self.forward_leans_ms) * self.intensity


	def get_accent_delta (self, tempo: float) -> float:

		"""Velocity boost for downbeats, unrounded."""

		return interpolate(tempo, self.accent_deltas) * self.intensity


	def get_velocity_compression (self, tempo: float) -> float:

		return interpolate(tempo, self.velocity_compressions) * self.intensity


	def get_microtiming_scale (self, tempo: float) -> float:

		return 1.0 + (interpolate(tempo, self.microtiming_scales) - 1.0) * self.intensity


	def get_jitter_sd_ms (self, tempo: float) -> float:

		return interpolate(tempo, self.jitter_sds_ms) * self.intensity


	def describe (self, tempo: float = tempofeel.constants.BASELINE_TEMPO) -> typing.Dict[str, float]:

		"""
		All per-tempo values at ``tempo``, keyed by curve name.
		"""

		return {
			"swing_ratio": self.get_swing_ratio(tempo),
			"forward_lean_ms": self.get_forward_lean_ms(tempo),
			"legato_percent": self.get_legato_percent(tempo),
			"accent_delta": self.get_accent_delta(tempo),
			"velocity_compression": self.get_velocity_compression(tempo),
			"microtiming_scale": self.get_microtiming_scale(tempo),
			"jitter_sd_ms": self.get_jitter_sd_ms(tempo),
		}


CURVE_FIELDS: typing.Tuple[str, ...] = (
	"swing_ratios",
	"forward_leans_ms",
	"legato_percents",
	"accent_deltas",
	"velocity_compressions",
	"microtiming_scales",
	"jitter_sds_ms",
)


NEUTRAL = SwingProfile.create(intensity=1.0)
DISABLED = SwingProfile.create(intensity=0.0)
