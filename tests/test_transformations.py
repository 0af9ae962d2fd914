import random

import pytest

import conftest
import tempofeel.swing_profile
import tempofeel.transformations


# ── Conversions ──────────────────────────────────────────────────────

def test_ms_to_beats () -> None:

	"""At 120 BPM one beat lasts 500 ms."""

	assert tempofeel.transformations.ms_to_beats(500, 120) == pytest.approx(1.0)
	assert tempofeel.transformations.ms_to_beats(-5, 240) == pytest.approx(-0.02)


def test_beats_to_ms () -> None:

	assert tempofeel.transformations.beats_to_ms(1.0, 120) == pytest.approx(500.0)
	assert tempofeel.transformations.beats_to_ms(0.25, 60) == pytest.approx(250.0)


@pytest.mark.parametrize("tempo", [0, -120])
def test_conversions_require_positive_tempo (tempo: float) -> None:

	with pytest.raises(ValueError, match="Tempo"):
		tempofeel.transformations.ms_to_beats(10, tempo)

	with pytest.raises(ValueError, match="Tempo"):
		tempofeel.transformations.beats_to_ms(1, tempo)


def test_nearest_grid_position () -> None:

	"""Positions snap to the triplet grid by default."""

	assert tempofeel.transformations.nearest_grid_position(0.3) == pytest.approx(1 / 3)
	assert tempofeel.transformations.nearest_grid_position(0.7) == pytest.approx(2 / 3)
	assert tempofeel.transformations.nearest_grid_position(0.9) == pytest.approx(1.0)
	assert tempofeel.transformations.nearest_grid_position(5.1) == pytest.approx(5.0)
	assert tempofeel.transformations.nearest_grid_position(0.3, subdivision=4) == pytest.approx(0.25)


def test_nearest_grid_position_rejects_bad_subdivision () -> None:

	with pytest.raises(ValueError):
		tempofeel.transformations.nearest_grid_position(1.0, subdivision=0)


# ── Swing ratio ──────────────────────────────────────────────────────

def test_swing_second_eighth_moves_to_target_offset (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	"""0.667 at 190 BPM lands on 1.8 / 2.8 plus its small residual."""

	result = tempofeel.transformations.apply_swing_ratio(0.667, 190, reference_profile)
	expected = 1.8 / 2.8 + (0.667 - 2 / 3)

	assert result == pytest.approx(expected, abs=1e-9)
	assert result != pytest.approx(0.667, abs=1e-3)


def test_swing_first_eighth_moves_to_half_target (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	result = tempofeel.transformations.apply_swing_ratio(1 / 3, 190, reference_profile)

	assert result == pytest.approx(1.8 / 2.8 / 2, abs=1e-9)


def test_swing_keeps_beat_and_residual (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	"""A late off-beat in beat 4 keeps both its beat and its lateness."""

	result = tempofeel.transformations.apply_swing_ratio(3.7, 240, reference_profile)
	expected = 3 + 1.6 / 2.6 + (0.7 - 2 / 3)

	assert result == pytest.approx(expected, abs=1e-9)


def test_swing_slower_tempo_widens_swing (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	"""Below the baseline the off-beat moves later."""

	result = tempofeel.transformations.apply_swing_ratio(2 / 3, 50, reference_profile)

	assert result == pytest.approx(2.3 / 3.3, abs=1e-9)
	assert result > 2 / 3


@pytest.mark.parametrize("position", [0.0, 0.1, 0.95, 2.05, 0.5])
def test_swing_leaves_beat_and_straight_positions (reference_profile: tempofeel.swing_profile.SwingProfile, position: float) -> None:

	"""Notes near a beat boundary, or midway between the swing eighths, are untouched."""

	assert tempofeel.transformations.apply_swing_ratio(position, 240, reference_profile) == position


def test_swing_near_baseline_is_noop (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	"""At 130 BPM the ratio differs from the baseline by less than 0.05."""

	assert tempofeel.transformations.apply_swing_ratio(0.667, 120, reference_profile) == 0.667
	assert tempofeel.transformations.apply_swing_ratio(0.667, 130, reference_profile) == 0.667


def test_swing_disabled_is_passthrough (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	profile = reference_profile.with_changes(apply_swing_ratio=False)

	assert tempofeel.transformations.apply_swing_ratio(0.667, 240, profile) == 0.667


# ── Forward lean ─────────────────────────────────────────────────────

def test_forward_lean_moves_ahead (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	"""-5 ms at 190 BPM is a little over 0.0158 beat."""

	result = tempofeel.transformations.apply_forward_lean(1.0, 190, reference_profile)

	assert result == pytest.approx(1.0 - 5 / 60000 * 190)


def test_forward_lean_multiplier (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	plain = 1.0 - tempofeel.transformations.apply_forward_lean(1.0, 240, reference_profile)
	scaled = 1.0 - tempofeel.transformations.apply_forward_lean(1.0, 240, reference_profile, multiplier=1.5)

	assert scaled == pytest.approx(plain * 1.5)


def test_forward_lean_never_negative (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	assert tempofeel.transformations.apply_forward_lean(0.0, 240, reference_profile) == 0.0


def test_forward_lean_zero_at_slowest_tempo (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	assert tempofeel.transformations.apply_forward_lean(1.0, 50, reference_profile) == 1.0


def test_forward_lean_disabled (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	profile = reference_profile.with_changes(apply_forward_lean=False)

	assert tempofeel.transformations.apply_forward_lean(1.0, 240, profile) == 1.0


# ── Microtiming ──────────────────────────────────────────────────────

def test_microtiming_disabled_by_default (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	assert tempofeel.transformations.apply_microtiming(0.7, 240, reference_profile) == 0.7


def test_microtiming_compresses_deviation (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	"""At 240 BPM deviations shrink to 35%."""

	profile = reference_profile.with_changes(apply_microtiming=True)
	result = tempofeel.transformations.apply_microtiming(0.7, 240, profile)

	assert result == pytest.approx(2 / 3 + (0.7 - 2 / 3) * 0.35)


def test_microtiming_expands_deviation_when_slow (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	profile = reference_profile.with_changes(apply_microtiming=True)
	result = tempofeel.transformations.apply_microtiming(1.96, 50, profile)

	assert result == pytest.approx(2.0 - 0.04 * 1.05)


def test_microtiming_never_negative (reference_profile: tempofeel.swing_profile.SwingProfile) -> None:

	profile = reference_profile.with_changes(apply_microtiming=True, microtiming_scales=(5.0, 5.0, 5.0, 5.0))

	assert tempofeel.transformations.apply_microtiming(0.0, 120, profile) == 0.0


# ── Jitter ───────────────────────────────────────────────────────────

def test_jitter_is_clamped () -> None:

	"""A 50 ms draw is limited to 7 ms."""

	profile = tempofeel.swing_profile.SwingProfile.create()
	fake = conftest.FixedGauss(50.0)

	result = tempofeel.transformations.apply_jitter(1.0, 120, profile, fake)

	assert result == pytest.approx(1.0 + 7 / 500)
	assert fake.calls == 1


def test_jitter_halved_on_downbeat () -> None:

	profile = tempofeel.swing_profile.SwingProfile.create()

	result = tempofeel.transformations.apply_jitter(4.0, 120, profile, conftest.FixedGauss(-4.0), on_downbeat=True)

	assert result == pytest.approx(4.0 - 2 / 500)


def test_jitter_never_negative () -> None:

	profile = tempofeel.swing_profile.SwingProfile.create()

	assert tempofeel.transformations.apply_jitter(0.0, 120, profile, conftest.FixedGauss(-7.0)) == 0.0


def test_jitter_uses_profile_sd () -> None:

	"""Seeded generators give the same shift as drawing the sample by hand."""

	profile = tempofeel.swing_profile.SwingProfile.create()
	sample = random.Random(9).gauss(0.0, profile.get_jitter_sd_ms(190))
	sample = max(-7.0, min(7.0, sample))

	result = tempofeel.transformations.apply_jitter(2.5, 190, profile, random.Random(9))

	assert result == pytest.approx(2.5 + sample / 60000 * 190)


def test_jitter_skipped_without_sd_or_flag () -> None:

	"""No sample is drawn when jitter is disabled or has zero spread."""

	fake = conftest.FixedGauss(3.0)

	no_spread = tempofeel.swing_profile.SwingProfile.create(jitter_sds_ms=(0, 0, 0, 0))
	disabled = tempofeel.swing_profile.SwingProfile.create(apply_humanization=False)

	assert tempofeel.transformations.apply_jitter(1.0, 120, no_spread, fake) == 1.0
	assert tempofeel.transformations.apply_jitter(1.0, 120, disabled, fake) == 1.0
	assert fake.calls == 0
