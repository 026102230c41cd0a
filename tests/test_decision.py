"""Unit tests for the shock decision rule."""

import pydantic
import pytest

from aed_ecg import DecisionThresholds, ShockDecision, decide_shock, is_organized


def _shockable(**overrides) -> dict:
    """Inputs that pass every condition of the default policy."""
    inputs = {"baseline": 0.0, "avg_amplitude": 1.0, "bpm": 250.0, "uniformity": 0.0}
    inputs.update(overrides)
    return inputs


class TestDecideShock:
    """Tests for decide_shock."""

    def test_shock_when_no_condition_holds(self):
        decision = decide_shock(**_shockable())
        assert decision == ShockDecision(shock=True, reasons=())
        assert decision.verdict == "YES, SHOCK!"

    def test_low_amplitude(self):
        decision = decide_shock(**_shockable(avg_amplitude=0.05))
        assert not decision.shock
        assert decision.reasons == ("low_amplitude",)
        assert decision.verdict == "NO, DO NOT SHOCK"

    def test_amplitude_threshold_is_exclusive(self):
        assert decide_shock(**_shockable(avg_amplitude=0.1)).shock

    def test_baseline_drift(self):
        assert decide_shock(**_shockable(baseline=1.01)).reasons == ("baseline_drift",)

    def test_baseline_equal_to_limit_is_tolerated(self):
        assert decide_shock(**_shockable(baseline=1.0)).shock

    def test_disorganized_slow_rhythm(self):
        decision = decide_shock(**_shockable(uniformity=1.0, bpm=199.0))
        assert decision.reasons == ("disorganized_slow",)

    def test_disorganized_fast_rhythm_is_shockable(self):
        assert decide_shock(**_shockable(uniformity=3.0, bpm=200.0)).shock

    def test_rate_too_low(self):
        decision = decide_shock(**_shockable(bpm=150.0))
        assert not decision.shock
        assert "rate_too_low" in decision.reasons

    def test_rate_just_above_slow_limit(self):
        assert decide_shock(**_shockable(bpm=150.5)).shock

    def test_all_reasons_reported_in_rule_order(self):
        decision = decide_shock(baseline=2.0, avg_amplitude=0.0, bpm=60.0, uniformity=1.5)
        assert decision.reasons == ("low_amplitude", "baseline_drift", "disorganized_slow", "rate_too_low")

    def test_deterministic(self):
        inputs = _shockable(bpm=180.0, uniformity=0.9)
        assert decide_shock(**inputs) == decide_shock(**inputs)

    def test_custom_thresholds(self):
        thresholds = DecisionThresholds(min_bpm_slow=260.0, min_bpm_fast=300.0)
        decision = decide_shock(**_shockable(), thresholds=thresholds)
        assert decision.reasons == ("rate_too_low",)

    def test_invalid_sentinel_mode(self):
        with pytest.raises(ValueError, match="sentinel_mode"):
            decide_shock(**_shockable(), sentinel_mode="lenient")


class TestUndefinedEstimates:
    """Undefined estimates under legacy and strict sentinel modes."""

    def test_legacy_reads_undefined_as_zero(self):
        decision = decide_shock(baseline=0.0, avg_amplitude=None, bpm=None, uniformity=None)
        assert decision.reasons == ("low_amplitude", "rate_too_low")

    def test_strict_reports_insufficient_data(self):
        decision = decide_shock(
            baseline=0.0, avg_amplitude=None, bpm=None, uniformity=None, sentinel_mode="strict"
        )
        assert not decision.shock
        assert decision.reasons == ("insufficient_data",)

    def test_strict_still_applies_defined_conditions(self):
        decision = decide_shock(
            baseline=1.5, avg_amplitude=0.8, bpm=None, uniformity=None, sentinel_mode="strict"
        )
        assert decision.reasons == ("insufficient_data", "baseline_drift")

    def test_strict_with_all_estimates_matches_legacy(self):
        inputs = _shockable(bpm=170.0, uniformity=1.2)
        assert decide_shock(**inputs, sentinel_mode="strict") == decide_shock(**inputs)


class TestThresholds:
    """Tests for DecisionThresholds and is_organized."""

    def test_defaults(self):
        thresholds = DecisionThresholds()
        assert thresholds.min_amplitude == 0.1
        assert thresholds.max_baseline == 1.0
        assert thresholds.uniformity_threshold == 1.0
        assert thresholds.min_bpm_fast == 200.0
        assert thresholds.min_bpm_slow == 150.0

    def test_slow_limit_above_fast_limit_rejected(self):
        with pytest.raises(pydantic.ValidationError, match="min_bpm_slow"):
            DecisionThresholds(min_bpm_slow=220.0)

    def test_negative_amplitude_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            DecisionThresholds(min_amplitude=-1.0)

    def test_is_organized(self):
        assert is_organized(0.99) is True
        assert is_organized(1.0) is False
        assert is_organized(None) is None
        assert is_organized(1.5, DecisionThresholds(uniformity_threshold=2.0)) is True
