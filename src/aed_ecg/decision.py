"""Shock decision rule.

Combines the four trace estimates into a shock / no-shock verdict using a
fixed threshold policy. Any vetoing condition withholds the shock.
"""

from dataclasses import dataclass

from . import constants
from .config.models import DecisionThresholds, SentinelMode
from .types import Estimate


@dataclass(frozen=True)
class ShockDecision:
    """Outcome of the shock decision rule.

    Attributes:
        shock: True if a shock is recommended
        reasons: Reason codes of every condition that vetoed the shock, in rule order
    """

    shock: bool
    reasons: tuple[str, ...] = ()

    @property
    def verdict(self) -> str:
        return constants.VERDICT_SHOCK if self.shock else constants.VERDICT_NO_SHOCK


def is_organized(uniformity: Estimate, thresholds: DecisionThresholds | None = None) -> bool | None:
    """Return whether the rhythm is organized, or None if uniformity is undefined."""
    if uniformity is None:
        return None
    thresholds = thresholds or DecisionThresholds()
    return uniformity < thresholds.uniformity_threshold


def decide_shock(
    baseline: float,
    avg_amplitude: Estimate,
    bpm: Estimate,
    uniformity: Estimate,
    thresholds: DecisionThresholds | None = None,
    sentinel_mode: SentinelMode = "legacy",
) -> ShockDecision:
    """Decide whether to shock.

    No shock is recommended if any of these holds:
        1. avg_amplitude < min_amplitude (no discernible peaks)
        2. baseline > max_baseline (baseline drift)
        3. uniformity >= uniformity_threshold and bpm < min_bpm_fast
           (disorganized but not fast enough for fibrillation)
        4. bpm <= min_bpm_slow (rate too low)

    Args:
        baseline: Median amplitude
        avg_amplitude: Average peak amplitude, None if undefined
        bpm: Heart rate, None if undefined
        uniformity: Rhythm uniformity, None if undefined
        thresholds: Decision policy. If None, uses the default policy.
        sentinel_mode: "legacy" reads undefined estimates as 0.0; "strict"
            withholds the shock with reason "insufficient_data" when amplitude
            or rate is undefined, and skips every condition on an undefined value.

    Returns:
        ShockDecision with all vetoing reasons

    Raises:
        ValueError: If sentinel_mode is unknown
    """
    if sentinel_mode not in ("legacy", "strict"):
        raise ValueError(f"Invalid sentinel_mode: {sentinel_mode!r}. Must be 'legacy' or 'strict'.")
    thresholds = thresholds or DecisionThresholds()

    reasons: list[str] = []
    if sentinel_mode == "legacy":
        avg_amplitude = 0.0 if avg_amplitude is None else avg_amplitude
        bpm = 0.0 if bpm is None else bpm
        uniformity = 0.0 if uniformity is None else uniformity
    elif avg_amplitude is None or bpm is None:
        reasons.append(constants.REASON_INSUFFICIENT_DATA)

    if avg_amplitude is not None and avg_amplitude < thresholds.min_amplitude:
        reasons.append(constants.REASON_LOW_AMPLITUDE)
    if baseline > thresholds.max_baseline:
        reasons.append(constants.REASON_BASELINE_DRIFT)
    if (
        uniformity is not None
        and bpm is not None
        and uniformity >= thresholds.uniformity_threshold
        and bpm < thresholds.min_bpm_fast
    ):
        reasons.append(constants.REASON_DISORGANIZED_SLOW)
    if bpm is not None and bpm <= thresholds.min_bpm_slow:
        reasons.append(constants.REASON_RATE_TOO_LOW)

    return ShockDecision(shock=not reasons, reasons=tuple(reasons))
