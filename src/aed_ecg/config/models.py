"""Pydantic models for configuration."""

from pathlib import Path
from typing import Literal

import pydantic
from pydantic import BaseModel, Field

from .. import constants

SentinelMode = Literal["legacy", "strict"]


class DecisionThresholds(BaseModel):
    """Policy constants of the shock decision rule.

    A shock is withheld if any of these holds:
        - average peak amplitude < min_amplitude
        - baseline > max_baseline
        - uniformity >= uniformity_threshold and bpm < min_bpm_fast
        - bpm <= min_bpm_slow

    Attributes:
        min_amplitude: Weakest average peak amplitude still considered a discernible signal
        max_baseline: Highest tolerated baseline (median amplitude)
        uniformity_threshold: Uniformity at or above which a rhythm counts as disorganized
        min_bpm_fast: Rate a disorganized rhythm must reach to count as shockable fibrillation
        min_bpm_slow: Rate at or below which no rhythm is shockable

    Examples:
        # Default policy
        thresholds = DecisionThresholds()

        # Stricter rate policy
        thresholds = DecisionThresholds(min_bpm_slow=180.0)
    """

    min_amplitude: float = Field(default=constants.MIN_AMPLITUDE, ge=0)
    max_baseline: float = constants.MAX_BASELINE
    uniformity_threshold: float = Field(default=constants.UNIFORMITY_THRESHOLD, ge=0)
    min_bpm_fast: float = Field(default=constants.MIN_BPM_FAST, ge=0)
    min_bpm_slow: float = Field(default=constants.MIN_BPM_SLOW, ge=0)

    @pydantic.model_validator(mode="after")
    def check_rate_order(self) -> "DecisionThresholds":
        """Validate that the slow rate limit does not exceed the fast one.

        Raises:
            ValueError: If min_bpm_slow > min_bpm_fast
        """
        if self.min_bpm_slow > self.min_bpm_fast:
            raise ValueError(
                f"min_bpm_slow ({self.min_bpm_slow}) must not exceed min_bpm_fast ({self.min_bpm_fast})"
            )
        return self


class LoaderSettings(BaseModel):
    """Settings for reading trace files.

    Attributes:
        on_malformed: What to do with a record that fails to parse. One of:
            - "truncate": stop loading and keep the records read so far (default)
            - "raise": raise TraceFormatError
    """

    on_malformed: Literal["truncate", "raise"] = "truncate"


class QualitySettings(BaseModel):
    """Settings for the signal quality gate.

    Attributes:
        min_samples: Fewest samples a trace needs to be assessed at all.
        flat_tolerance: Peak-to-peak range at or below which the trace is a flat line.
        max_abs_amplitude: Rail limit. Traces exceeding it in absolute value are rejected.
            If None, no limit is applied.
    """

    min_samples: int = Field(default=2, ge=1)
    flat_tolerance: float = Field(default=1e-8, ge=0)
    max_abs_amplitude: float | None = Field(default=None, gt=0)


class VisualizationSettings(BaseModel):
    """Settings for the trace chart.

    Attributes:
        enabled: Whether to render the chart.
        output_path: Where the PNG file is written.
        dpi: Image resolution.
        title: Figure title.
    """

    enabled: bool = True
    output_path: Path = Path(constants.DEFAULT_PLOT_FILE)
    dpi: int = Field(default=150, gt=0)
    title: str = "ECG trace"


class Settings(BaseModel):
    """Complete settings for AED shock analysis.

    Args:
        thresholds: Decision policy
        loader: Trace file parsing behavior
        quality: Signal quality gate criteria
        visualization: Chart rendering
        sentinel_mode: How undefined estimates reach the decision rule. One of:
            - "legacy": undefined estimates are read as 0.0 (default)
            - "strict": undefined amplitude or rate vetoes the shock as insufficient data

    Examples:
        # Default settings
        settings = Settings()

        # Fail on malformed records and never conflate "no data" with zero
        settings = Settings(loader={"on_malformed": "raise"}, sentinel_mode="strict")
    """

    thresholds: DecisionThresholds = Field(default_factory=DecisionThresholds)
    loader: LoaderSettings = Field(default_factory=LoaderSettings)
    quality: QualitySettings = Field(default_factory=QualitySettings)
    visualization: VisualizationSettings = Field(default_factory=VisualizationSettings)
    sentinel_mode: SentinelMode = "legacy"
