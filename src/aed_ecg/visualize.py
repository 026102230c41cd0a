"""Render an ECG trace to an image file."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.ticker import AutoMinorLocator  # noqa: E402

from ._logging import logger  # noqa: E402
from .config.models import VisualizationSettings  # noqa: E402
from .types import Amplitudes, PeakFlags, Timestamps  # noqa: E402


def render_trace(
    amplitudes: Amplitudes,
    timestamps: Timestamps,
    path: str | Path | None = None,
    settings: VisualizationSettings | None = None,
    peaks: PeakFlags | None = None,
    baseline: float | None = None,
) -> Path:
    """Plot amplitude against time and save the figure.

    Args:
        amplitudes: Signal amplitudes
        timestamps: Sample times in seconds, aligned with amplitudes
        path: Output file. If None, uses settings.output_path.
        settings: Rendering settings. If None, uses default VisualizationSettings.
        peaks: Optional R-peak flags to mark on the trace
        baseline: Optional reference level drawn as a horizontal line

    Returns:
        Path of the written image

    Raises:
        ValueError: If amplitudes and timestamps differ in length
    """
    settings = settings or VisualizationSettings()
    save_path = Path(path) if path is not None else settings.output_path
    y = np.asarray(amplitudes, dtype=np.float64)
    x = np.asarray(timestamps, dtype=np.float64)
    if x.shape != y.shape:
        raise ValueError(f"timestamps and amplitudes must have the same shape, got {x.shape} and {y.shape}")

    fig, ax = plt.subplots(figsize=(12, 4))
    try:
        ax.plot(x, y, color="black", linewidth=0.8, label="ECG")

        if peaks is not None:
            idx = np.flatnonzero(np.asarray(peaks, dtype=np.bool_))
            if idx.size:
                ax.plot(x[idx], y[idx], "o", color="red", markersize=4, label=f"R-peaks ({idx.size})")
        if baseline is not None:
            ax.axhline(
                y=baseline,
                color="purple",
                linestyle=":",
                linewidth=1.5,
                alpha=0.7,
                label=f"Baseline: {baseline:.2f}",
            )

        ax.set_title(settings.title, fontsize=12, fontweight="bold")
        ax.set_xlabel("Time (s)", fontsize=10)
        ax.set_ylabel("Amplitude", fontsize=10)

        # Grid styling to resemble ECG paper
        ax.xaxis.set_minor_locator(AutoMinorLocator(5))
        ax.yaxis.set_minor_locator(AutoMinorLocator(5))
        ax.grid(True, which="major", linestyle="-", linewidth=1.0, alpha=0.6, color="#FF9999")
        ax.grid(True, which="minor", linestyle="-", linewidth=0.4, alpha=0.3, color="#FFCCCC")
        ax.set_axisbelow(True)
        ax.set_facecolor("#FFF8F8")
        if peaks is not None or baseline is not None:
            ax.legend(loc="upper right", fontsize=8, framealpha=0.8)

        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=settings.dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info(f"Saved ECG chart to {save_path}")
    return save_path
