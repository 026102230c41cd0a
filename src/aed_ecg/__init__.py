"""AED-ECG: shock / no-shock analysis of recorded single-lead ECG traces.

This package loads a trace of (timestamp, amplitude, R-peak flag) samples, checks its signal
quality, renders it to a chart, and combines four estimates (baseline, average R-peak amplitude,
heart rate, rhythm uniformity) into a fixed-threshold decision on whether an automated external
defibrillator should deliver a shock.
"""

from ._logging import logger, set_log_file, set_log_level
from .config import (
    ConfigLoader,
    DecisionThresholds,
    LoaderSettings,
    QualitySettings,
    Settings,
    VisualizationSettings,
)
from .core import AEDAnalyzer, AnalysisResult, analyze
from .decision import ShockDecision, decide_shock, is_organized
from .estimators import (
    compute_average_amplitude,
    compute_baseline,
    compute_bpm,
    compute_uniformity,
    count_deflections,
)
from .io import TraceFormatError, load_trace, parse_records
from .quality import is_signal_clean
from .report import format_report
from .types import Trace
from .visualize import render_trace

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "logger",
    "set_log_level",
    "set_log_file",
    "analyze",
    "AEDAnalyzer",
    "AnalysisResult",
    "Trace",
    "load_trace",
    "parse_records",
    "TraceFormatError",
    "is_signal_clean",
    "render_trace",
    "compute_baseline",
    "compute_average_amplitude",
    "compute_bpm",
    "compute_uniformity",
    "count_deflections",
    "decide_shock",
    "is_organized",
    "ShockDecision",
    "format_report",
    "Settings",
    "DecisionThresholds",
    "LoaderSettings",
    "QualitySettings",
    "VisualizationSettings",
    "ConfigLoader",
]


def __dir__():
    return __all__
