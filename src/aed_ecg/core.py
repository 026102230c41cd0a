"""Main shock analysis orchestrator."""

from dataclasses import dataclass
from pathlib import Path

from . import estimators
from ._logging import logger
from .config import ConfigLoader, Settings
from .decision import ShockDecision, decide_shock, is_organized
from .io import load_trace
from .quality import is_signal_clean
from .types import Estimate, Trace
from .visualize import render_trace


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one pipeline run.

    Attributes:
        is_clean: Quality gate verdict. If False, no estimate was computed.
        n_samples: Number of samples in the analyzed trace
        baseline: Median amplitude
        avg_amplitude: Average peak amplitude, None if undefined
        bpm: Heart rate, None if undefined
        uniformity: Rhythm uniformity, None if undefined
        organized: Whether uniformity is below the threshold, None if undefined
        decision: Shock decision, None if the signal is not clean
        image_path: Where the chart was written, None if not rendered
        sentinel_mode: Sentinel mode the result was produced under
    """

    is_clean: bool
    n_samples: int
    baseline: float | None = None
    avg_amplitude: Estimate = None
    bpm: Estimate = None
    uniformity: Estimate = None
    organized: bool | None = None
    decision: ShockDecision | None = None
    image_path: Path | None = None
    sentinel_mode: str = "legacy"

    @property
    def shock(self) -> bool:
        """Final verdict. An unclean signal is never shocked."""
        return self.decision is not None and self.decision.shock


class AEDAnalyzer:
    """Runs the shock analysis pipeline on one trace at a time.

    The pipeline is: quality gate (stop if not clean) -> chart rendering ->
    baseline, average amplitude, BPM and uniformity estimators -> shock
    decision. Rendering failures are logged and never abort the analysis.

    Args:
        settings: Complete analysis settings. If None, uses default settings.

    Examples:
        analyzer = AEDAnalyzer()
        result = analyzer.analyze_file("ecg.dat")
        print(result.shock)

        # Strict loading, no chart
        settings = Settings(loader={"on_malformed": "raise"}, visualization={"enabled": False})
        result = AEDAnalyzer(settings).analyze_file("ecg.dat")
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def analyze_file(self, path: str | Path) -> AnalysisResult:
        """Load a trace file and analyze it.

        Raises:
            FileNotFoundError: If the file does not exist
            TraceFormatError: On a malformed record in strict loading mode
        """
        trace = load_trace(path, on_malformed=self.settings.loader.on_malformed)
        return self.analyze_trace(trace)

    def analyze_trace(self, trace: Trace) -> AnalysisResult:
        """Analyze an in-memory trace."""
        n_samples = len(trace)
        if not is_signal_clean(trace.amplitudes, self.settings.quality):
            logger.info("Signal is not clean; skipping analysis")
            return AnalysisResult(is_clean=False, n_samples=n_samples, sentinel_mode=self.settings.sentinel_mode)

        image_path = self._render(trace)

        baseline = estimators.compute_baseline(trace.amplitudes)
        avg_amplitude = estimators.compute_average_amplitude(trace.amplitudes, trace.peaks, baseline)
        bpm = estimators.compute_bpm(trace.timestamps, trace.peaks)
        uniformity = estimators.compute_uniformity(trace.amplitudes, trace.peaks, baseline)

        thresholds = self.settings.thresholds
        decision = decide_shock(
            baseline,
            avg_amplitude,
            bpm,
            uniformity,
            thresholds=thresholds,
            sentinel_mode=self.settings.sentinel_mode,
        )
        organized = is_organized(uniformity, thresholds)
        if organized is None and self.settings.sentinel_mode == "legacy":
            organized = is_organized(0.0, thresholds)

        logger.info(
            f"Analyzed {n_samples} samples with {trace.n_peaks} R-peaks: shock={decision.shock}, "
            f"reasons={list(decision.reasons)}"
        )
        return AnalysisResult(
            is_clean=True,
            n_samples=n_samples,
            baseline=baseline,
            avg_amplitude=avg_amplitude,
            bpm=bpm,
            uniformity=uniformity,
            organized=organized,
            decision=decision,
            image_path=image_path,
            sentinel_mode=self.settings.sentinel_mode,
        )

    def _render(self, trace: Trace) -> Path | None:
        viz = self.settings.visualization
        if not viz.enabled:
            logger.debug("Visualization disabled, skipping chart")
            return None
        try:
            return render_trace(trace.amplitudes, trace.timestamps, settings=viz, peaks=trace.peaks)
        except Exception as e:
            logger.warning(f"Failed to render ECG chart to {viz.output_path}: {e}")
            return None


def analyze(
    source: Trace | str | Path,
    settings: Settings | str | Path | None = None,
) -> AnalysisResult:
    """Run the shock analysis.

    This is the main high-level API. It handles configuration loading and
    runs the complete pipeline on a trace or trace file.

    Args:
        source: A Trace, or the path of a trace file
        settings: Configuration. Can be:
            - Settings object: Use directly
            - str or Path: Load from JSON/TOML config file
            - None: Use default settings

    Returns:
        AnalysisResult of the run

    Raises:
        TypeError: If settings is of an unsupported type
        FileNotFoundError: If the trace or config file does not exist

    Examples:
        result = aed_ecg.analyze("ecg.dat")
        result = aed_ecg.analyze(trace, settings="aed.toml")
    """
    if settings is None:
        settings_obj = Settings()
    elif isinstance(settings, (str, Path)):
        settings_obj = ConfigLoader.from_file(settings)
    elif isinstance(settings, Settings):
        settings_obj = settings
    else:
        raise TypeError(f"settings must be a Settings object, str, Path, or None, got {type(settings).__name__}")

    analyzer = AEDAnalyzer(settings_obj)
    if isinstance(source, Trace):
        return analyzer.analyze_trace(source)
    return analyzer.analyze_file(source)
