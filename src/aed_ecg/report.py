"""Console report of an analysis result."""

from . import constants
from .core import AnalysisResult


def _fmt(value: float | None, sentinel_mode: str) -> str:
    if value is None:
        return "0" if sentinel_mode == "legacy" else "undefined"
    return f"{value:g}"


def format_report(result: AnalysisResult) -> list[str]:
    """Format the report lines for a result, in output order.

    Numbers use %g formatting (six significant digits).

    Example output:
        Is signal clean? YES
        Baseline? 1
        Average amplitude? 1
        BPM? 30
        Organized? YES (0)
        Shock patient? NO, DO NOT SHOCK
    """
    if not result.is_clean:
        return [f"Is signal clean? {constants.VERDICT_NO_SHOCK}"]

    mode = result.sentinel_mode
    if result.organized is None:
        organized = "UNDEFINED"
    else:
        organized = "YES" if result.organized else "NO"

    return [
        "Is signal clean? YES",
        f"Baseline? {_fmt(result.baseline, mode)}",
        f"Average amplitude? {_fmt(result.avg_amplitude, mode)}",
        f"BPM? {_fmt(result.bpm, mode)}",
        f"Organized? {organized} ({_fmt(result.uniformity, mode)})",
        f"Shock patient? {result.decision.verdict}",
    ]
