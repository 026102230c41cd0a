"""Scalar estimators over a single-lead ECG trace.

All estimators are pure functions of read-only arrays and are independent of
each other, except that amplitude and uniformity are measured relative to the
baseline. Estimates that cannot be formed for lack of R-peaks are returned as
None rather than as a numeric sentinel.

Available estimators:
    - compute_baseline: median amplitude
    - compute_average_amplitude: mean absolute peak deviation from baseline
    - compute_bpm: heart rate from consecutive R-peak intervals
    - compute_uniformity: spread of baseline crossings between consecutive R-peaks
"""

import numpy as np
import numpy.typing as npt

from ._logging import logger
from .types import Amplitudes, Estimate, PeakFlags, Timestamps


def _peak_indices(peaks: PeakFlags) -> npt.NDArray[np.intp]:
    return np.flatnonzero(np.asarray(peaks, dtype=np.bool_))


def _check_aligned(**arrays: np.ndarray) -> None:
    lengths = {name: len(arr) for name, arr in arrays.items()}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"Input sequences must have identical length, got {lengths}")


def compute_baseline(amplitudes: Amplitudes) -> float:
    """Return the median amplitude.

    For an even number of samples this is the mean of the two middle values.
    The input is not modified.

    Args:
        amplitudes: Signal amplitudes, at least one value

    Returns:
        Median amplitude

    Raises:
        ValueError: If amplitudes is empty
    """
    values = np.asarray(amplitudes, dtype=np.float64)
    if values.size == 0:
        raise ValueError("Cannot compute the baseline of an empty amplitude sequence")
    baseline = float(np.median(values))
    logger.debug(f"Baseline: {baseline:g} over {values.size} samples")
    return baseline


def compute_average_amplitude(amplitudes: Amplitudes, peaks: PeakFlags, baseline: float) -> Estimate:
    """Return the mean of |amplitude - baseline| over R-peak samples.

    Args:
        amplitudes: Signal amplitudes
        peaks: R-peak flags aligned with amplitudes
        baseline: Reference level, normally compute_baseline(amplitudes)

    Returns:
        Average peak amplitude, or None if no sample is flagged as a peak
    """
    values = np.asarray(amplitudes, dtype=np.float64)
    _check_aligned(amplitudes=values, peaks=np.asarray(peaks))
    idx = _peak_indices(peaks)
    if idx.size == 0:
        logger.warning("No R-peaks flagged; average amplitude is undefined")
        return None
    avg_amp = float(np.mean(np.abs(values[idx] - baseline)))
    logger.debug(f"Average amplitude: {avg_amp:g} over {idx.size} R-peaks")
    return avg_amp


def compute_bpm(timestamps: Timestamps, peaks: PeakFlags) -> Estimate:
    """Return the heart rate in beats per minute.

    The rate is 60 divided by the arithmetic mean of the intervals between
    consecutive R-peaks. No smoothing or outlier rejection is applied.

    Args:
        timestamps: Sample times in seconds, non-decreasing
        peaks: R-peak flags aligned with timestamps

    Returns:
        Heart rate, or None if fewer than two R-peaks are flagged or all of
        them share one timestamp
    """
    times = np.asarray(timestamps, dtype=np.float64)
    _check_aligned(timestamps=times, peaks=np.asarray(peaks))
    idx = _peak_indices(peaks)
    if idx.size < 2:
        logger.warning(f"Need at least 2 R-peaks to compute BPM, got {idx.size}")
        return None
    mean_interval = float(np.mean(np.diff(times[idx])))
    if not np.isfinite(mean_interval) or mean_interval <= 0:
        logger.warning(f"Mean R-peak interval is {mean_interval:g} s; BPM is undefined")
        return None
    bpm = 60.0 / mean_interval
    logger.debug(f"BPM: {bpm:g} from {idx.size - 1} intervals (mean {mean_interval:g} s)")
    return bpm


def count_deflections(amplitudes: Amplitudes, peaks: PeakFlags, baseline: float) -> npt.NDArray[np.int_]:
    """Count baseline crossings between each pair of consecutive R-peaks.

    A crossing occurs between adjacent samples j and j+1 when exactly one of
    them is strictly above the baseline. A sample equal to the baseline counts
    as below. For consecutive peaks at indices prev < curr, the pairs
    prev <= j < curr are scanned.

    Returns:
        One count per inter-peak interval (empty if fewer than two R-peaks)
    """
    values = np.asarray(amplitudes, dtype=np.float64)
    _check_aligned(amplitudes=values, peaks=np.asarray(peaks))
    idx = _peak_indices(peaks)
    if idx.size < 2:
        return np.zeros(0, dtype=np.int_)

    above = values > baseline
    crossings = above[:-1] != above[1:]
    # cumulative[k] = number of crossings among pairs 0..k-1
    cumulative = np.concatenate(([0], np.cumsum(crossings, dtype=np.int_)))
    return cumulative[idx[1:]] - cumulative[idx[:-1]]


def compute_uniformity(amplitudes: Amplitudes, peaks: PeakFlags, baseline: float) -> Estimate:
    """Return the population standard deviation of per-interval deflection counts.

    Lower values mean a more regular crossing pattern from beat to beat; a
    constant pattern yields 0.0.

    Args:
        amplitudes: Signal amplitudes
        peaks: R-peak flags aligned with amplitudes
        baseline: Reference level, normally compute_baseline(amplitudes)

    Returns:
        Uniformity, or None if fewer than two R-peaks are flagged
    """
    counts = count_deflections(amplitudes, peaks, baseline)
    if counts.size == 0:
        logger.warning("Need at least 2 R-peaks to compute uniformity")
        return None
    uniformity = float(np.std(counts, ddof=0))
    logger.debug(f"Uniformity: {uniformity:g} from deflection counts {counts.tolist()}")
    return uniformity
