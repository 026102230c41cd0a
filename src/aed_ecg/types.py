"""Type definitions for ECG trace data structures."""

from dataclasses import dataclass
from typing import Annotated, TypeAlias

import numpy as np
import numpy.typing as npt

# Type aliases for the three index-aligned sequences of a trace
# Shape: (n_samples,)
Timestamps: TypeAlias = Annotated[npt.NDArray[np.floating], "Shape: (n_samples,), seconds"]
Amplitudes: TypeAlias = Annotated[npt.NDArray[np.floating], "Shape: (n_samples,)"]
PeakFlags: TypeAlias = Annotated[npt.NDArray[np.bool_], "Shape: (n_samples,)"]

# A derived scalar. None means the estimate is undefined for lack of data.
Estimate: TypeAlias = float | None


def _readonly(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype).reshape(-1)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Trace:
    """A single-lead ECG recording held as three index-aligned, read-only arrays.

    Index i denotes the same instant in ``timestamps``, ``amplitudes`` and ``peaks``.

    Args:
        timestamps: Sample times in seconds, non-decreasing
        amplitudes: Signal amplitude per sample
        peaks: True where an R-peak was detected

    Raises:
        ValueError: If the three sequences differ in length, or the timestamps
            are not finite and non-decreasing
    """

    timestamps: Timestamps
    amplitudes: Amplitudes
    peaks: PeakFlags

    def __post_init__(self):
        object.__setattr__(self, "timestamps", _readonly(self.timestamps, np.float64))
        object.__setattr__(self, "amplitudes", _readonly(self.amplitudes, np.float64))
        object.__setattr__(self, "peaks", _readonly(self.peaks, np.bool_))
        lengths = {len(self.timestamps), len(self.amplitudes), len(self.peaks)}
        if len(lengths) != 1:
            raise ValueError(
                "Trace sequences must have identical length, got "
                f"timestamps={len(self.timestamps)}, amplitudes={len(self.amplitudes)}, "
                f"peaks={len(self.peaks)}"
            )
        if not np.all(np.isfinite(self.timestamps)):
            bad = np.flatnonzero(~np.isfinite(self.timestamps))
            raise ValueError(f"Trace timestamps must be finite, got non-finite values at indices {bad.tolist()}")
        decreasing = np.flatnonzero(np.diff(self.timestamps) < 0)
        if decreasing.size:
            raise ValueError(
                f"Trace timestamps must be non-decreasing, got a decrease after indices {decreasing.tolist()}"
            )

    @classmethod
    def from_arrays(cls, timestamps, amplitudes, peaks) -> "Trace":
        """Build a trace from any array-likes; integer peak flags are compared against 1."""
        peaks = np.asarray(peaks)
        if peaks.dtype != np.bool_:
            peaks = peaks == 1
        return cls(timestamps=timestamps, amplitudes=amplitudes, peaks=peaks)

    def __len__(self) -> int:
        return len(self.amplitudes)

    @property
    def peak_indices(self) -> npt.NDArray[np.intp]:
        """Indices of peak-flagged samples in index order."""
        return np.flatnonzero(self.peaks)

    @property
    def n_peaks(self) -> int:
        return int(np.count_nonzero(self.peaks))
