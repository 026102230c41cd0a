"""Reading ECG traces from whitespace-separated record files.

Each non-blank line holds one sample as three fields::

    <timestamp seconds> <amplitude> <is_peak 0|1>

A record is malformed when it is not valid UTF-8, does not have exactly three
fields, a field fails to parse, the timestamp or amplitude is not finite, the
peak flag is not 0 or 1, or its timestamp is lower than that of the previous
record. Depending on ``on_malformed`` a malformed record
either ends the trace at that point or raises :class:`TraceFormatError`.
"""

import math
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

import numpy as np

from ._logging import logger
from .constants import RECORD_FIELDS
from .types import Trace

MalformedPolicy = Literal["truncate", "raise"]


class TraceFormatError(ValueError):
    """Raised for a malformed trace record when loading in strict mode."""

    def __init__(self, message: str, line_number: int, line: str | bytes):
        super().__init__(f"line {line_number}: {message} ({line.strip()!r})")
        self.line_number = line_number
        self.line = line


def _parse_record(line: str) -> tuple[float, float, bool]:
    fields = line.split()
    if len(fields) != RECORD_FIELDS:
        raise ValueError(f"expected {RECORD_FIELDS} fields, got {len(fields)}")
    timestamp = float(fields[0])
    amplitude = float(fields[1])
    if not (math.isfinite(timestamp) and math.isfinite(amplitude)):
        raise ValueError(f"timestamp and amplitude must be finite, got {timestamp} and {amplitude}")
    flag = int(fields[2])
    if flag not in (0, 1):
        raise ValueError(f"peak flag must be 0 or 1, got {flag}")
    return timestamp, amplitude, flag == 1


def parse_records(lines: Iterable[str | bytes], on_malformed: MalformedPolicy = "truncate") -> Trace:
    """Parse trace records into a Trace.

    Args:
        lines: Text lines, or UTF-8 encoded byte lines, one record per line.
            Blank lines are ignored. A line that fails to decode is malformed.
        on_malformed: "truncate" keeps the records before the first malformed one,
            "raise" raises TraceFormatError instead.

    Returns:
        Trace built from the accepted records (possibly empty).

    Raises:
        TraceFormatError: On a malformed record if on_malformed is "raise"
        ValueError: If on_malformed is not a known policy
    """
    if on_malformed not in ("truncate", "raise"):
        raise ValueError(f"Invalid on_malformed value: {on_malformed!r}. Must be 'truncate' or 'raise'.")

    timestamps: list[float] = []
    amplitudes: list[float] = []
    peaks: list[bool] = []

    for line_number, raw in enumerate(lines, start=1):
        try:
            line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            if not line.strip():
                continue
            timestamp, amplitude, is_peak = _parse_record(line)
            if timestamps and timestamp < timestamps[-1]:
                raise ValueError(f"timestamp {timestamp} precedes previous timestamp {timestamps[-1]}")
        except ValueError as e:
            if on_malformed == "raise":
                raise TraceFormatError(str(e), line_number, raw) from e
            logger.warning(
                f"Malformed record at line {line_number} ({e}); truncating trace to {len(timestamps)} samples"
            )
            break
        timestamps.append(timestamp)
        amplitudes.append(amplitude)
        peaks.append(is_peak)

    return Trace(
        timestamps=np.asarray(timestamps, dtype=np.float64),
        amplitudes=np.asarray(amplitudes, dtype=np.float64),
        peaks=np.asarray(peaks, dtype=np.bool_),
    )


def load_trace(path: str | Path, on_malformed: MalformedPolicy = "truncate") -> Trace:
    """Load a trace file.

    Args:
        path: Path to the record file
        on_malformed: Policy for malformed records, see parse_records

    Returns:
        The loaded Trace

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read (a directory, missing permissions)
        TraceFormatError: On a malformed record if on_malformed is "raise"
    """
    path = Path(path)
    with path.open("rb") as f:
        trace = parse_records(f, on_malformed=on_malformed)
    logger.info(f"Loaded {len(trace)} samples with {trace.n_peaks} R-peaks from {path}")
    return trace
