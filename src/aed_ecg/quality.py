"""Signal quality gate.

A trace that fails the gate is not analyzed at all; the pipeline reports it as
not clean and withholds the shock.
"""

import numpy as np

from ._logging import logger
from .config.models import QualitySettings
from .types import Amplitudes


def is_signal_clean(amplitudes: Amplitudes, settings: QualitySettings | None = None) -> bool:
    """Check whether an amplitude sequence is fit for analysis.

    The signal is rejected if it
        - has fewer than ``min_samples`` samples,
        - contains NaN or infinite values,
        - is a flat line (peak-to-peak range <= ``flat_tolerance``),
        - exceeds ``max_abs_amplitude`` anywhere, when a rail limit is set.

    Args:
        amplitudes: Signal amplitudes
        settings: Gate criteria. If None, uses default QualitySettings.

    Returns:
        True if the signal is clean
    """
    settings = settings or QualitySettings()
    values = np.asarray(amplitudes, dtype=np.float64)

    if values.size < settings.min_samples:
        logger.warning(f"Signal has {values.size} samples, at least {settings.min_samples} required")
        return False
    if not np.all(np.isfinite(values)):
        logger.warning(f"Signal contains {np.count_nonzero(~np.isfinite(values))} non-finite values")
        return False
    if np.ptp(values) <= settings.flat_tolerance:
        logger.warning("Signal is a flat line")
        return False
    if settings.max_abs_amplitude is not None:
        n_clipped = int(np.count_nonzero(np.abs(values) > settings.max_abs_amplitude))
        if n_clipped:
            logger.warning(f"{n_clipped} samples exceed the rail limit of {settings.max_abs_amplitude:g}")
            return False

    logger.info(f"Signal quality check passed for {values.size} samples")
    return True
