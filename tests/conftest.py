"""Shared test fixtures for AED-ECG tests."""

from pathlib import Path

import neurokit2 as nk
import numpy as np
import pytest

from aed_ecg import Settings, Trace


def write_trace_file(path: Path, trace: Trace) -> Path:
    """Write a trace in the 'timestamp amplitude is_peak' record format."""
    lines = [
        f"{t!r} {a!r} {int(p)}"
        for t, a, p in zip(trace.timestamps.tolist(), trace.amplitudes.tolist(), trace.peaks.tolist(), strict=True)
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def quiet_settings(tmp_path: Path) -> Settings:
    """Default settings with the chart written into the test's temporary directory."""
    return Settings(visualization={"output_path": tmp_path / "ecg.png"})


@pytest.fixture
def scenario_a_trace() -> Trace:
    """Ten samples 1 s apart alternating 0.0/2.0, R-peaks on every even index.

    Baseline 1.0, average amplitude 1.0, peaks 2 s apart (30 BPM).
    """
    timestamps = np.arange(10, dtype=float)
    amplitudes = np.tile([0.0, 2.0], 5)
    peaks = np.zeros(10, dtype=bool)
    peaks[::2] = True
    return Trace(timestamps=timestamps, amplitudes=amplitudes, peaks=peaks)


@pytest.fixture
def no_peak_trace() -> Trace:
    """A clean sine wave without any flagged R-peak."""
    timestamps = np.arange(200) * 0.01
    amplitudes = 0.5 * np.sin(2 * np.pi * 1.5 * timestamps)
    return Trace(timestamps=timestamps, amplitudes=amplitudes, peaks=np.zeros(200, dtype=bool))


@pytest.fixture
def shockable_trace() -> Trace:
    """Regular 1.0 spikes every 0.24 s (250 BPM) over a zero baseline."""
    n_samples = 240
    timestamps = np.arange(n_samples) * 0.01
    peaks = np.zeros(n_samples, dtype=bool)
    peaks[::24] = True
    amplitudes = np.where(peaks, 1.0, 0.0)
    return Trace(timestamps=timestamps, amplitudes=amplitudes, peaks=peaks)


@pytest.fixture
def synthetic_ecg_trace() -> Trace:
    """Simulated 10 s single-lead ECG at 70 BPM with neurokit2-detected R-peaks."""
    sfreq = 250
    ecg_signal = nk.ecg_simulate(
        duration=10,
        sampling_rate=sfreq,
        noise=0.01,
        heart_rate=70,
        random_state=0,
    )
    _, info = nk.ecg_peaks(ecg_signal, sampling_rate=sfreq)
    peaks = np.zeros(len(ecg_signal), dtype=bool)
    peaks[np.asarray(info["ECG_R_Peaks"], dtype=int)] = True
    timestamps = np.arange(len(ecg_signal)) / sfreq
    return Trace(timestamps=timestamps, amplitudes=np.asarray(ecg_signal), peaks=peaks)


@pytest.fixture
def scenario_a_file(tmp_path: Path, scenario_a_trace: Trace) -> Path:
    return write_trace_file(tmp_path / "ecg.dat", scenario_a_trace)
