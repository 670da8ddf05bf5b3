"""Heart-rate estimation from peak spacing."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from .peaks import detect_peaks

# Assumed source cadence; not derived from the data.
DEFAULT_SAMPLING_RATE_HZ = 250.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_rate(
    peak_indices: Sequence[int],
    sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ,
) -> int:
    """
    Estimate beats per minute from the mean spacing of ``peak_indices``.

    Parameters
    ----------
    peak_indices:
        Strictly increasing sample indices of detected peaks.
    sampling_rate_hz:
        Sampling frequency of the series the peaks came from. Must be > 0.

    Returns
    -------
    int
        Rounded rate, or ``0`` when fewer than two peaks are available.
        Callers must treat ``0`` as "cannot estimate", not as a zero rate.
    """
    if len(peak_indices) <= 1:
        return 0
    if sampling_rate_hz <= 0:
        raise ValueError(f"sampling_rate_hz must be > 0, got {sampling_rate_hz}")

    intervals = np.diff(np.asarray(peak_indices, dtype=float))
    seconds_per_beat = float(np.mean(intervals)) / float(sampling_rate_hz)
    return _round_half_up(60.0 / seconds_per_beat)


def estimate_rate_from_samples(
    samples: ArrayLike,
    sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ,
) -> int:
    """Convenience wrapper: detect peaks in ``samples`` and estimate the rate."""
    return estimate_rate(detect_peaks(samples), sampling_rate_hz)
