"""Threshold-based R-wave (local maximum) detection."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

# Fraction of the series maximum a sample must exceed to count as a peak.
THRESHOLD_FACTOR = 0.6


def _to_1d_array(samples: ArrayLike) -> np.ndarray:
    """Convert input to a 1D float64 numpy array."""
    arr = np.asarray(samples, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {arr.shape}")
    return arr


def calculate_threshold(samples: ArrayLike) -> float:
    """
    Return the adaptive peak threshold for ``samples``.

    Parameters
    ----------
    samples:
        1-D array-like of samples. Must not be empty.

    Returns
    -------
    float
        ``THRESHOLD_FACTOR * max(samples)``.
    """
    arr = _to_1d_array(samples)
    if arr.size == 0:
        raise ValueError("samples must contain at least one value")
    return float(arr.max()) * THRESHOLD_FACTOR


def detect_peaks(samples: ArrayLike) -> list[int]:
    """
    Return indices of interior local maxima above the adaptive threshold.

    A position ``i`` (endpoints excluded) is a peak when its value is above
    :func:`calculate_threshold` and strictly greater than both neighbours.
    Plateaus are therefore never reported.

    Parameters
    ----------
    samples:
        1-D array-like of samples; may be empty.

    Returns
    -------
    list[int]
        Strictly increasing peak indices into ``samples``.
    """
    arr = _to_1d_array(samples)
    if arr.size < 3:
        return []

    threshold = calculate_threshold(arr)
    mid = arr[1:-1]
    mask = (mid > threshold) & (mid > arr[:-2]) & (mid > arr[2:])
    return [int(i) for i in np.flatnonzero(mask) + 1]
