"""Pure geometry for the waveform canvas (no Qt imports)."""

from __future__ import annotations

from typing import Sequence

import numpy as np

GRID_PITCH = 20
AMPLITUDE_FACTOR = 0.8

Segment = tuple[float, float, float, float]


def grid_lines(width: float, height: float, pitch: int = GRID_PITCH) -> list[Segment]:
    """Return ``(x0, y0, x1, y1)`` segments: verticals first, then horizontals."""
    if pitch <= 0:
        raise ValueError(f"pitch must be > 0, got {pitch}")
    segments: list[Segment] = []
    for x in range(0, int(np.ceil(width)), pitch):
        segments.append((float(x), 0.0, float(x), float(height)))
    for y in range(0, int(np.ceil(height)), pitch):
        segments.append((0.0, float(y), float(width), float(y)))
    return segments


def segments_to_pairs(segments: Sequence[Segment]) -> tuple[np.ndarray, np.ndarray]:
    """Flatten segments into x/y arrays suitable for ``connect="pairs"``."""
    if not segments:
        return np.empty(0), np.empty(0)
    arr = np.asarray(segments, dtype=float)
    xs = arr[:, [0, 2]].reshape(-1)
    ys = arr[:, [1, 3]].reshape(-1)
    return xs, ys


def waveform_points(
    values: Sequence[float],
    width: float,
    height: float,
    points_to_show: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Map window values to canvas coordinates (y grows downwards).

    Points are spaced ``width / (points_to_show - 1)`` apart from the left
    edge; a value of 0 sits on the vertical centre and +/-1 reaches
    ``AMPLITUDE_FACTOR`` of the half height.
    """
    if points_to_show < 2:
        raise ValueError(f"points_to_show must be >= 2, got {points_to_show}")
    arr = np.asarray(values, dtype=float)
    x_scale = float(width) / (points_to_show - 1)
    half = float(height) / 2.0
    xs = np.arange(arr.size, dtype=float) * x_scale
    ys = half - arr * half * AMPLITUDE_FACTOR
    return xs, ys
