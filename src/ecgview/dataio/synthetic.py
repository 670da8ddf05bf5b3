"""Locally generated ECG-like series for offline demos."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..analysis.rate import DEFAULT_SAMPLING_RATE_HZ
from ..core.models import SampleSeries

logger = logging.getLogger(__name__)


def generate_ecg(
    *,
    heart_rate_bpm: float = 72.0,
    duration_s: float = 10.0,
    sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ,
    noise_level: float = 0.0,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Generate a series of Gaussian R-waves on a small sinusoidal baseline.

    Amplitudes stay within roughly ``[-0.2, 1.0]`` so the series fits the
    renderer's vertical scale without normalisation.

    Parameters
    ----------
    heart_rate_bpm:
        Beat rate; R-waves are spaced ``60 / heart_rate_bpm`` seconds apart.
    duration_s:
        Length of the series in seconds.
    sampling_rate_hz:
        Samples per second.
    noise_level:
        Standard deviation of additive Gaussian noise.
    seed:
        Seed for the noise generator (for reproducible output).
    """
    if heart_rate_bpm <= 0:
        raise ValueError(f"heart_rate_bpm must be > 0, got {heart_rate_bpm}")
    if sampling_rate_hz <= 0:
        raise ValueError(f"sampling_rate_hz must be > 0, got {sampling_rate_hz}")

    n_samples = max(0, int(round(duration_s * sampling_rate_hz)))
    t = np.arange(n_samples) / float(sampling_rate_hz)
    period_s = 60.0 / float(heart_rate_bpm)

    # Distance (seconds) to the R-wave at the middle of each beat.
    phase = np.mod(t, period_s) - period_s / 2.0
    ecg = np.exp(-(phase ** 2) / (2 * 0.012 ** 2))
    ecg += 0.1 * np.sin(2 * np.pi * t / period_s) - 0.05

    if noise_level > 0:
        rng = np.random.default_rng(seed)
        ecg += rng.normal(0.0, noise_level, n_samples)
    return ecg


class SyntheticSampleSource:
    """Drop-in replacement for :class:`SampleSource` that never touches the network."""

    def __init__(
        self,
        *,
        heart_rate_bpm: float = 72.0,
        duration_s: float = 10.0,
        sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ,
        noise_level: float = 0.02,
        report_rate: bool = False,
    ) -> None:
        self.heart_rate_bpm = float(heart_rate_bpm)
        self.duration_s = float(duration_s)
        self.sampling_rate_hz = float(sampling_rate_hz)
        self.noise_level = float(noise_level)
        self.report_rate = bool(report_rate)

    def fetch(self) -> SampleSeries:
        ecg = generate_ecg(
            heart_rate_bpm=self.heart_rate_bpm,
            duration_s=self.duration_s,
            sampling_rate_hz=self.sampling_rate_hz,
            noise_level=self.noise_level,
        )
        logger.info(
            "Generated synthetic ECG: %d samples at %.1f Hz, %.1f bpm",
            ecg.size,
            self.sampling_rate_hz,
            self.heart_rate_bpm,
        )
        rate = self.heart_rate_bpm if self.report_rate else None
        return SampleSeries(samples=tuple(float(v) for v in ecg), rate=rate)

    def close(self) -> None:
        pass
