"""Signal analysis utilities (peak detection and heart-rate estimation).

Modules here operate on plain sequences or NumPy arrays of ECG samples and
stay free of Qt and I/O dependencies so they can be reused by the GUI, the
offline plotter, and automated tests alike.
"""

from .peaks import THRESHOLD_FACTOR, calculate_threshold, detect_peaks
from .rate import DEFAULT_SAMPLING_RATE_HZ, estimate_rate, estimate_rate_from_samples

__all__ = [
    "THRESHOLD_FACTOR",
    "calculate_threshold",
    "detect_peaks",
    "DEFAULT_SAMPLING_RATE_HZ",
    "estimate_rate",
    "estimate_rate_from_samples",
]
