"""Sample sources for the monitor.

- :mod:`sample_source` fetches a JSON payload over HTTP with ``requests``.
- :mod:`synthetic` generates an ECG-like series locally for demos and tests.

Both expose the same ``fetch()`` contract returning a
:class:`~ecgview.core.models.SampleSeries`.
"""

from .sample_source import FetchError, SampleSource, parse_payload
from .synthetic import SyntheticSampleSource, generate_ecg

__all__ = [
    "FetchError",
    "SampleSource",
    "parse_payload",
    "SyntheticSampleSource",
    "generate_ecg",
]
