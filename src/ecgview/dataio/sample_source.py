"""HTTP sample source: one GET returning ``{"ecgValues": [...], "bpm": n}``."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

import requests

from ..core.models import SampleSeries

logger = logging.getLogger(__name__)

SAMPLES_FIELD = "ecgValues"
RATE_FIELD = "bpm"
DEFAULT_TIMEOUT_S = 10.0


class FetchError(RuntimeError):
    """Raised when the series cannot be fetched or decoded."""


def _as_number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FetchError(f"{what} must be a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise FetchError(f"{what} must be finite, got {value!r}")
    return number


def parse_payload(payload: Any) -> SampleSeries:
    """
    Decode a JSON payload into a :class:`SampleSeries`.

    A missing or ``null`` ``ecgValues`` field is an empty series; a missing
    ``bpm`` means no reported rate.
    """
    if not isinstance(payload, Mapping):
        raise FetchError(f"Expected a JSON object, got {type(payload).__name__}")

    raw_values = payload.get(SAMPLES_FIELD) or []
    if not isinstance(raw_values, list):
        raise FetchError(f"{SAMPLES_FIELD} must be an array")
    samples = tuple(
        _as_number(v, f"{SAMPLES_FIELD}[{i}]") for i, v in enumerate(raw_values)
    )

    raw_rate = payload.get(RATE_FIELD)
    rate: Optional[float] = None
    if raw_rate is not None:
        rate = _as_number(raw_rate, RATE_FIELD)

    return SampleSeries(samples=samples, rate=rate)


class SampleSource:
    """Fetch an ECG series from ``url`` with a single HTTP GET."""

    def __init__(
        self,
        url: str,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout_s = float(timeout_s)
        self._session = session or requests.Session()

    def fetch(self) -> SampleSeries:
        logger.info("Fetching ECG data from %s", self.url)
        try:
            response = self._session.get(self.url, timeout=self.timeout_s)
        except requests.RequestException as exc:
            raise FetchError(str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise FetchError(f"HTTP error {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(f"Malformed JSON: {exc}") from exc

        series = parse_payload(payload)
        logger.info(
            "Fetched %d samples (reported rate: %s)", len(series), series.rate
        )
        return series

    def close(self) -> None:
        self._session.close()
