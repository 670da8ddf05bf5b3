from __future__ import annotations

import json

import pytest
import requests

from ecgview.dataio.sample_source import FetchError, SampleSource, parse_payload


class _FakeResponse:
    def __init__(self, status_code: int = 200, body: str = "{}") -> None:
        self.status_code = status_code
        self._body = body

    def json(self):
        return json.loads(self._body)


class _FakeSession:
    def __init__(self, response=None, exc: Exception | None = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, float]] = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        pass


def test_fetch_decodes_values_and_rate() -> None:
    body = json.dumps({"ecgValues": [0.1, 0.5, -0.2], "bpm": 71})
    session = _FakeSession(_FakeResponse(200, body))
    source = SampleSource("http://example.test/data", timeout_s=3.0, session=session)

    series = source.fetch()

    assert series.samples == (0.1, 0.5, -0.2)
    assert series.rate == 71.0
    assert session.calls == [("http://example.test/data", 3.0)]


def test_fetch_defaults_missing_values_to_empty() -> None:
    session = _FakeSession(_FakeResponse(200, json.dumps({"bpm": None})))
    series = SampleSource("http://x", session=session).fetch()
    assert series.samples == ()
    assert series.rate is None
    assert not series.has_reported_rate


@pytest.mark.parametrize("status", [301, 404, 500])
def test_non_2xx_status_is_a_fetch_failure(status) -> None:
    session = _FakeSession(_FakeResponse(status, "{}"))
    with pytest.raises(FetchError, match=f"HTTP error {status}"):
        SampleSource("http://x", session=session).fetch()


def test_network_error_is_a_fetch_failure() -> None:
    session = _FakeSession(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(FetchError, match="connection refused"):
        SampleSource("http://x", session=session).fetch()


def test_malformed_json_is_a_fetch_failure() -> None:
    session = _FakeSession(_FakeResponse(200, "<html>oops</html>"))
    with pytest.raises(FetchError, match="Malformed JSON"):
        SampleSource("http://x", session=session).fetch()


def test_parse_payload_rejects_non_objects_and_bad_values() -> None:
    with pytest.raises(FetchError):
        parse_payload([1, 2, 3])
    with pytest.raises(FetchError):
        parse_payload({"ecgValues": "1,2,3"})
    with pytest.raises(FetchError, match=r"ecgValues\[1\]"):
        parse_payload({"ecgValues": [1, "two"]})
    with pytest.raises(FetchError):
        parse_payload({"ecgValues": [1, True]})
    with pytest.raises(FetchError):
        parse_payload({"ecgValues": [], "bpm": "fast"})
