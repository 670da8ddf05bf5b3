"""Monitor session: start/stop requests, fetch completion and status sinks."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from ..analysis.peaks import detect_peaks
from ..analysis.rate import DEFAULT_SAMPLING_RATE_HZ, estimate_rate
from .models import SampleSeries
from .playback import PlaybackState
from .scheduler import UpdateScheduler

logger = logging.getLogger(__name__)

STATUS_READY = "Ready"
STATUS_LOADED = "ECG Data Loaded"
STATUS_STOPPED = "Animation Stopped"

TextSink = Callable[[str], None]
LoadingSink = Callable[[bool], None]
SuccessCallback = Callable[[SampleSeries], None]
FailureCallback = Callable[[Exception], None]
FetchRunner = Callable[[SuccessCallback, FailureCallback], None]


class SeriesSource(Protocol):
    def fetch(self) -> SampleSeries: ...

    def close(self) -> None: ...


def inline_fetch_runner(source: SeriesSource) -> FetchRunner:
    """
    Return a runner that fetches synchronously on the calling thread.

    The GUI uses a worker thread instead (see ``ecgview.gui.fetch_worker``);
    this runner serves headless use and tests.
    """

    def run(on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        try:
            series = source.fetch()
        except Exception as exc:
            on_failure(exc)
            return
        on_success(series)

    return run


def format_rate(value: float) -> str:
    """Format a rate without a trailing ``.0`` for whole numbers."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


def status_for_error(exc: BaseException) -> str:
    return f"Error: {exc}"


class MonitorSession:
    """
    Applies fetched series to the playback state and drives the scheduler.

    Fetching itself is delegated to ``fetch_runner`` so the analysis and
    playback code stay synchronous; completion arrives through
    :meth:`on_data_ready` or :meth:`on_fetch_failed` on the control thread.

    Auto-start policy: a fetch triggered by :meth:`on_start_requested` starts
    the scheduler when it completes, unless :meth:`on_stop_requested` was
    called after the last start request or the scheduler is already running.
    A start request during a fetch joins that fetch instead of issuing another.
    """

    def __init__(
        self,
        playback: PlaybackState,
        scheduler: UpdateScheduler,
        fetch_runner: FetchRunner,
        *,
        status_sink: TextSink,
        rate_sink: TextSink,
        loading_sink: Optional[LoadingSink] = None,
        sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ,
    ) -> None:
        self._playback = playback
        self._scheduler = scheduler
        self._fetch_runner = fetch_runner
        self._status_sink = status_sink
        self._rate_sink = rate_sink
        self._loading_sink = loading_sink
        self._sampling_rate_hz = float(sampling_rate_hz)

        self._peaks: list[int] = []
        self._rate: int = 0
        self._loading = False
        self._start_pending = False

        self._status_sink(STATUS_READY)

    # ------------------------------------------------------------------ state
    @property
    def playback(self) -> PlaybackState:
        return self._playback

    @property
    def scheduler(self) -> UpdateScheduler:
        return self._scheduler

    @property
    def peaks(self) -> list[int]:
        return list(self._peaks)

    @property
    def rate(self) -> int:
        """Estimated rate of the current series (``0`` when undefined)."""
        return self._rate

    @property
    def is_loading(self) -> bool:
        return self._loading

    def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        if self._loading_sink is not None:
            self._loading_sink(loading)

    # ------------------------------------------------------------------ user requests
    def on_start_requested(self) -> None:
        if self._loading:
            logger.info("Start requested while a fetch is in flight; reusing it")
            self._start_pending = True
            return
        self._start_pending = True
        self._set_loading(True)
        self._fetch_runner(self.on_data_ready, self.on_fetch_failed)

    def on_stop_requested(self) -> None:
        self._start_pending = False
        self._scheduler.stop()
        self._status_sink(STATUS_STOPPED)

    # ------------------------------------------------------------------ fetch completion
    def on_data_ready(self, series: SampleSeries) -> None:
        self._playback.replace_samples(series.samples)
        self._peaks = detect_peaks(self._playback.samples)
        self._rate = estimate_rate(self._peaks, self._sampling_rate_hz)
        logger.info(
            "Loaded %d samples: %d peaks, estimated %d bpm",
            len(self._playback.samples),
            len(self._peaks),
            self._rate,
        )

        if series.has_reported_rate:
            self._rate_sink(f"BPM: {format_rate(series.rate)}")
        else:
            self._rate_sink(f"Est. BPM: {self._rate}")

        if self._start_pending and not self._scheduler.is_running:
            self._scheduler.start()
        self._start_pending = False

        self._set_loading(False)
        self._status_sink(STATUS_LOADED)

    def on_fetch_failed(self, exc: Exception) -> None:
        logger.warning("Failed to fetch ECG data: %s", exc)
        self._start_pending = False
        self._set_loading(False)
        self._status_sink(status_for_error(exc))
