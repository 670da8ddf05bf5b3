"""Background fetch on a QThread with completion delivered to the GUI thread."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThread, Signal, Slot

from ..core.session import FailureCallback, SeriesSource, SuccessCallback

logger = logging.getLogger(__name__)


class FetchWorker(QObject):
    finished = Signal(object)  # SampleSeries
    error = Signal(object)  # Exception

    def __init__(self, source: SeriesSource) -> None:
        super().__init__()
        self._source = source

    @Slot()
    def run(self) -> None:
        try:
            series = self._source.fetch()
        except Exception as exc:
            logger.debug("Fetch worker failed: %r", exc)
            self.error.emit(exc)
            return
        self.finished.emit(series)


class QtFetchRunner(QObject):
    """
    Fetch runner for :class:`~ecgview.core.session.MonitorSession`.

    The worker lives in its own thread; its signals reach the slots below
    through queued connections, so the session callbacks always run on the
    thread that owns this object.
    """

    def __init__(self, source: SeriesSource, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._source = source
        self._threads: set[QThread] = set()
        self._busy = False
        self._on_success: Optional[SuccessCallback] = None
        self._on_failure: Optional[FailureCallback] = None

    def __call__(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        if self.is_busy():
            on_failure(RuntimeError("Fetch already in progress"))
            return
        self._on_success = on_success
        self._on_failure = on_failure

        worker = FetchWorker(self._source)
        thread = QThread(self)
        worker.moveToThread(thread)

        worker.finished.connect(self._handle_finished)
        worker.error.connect(self._handle_error)

        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)

        worker.finished.connect(worker.deleteLater)
        worker.error.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)
        thread.finished.connect(lambda: self._threads.discard(thread))

        self._busy = True
        self._threads.add(thread)
        thread.start()

    def is_busy(self) -> bool:
        return self._busy

    def wait(self, timeout_ms: int = 2000) -> None:
        """Block until fetch threads have exited (used on shutdown)."""
        for thread in list(self._threads):
            thread.quit()
            thread.wait(timeout_ms)

    @Slot(object)
    def _handle_finished(self, series: object) -> None:
        self._busy = False
        callback, self._on_success = self._on_success, None
        self._on_failure = None
        if callback is not None:
            callback(series)

    @Slot(object)
    def _handle_error(self, exc: object) -> None:
        self._busy = False
        callback, self._on_failure = self._on_failure, None
        self._on_success = None
        if callback is not None:
            callback(exc if isinstance(exc, Exception) else RuntimeError(str(exc)))
