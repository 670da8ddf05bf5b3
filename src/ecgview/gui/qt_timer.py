"""Qt implementation of the scheduler's :class:`~ecgview.core.scheduler.TickTimer`."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer, Qt


class QtTickTimer(QObject):
    """One single-shot :class:`QTimer` per scheduled tick, owned by this object."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timers: set[QTimer] = set()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setTimerType(Qt.PreciseTimer)

        def fire() -> None:
            self._release(timer)
            callback()

        timer.timeout.connect(fire)
        self._timers.add(timer)
        timer.start(max(0, int(delay_ms)))
        return timer

    def cancel(self, handle: QTimer) -> None:
        if handle in self._timers:
            handle.stop()
            self._release(handle)

    def cancel_all(self) -> None:
        for timer in list(self._timers):
            self.cancel(timer)

    def _release(self, timer: QTimer) -> None:
        self._timers.discard(timer)
        timer.deleteLater()
