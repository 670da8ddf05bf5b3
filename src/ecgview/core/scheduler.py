"""Timer-paced update loop that advances the playback window."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Optional, Protocol, Sequence

from .playback import PlaybackState

logger = logging.getLogger(__name__)

RedrawCallback = Callable[[Sequence[float]], None]

DEFAULT_TICK_INTERVAL_MS = 10
# ~60 Hz display; a tick never fires faster than one frame.
DEFAULT_FRAME_INTERVAL_MS = 16


class TickTimer(Protocol):
    """Host timer used to schedule one-shot callbacks on the control thread."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        """Run ``callback`` once after ``delay_ms``; return a cancellable handle."""

    def cancel(self, handle: Any) -> None:
        """Cancel a handle returned by :meth:`schedule` (no-op if already fired)."""


class SchedulerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class UpdateScheduler:
    """
    Two-state (idle/running) loop that steps :class:`PlaybackState` and asks
    for a redraw once per tick.

    Each tick schedules the next one only after its own body has finished, so
    ticks are strictly sequential. Every scheduled callback carries the
    generation that was current when it was scheduled; :meth:`stop` bumps the
    generation, so a callback that fires late returns without touching state.
    """

    def __init__(
        self,
        playback: PlaybackState,
        redraw: RedrawCallback,
        timer: TickTimer,
        *,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS,
    ) -> None:
        self._playback = playback
        self._redraw = redraw
        self._timer = timer
        self._interval_ms = max(0, int(interval_ms))
        self._frame_interval_ms = max(0, int(frame_interval_ms))

        self._state = SchedulerState.IDLE
        self._generation = 0
        self._pending: Optional[Any] = None
        self._tick_count = 0

    # ------------------------------------------------------------------ state
    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SchedulerState.RUNNING

    @property
    def tick_count(self) -> int:
        """Number of tick bodies executed since construction."""
        return self._tick_count

    @property
    def effective_interval_ms(self) -> int:
        return max(self._interval_ms, self._frame_interval_ms)

    # ------------------------------------------------------------------ control
    def start(self) -> None:
        if self._state is SchedulerState.RUNNING:
            logger.debug("UpdateScheduler.start() ignored: already running")
            return
        self._state = SchedulerState.RUNNING
        logger.info(
            "UpdateScheduler started (tick every %d ms)", self.effective_interval_ms
        )
        self._schedule_next()

    def stop(self) -> None:
        if self._state is SchedulerState.IDLE:
            return
        self._state = SchedulerState.IDLE
        self._generation += 1
        pending, self._pending = self._pending, None
        if pending is not None:
            self._timer.cancel(pending)
        logger.info("UpdateScheduler stopped after %d ticks", self._tick_count)

    # ------------------------------------------------------------------ ticking
    def _schedule_next(self) -> None:
        generation = self._generation
        self._pending = self._timer.schedule(
            self.effective_interval_ms,
            lambda: self._on_timer(generation),
        )

    def _on_timer(self, generation: int) -> None:
        if generation != self._generation or self._state is not SchedulerState.RUNNING:
            return
        self._pending = None
        try:
            self.tick()
        except Exception:
            logger.exception("Tick failed; stopping update loop")
            self.stop()
            return
        if generation == self._generation and self._state is SchedulerState.RUNNING:
            self._schedule_next()

    def tick(self) -> None:
        """Run one tick body: advance the window, then redraw synchronously."""
        self._tick_count += 1
        self._playback.step()
        self._redraw(self._playback.visible())
