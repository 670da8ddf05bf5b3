"""Owned playback state shared by the scheduler and the session."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .window_buffer import WindowBuffer

logger = logging.getLogger(__name__)


class PlaybackState:
    """
    The current sample sequence, its display window and the read cursor.

    One instance is created per monitor and injected wherever it is needed;
    all mutations go through :meth:`replace_samples` and :meth:`step`.
    """

    def __init__(self, points_to_show: int) -> None:
        self._samples: tuple[float, ...] = ()
        self._window = WindowBuffer(points_to_show)
        self._cursor = 0

    @property
    def samples(self) -> tuple[float, ...]:
        return self._samples

    @property
    def window(self) -> WindowBuffer:
        return self._window

    @property
    def cursor(self) -> int:
        return self._cursor

    def replace_samples(self, samples: Iterable[float]) -> None:
        """Swap in a new sequence and start the window over from scratch."""
        self._samples = tuple(float(v) for v in samples)
        self._window.reset()
        self._cursor = 0
        logger.debug("Playback reset with %d samples", len(self._samples))

    def step(self) -> Optional[float]:
        """Advance the window by one sample; ``None`` on the wraparound step."""
        samples = self._samples
        self._cursor, appended = self._window.advance(samples, self._cursor)
        return appended

    def visible(self) -> list[float]:
        return self._window.snapshot()
