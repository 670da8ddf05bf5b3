"""Sliding display window over a (possibly much longer) sample sequence."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .ringbuffer import RingBuffer

AdvanceResult = Tuple[int, Optional[float]]


class WindowBuffer:
    """
    Fixed-size, order-preserving view that grows by one sample per call to
    :meth:`advance`.

    When the cursor reaches the end of the source sequence the next call
    wraps the cursor to ``0`` and appends nothing; appending resumes from the
    start of the sequence on the following call. That idle step at the
    wraparound is intentional and visible as one repeated frame.
    """

    __slots__ = ("_buffer",)

    def __init__(self, capacity: int) -> None:
        self._buffer: RingBuffer[float] = RingBuffer(capacity)

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def advance(self, samples: Sequence[float], cursor: int) -> AdvanceResult:
        """
        Move one step through ``samples`` starting at ``cursor``.

        Returns
        -------
        tuple
            ``(new_cursor, appended_value)`` where ``appended_value`` is
            ``None`` on the wraparound step.
        """
        if cursor < 0:
            raise ValueError(f"cursor must be >= 0, got {cursor}")
        if cursor >= len(samples):
            return 0, None

        value = float(samples[cursor])
        self._buffer.append(value)
        return cursor + 1, value

    def reset(self) -> None:
        self._buffer.clear()

    def snapshot(self) -> list[float]:
        return self._buffer.snapshot()

    def __len__(self) -> int:
        return len(self._buffer)
