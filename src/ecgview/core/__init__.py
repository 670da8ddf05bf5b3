"""Core playback pipeline: window buffer, update loop and session wiring.

This package sits between the sample sources and the GUI: it owns the
currently loaded series, the sliding display window over it, the timer-paced
loop that advances that window, and the session object that reacts to
start/stop requests and fetch completion.
"""

from .models import SampleSeries
from .ringbuffer import RingBuffer
from .window_buffer import WindowBuffer
from .playback import PlaybackState
from .scheduler import SchedulerState, TickTimer, UpdateScheduler
from .session import MonitorSession, inline_fetch_runner
from .wiring import MonitorHandles, build_monitor

__all__ = [
    "SampleSeries",
    "RingBuffer",
    "WindowBuffer",
    "PlaybackState",
    "SchedulerState",
    "TickTimer",
    "UpdateScheduler",
    "MonitorSession",
    "inline_fetch_runner",
    "MonitorHandles",
    "build_monitor",
]
