"""Factory helpers that wire a monitor from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import MonitorConfig
from .playback import PlaybackState
from .scheduler import RedrawCallback, TickTimer, UpdateScheduler
from .session import FetchRunner, LoadingSink, MonitorSession, TextSink


@dataclass(slots=True)
class MonitorHandles:
    """Return value from :func:`build_monitor` containing ready-to-use pieces."""

    playback: PlaybackState
    scheduler: UpdateScheduler
    session: MonitorSession


def build_monitor(
    cfg: MonitorConfig,
    *,
    timer: TickTimer,
    redraw: RedrawCallback,
    fetch_runner: FetchRunner,
    status_sink: TextSink,
    rate_sink: TextSink,
    loading_sink: Optional[LoadingSink] = None,
) -> MonitorHandles:
    """
    Build the playback state, scheduler and session for ``cfg``.

    Parameters
    ----------
    cfg:
        Runtime configuration (usually loaded from YAML).
    timer:
        Host timer used for tick scheduling (Qt in the GUI, a fake in tests).
    redraw:
        Called once per tick with the visible window contents.
    fetch_runner:
        Starts a fetch and reports completion through the supplied callbacks.
    status_sink, rate_sink, loading_sink:
        Receivers for the status text, the rate text and the loading flag.
    """
    normalized = cfg.sanitized()

    playback = PlaybackState(normalized.points_to_show)
    scheduler = UpdateScheduler(
        playback,
        redraw,
        timer,
        interval_ms=normalized.animation_speed_ms,
        frame_interval_ms=normalized.frame_interval_ms,
    )
    session = MonitorSession(
        playback,
        scheduler,
        fetch_runner,
        status_sink=status_sink,
        rate_sink=rate_sink,
        loading_sink=loading_sink,
        sampling_rate_hz=normalized.sampling_rate_hz,
    )
    return MonitorHandles(playback=playback, scheduler=scheduler, session=session)


__all__ = ["MonitorHandles", "build_monitor"]
