"""Runtime configuration for the monitor (fixed at startup, no reload)."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

DEFAULT_API_URL = "https://your-ecg-api-endpoint.com/data"


@dataclass(slots=True)
class MonitorConfig:
    """
    Endpoint, canvas appearance and pacing knobs for the waveform monitor.

    The defaults assume a 250 Hz source drawn on an 800x200 canvas, one new
    point every 10 ms with 200 points visible at once.
    """

    api_url: str = DEFAULT_API_URL
    request_timeout_s: float = 10.0

    graph_width: int = 800
    graph_height: int = 200
    line_color: str = "#2ecc71"
    line_width: float = 2.0
    background_color: str = "#f8f9fa"
    grid_color: str = "#e0e0e0"

    animation_speed_ms: int = 10
    frame_interval_ms: int = 16
    points_to_show: int = 200

    sampling_rate_hz: float = 250.0

    def sanitized(self) -> MonitorConfig:
        """Return a copy with derived limits applied."""
        return MonitorConfig(
            api_url=str(self.api_url).strip(),
            request_timeout_s=max(0.1, float(self.request_timeout_s)),
            graph_width=max(1, int(self.graph_width)),
            graph_height=max(1, int(self.graph_height)),
            line_color=str(self.line_color),
            line_width=max(0.1, float(self.line_width)),
            background_color=str(self.background_color),
            grid_color=str(self.grid_color),
            animation_speed_ms=max(0, int(self.animation_speed_ms)),
            frame_interval_ms=max(0, int(self.frame_interval_ms)),
            # Two points are needed for the x pitch of the renderer.
            points_to_show=max(2, int(self.points_to_show)),
            sampling_rate_hz=max(1.0, float(self.sampling_rate_hz)),
        )


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`MonitorConfig`."""
    return {f.name for f in fields(MonitorConfig)}


_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")
_ALIASES = {
    "animation_speed": "animation_speed_ms",
}


def _snake_case(key: str) -> str:
    """``graphWidth`` -> ``graph_width``; ``apiUrl`` -> ``api_url``."""
    snake = _CAMEL_RE.sub("_", str(key)).lower()
    return _ALIASES.get(snake, snake)


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten a top-level ``monitor`` block and accept camelCase keys."""
    flat: MutableMapping[str, Any] = {}
    for key, value in data.items():
        if key == "monitor" and isinstance(value, Mapping):
            for inner_key, inner_value in value.items():
                flat[_snake_case(inner_key)] = inner_value
        else:
            flat[_snake_case(key)] = value
    return flat


def config_from_mapping(data: Mapping[str, Any] | None) -> MonitorConfig:
    """Build :class:`MonitorConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return MonitorConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return MonitorConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> MonitorConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`MonitorConfig`.
    """
    if path is None:
        return MonitorConfig()
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        return MonitorConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["MonitorConfig", "config_from_mapping", "load_config"]
