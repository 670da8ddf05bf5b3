"""Configuration objects and helpers for ecgview.

A single YAML file (optional) captures the monitor settings: the data
endpoint, the canvas geometry and colours, the update pacing and the sampling
rate assumed by the heart-rate estimator. The resulting typed dataclass (see
:mod:`runtime`) is fixed at startup and handed to the session and the GUI.
"""

from .runtime import MonitorConfig, config_from_mapping, load_config

__all__ = ["MonitorConfig", "config_from_mapping", "load_config"]
