"""Qt application entry point for the ecgview GUI.

This module wires up argument parsing and logging, loads the monitor
configuration, picks the sample source (HTTP or synthetic), builds the
:class:`~ecgview.gui.main_window.MainWindow` and starts the Qt event loop.
All GUI launches, whether through ``python main.py``, the ``ecgview`` console
script or ``python -m ecgview.gui.application``, flow through ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Tuple

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication, QMainWindow

from ..config import MonitorConfig, load_config
from ..core.session import SeriesSource
from ..dataio import SampleSource, SyntheticSampleSource
from .main_window import MainWindow

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrolling ECG waveform monitor")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with monitor settings (default: built-in defaults)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Override the data endpoint from the config file",
    )
    parser.add_argument(
        "--synthetic",
        action="store_true",
        help="Use a locally generated ECG series instead of the HTTP endpoint",
    )
    parser.add_argument(
        "--synthetic-bpm",
        type=float,
        default=72.0,
        help="Heart rate of the synthetic series (default: 72)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    return parser


def _parse_cli_args(
    argv: list[str],
) -> tuple[argparse.Namespace, list[str]]:
    parser = _build_arg_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    return args, qt_argv


def build_source(
    config: MonitorConfig,
    *,
    synthetic: bool = False,
    synthetic_bpm: float = 72.0,
) -> SeriesSource:
    """Return the sample source selected on the command line."""
    if synthetic:
        return SyntheticSampleSource(
            heart_rate_bpm=synthetic_bpm,
            sampling_rate_hz=config.sampling_rate_hz,
        )
    return SampleSource(config.api_url, timeout_s=config.request_timeout_s)


def create_app(
    argv: list[str] | None = None,
    *,
    config: MonitorConfig | None = None,
    source: SeriesSource | None = None,
) -> Tuple[QApplication, QMainWindow]:
    """
    Create the QApplication and the monitor window.

    Returns
    -------
    app:
        The QApplication instance (owned by caller).
    window:
        The main window, ready to show.
    """
    qt_args = argv if argv is not None else sys.argv
    app = QApplication.instance() or QApplication(qt_args)
    pg.setConfigOptions(antialias=True)

    config = (config or MonitorConfig()).sanitized()
    if source is None:
        source = build_source(config)
    window = MainWindow(config, source)
    return app, window


def run_event_loop(app: QApplication, source: SeriesSource) -> int:
    """Run the Qt event loop and close ``source`` once it returns."""
    try:
        return app.exec()
    finally:
        source.close()
        logger.info("Sample source closed")


def main(argv: list[str] | None = None) -> None:
    raw_argv = argv if argv is not None else sys.argv
    args, qt_argv = _parse_cli_args(raw_argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    config = load_config(args.config)
    if args.api_url:
        config.api_url = args.api_url
    config = config.sanitized()
    source = build_source(
        config,
        synthetic=args.synthetic,
        synthetic_bpm=args.synthetic_bpm,
    )
    logger.info(
        "Starting monitor (%s source, %d points, tick %d ms)",
        "synthetic" if args.synthetic else config.api_url,
        config.points_to_show,
        config.animation_speed_ms,
    )

    app, win = create_app(qt_argv, config=config, source=source)
    win.show()
    raise SystemExit(run_event_loop(app, source))


if __name__ == "__main__":
    main()
