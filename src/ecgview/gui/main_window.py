"""Main window for the ecgview GUI."""

from __future__ import annotations

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..config import MonitorConfig
from ..core.session import SeriesSource
from ..core.wiring import build_monitor
from .fetch_worker import QtFetchRunner
from .qt_timer import QtTickTimer
from .waveform_widget import WaveformWidget


class MainWindow(QMainWindow):
    """Waveform canvas, Start/Stop controls and the status/rate labels."""

    def __init__(self, config: MonitorConfig, source: SeriesSource) -> None:
        super().__init__()
        self.setWindowTitle("ECG Monitor")
        self._config = config.sanitized()
        self._logger = logging.getLogger(__name__)

        self.waveform = WaveformWidget(self._config, parent=self)
        self.status_label = QLabel()
        self.rate_label = QLabel()
        self.loading_label = QLabel(self.tr("Loading…"))
        self.loading_label.setVisible(False)
        self.start_button = QPushButton(self.tr("Start"))
        self.stop_button = QPushButton(self.tr("Stop"))

        self._timer = QtTickTimer(self)
        self._fetch_runner = QtFetchRunner(source, self)
        handles = build_monitor(
            self._config,
            timer=self._timer,
            redraw=self.waveform.draw,
            fetch_runner=self._fetch_runner,
            status_sink=self.status_label.setText,
            rate_sink=self.rate_label.setText,
            loading_sink=self.loading_label.setVisible,
        )
        self.session = handles.session

        self.start_button.clicked.connect(self.session.on_start_requested)
        self.stop_button.clicked.connect(self.session.on_stop_requested)

        self._build_layout()

    def _build_layout(self) -> None:
        controls = QHBoxLayout()
        controls.addWidget(self.start_button)
        controls.addWidget(self.stop_button)
        controls.addStretch(1)
        controls.addWidget(self.loading_label)
        controls.addWidget(self.rate_label)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.addWidget(self.waveform)
        layout.addLayout(controls)
        layout.addWidget(self.status_label)

        self.setCentralWidget(container)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.session.scheduler.stop()
        self._timer.cancel_all()
        try:
            self._fetch_runner.wait()
        except Exception as exc:  # pragma: no cover - best-effort shutdown
            self._logger.warning("Failed to wait for fetch thread on close: %r", exc)
        super().closeEvent(event)
