"""PyQtGraph canvas that draws the grid and the visible waveform."""

from __future__ import annotations

from typing import Optional, Sequence

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from ..config import MonitorConfig
from ..tools.debug import time_block
from .geometry import GRID_PITCH, grid_lines, segments_to_pairs, waveform_points

GRID_LINE_WIDTH = 0.5


class WaveformWidget(pg.PlotWidget):
    """
    Fixed-size canvas in pixel coordinates (origin top-left, y downwards).

    The grid is drawn once; :meth:`draw` only replaces the waveform curve.
    """

    def __init__(self, config: MonitorConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent=parent, background=config.background_color)
        self._config = config
        width, height = config.graph_width, config.graph_height

        plot_item = self.getPlotItem()
        plot_item.hideAxis("left")
        plot_item.hideAxis("bottom")
        plot_item.hideButtons()
        plot_item.setMenuEnabled(False)
        plot_item.setMouseEnabled(x=False, y=False)

        view_box = plot_item.getViewBox()
        view_box.invertY(True)
        view_box.setRange(xRange=(0, width), yRange=(0, height), padding=0)
        self.setFixedSize(width, height)

        grid_x, grid_y = segments_to_pairs(grid_lines(width, height, GRID_PITCH))
        self._grid = pg.PlotDataItem(
            grid_x,
            grid_y,
            connect="pairs",
            pen=pg.mkPen(config.grid_color, width=GRID_LINE_WIDTH),
        )
        plot_item.addItem(self._grid)

        self._curve = plot_item.plot(
            pen=pg.mkPen(config.line_color, width=config.line_width)
        )

    def draw(self, values: Sequence[float]) -> None:
        """Replace the waveform with ``values``; fewer than two points clears it."""
        with time_block("waveform draw"):
            if len(values) < 2:
                self._curve.setData([], [])
                return
            cfg = self._config
            xs, ys = waveform_points(
                values, cfg.graph_width, cfg.graph_height, cfg.points_to_show
            )
            self._curve.setData(xs, ys)
