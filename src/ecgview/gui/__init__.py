"""Desktop GUI implementation built with PySide6/Qt and pyqtgraph.

The window hosts the waveform canvas, the Start/Stop controls and the status
labels. Timing and background fetching are delegated to Qt (see
:mod:`qt_timer` and :mod:`fetch_worker`); all playback logic lives in
:mod:`ecgview.core`.
"""
