#!/usr/bin/env python3
"""
Offline snapshot plotter for ECG payloads.

Loads one series, either from the HTTP endpoint (``--url``), from a saved
JSON payload (``--file``, same ``{"ecgValues": [...], "bpm": n}`` shape) or
from the synthetic generator (``--synthetic``), marks the detected R-waves
and shows the estimated rate in the title. The figure is shown in
Matplotlib's own window and can optionally be saved as an image.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from ..analysis.peaks import calculate_threshold, detect_peaks
from ..analysis.rate import DEFAULT_SAMPLING_RATE_HZ, estimate_rate
from ..core.models import SampleSeries
from ..core.session import format_rate
from ..dataio.sample_source import FetchError, SampleSource, parse_payload
from ..dataio.synthetic import SyntheticSampleSource

logger = logging.getLogger(__name__)


def load_payload_file(path: Path) -> SampleSeries:
    """Read a JSON payload from disk and decode it like a fetched response."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise FetchError(f"Malformed JSON in {path}: {exc}") from exc
    return parse_payload(payload)


def create_series_plot(
    series: SampleSeries,
    *,
    sampling_rate_hz: float = DEFAULT_SAMPLING_RATE_HZ,
    save_path: Optional[Path] = None,
) -> Figure:
    """
    Plot ``series`` with detected peaks and the threshold line.

    Returns
    -------
    Figure
        The Matplotlib figure (not shown).
    """
    samples = np.asarray(series.samples, dtype=float)
    peaks = detect_peaks(samples)
    estimated = estimate_rate(peaks, sampling_rate_hz)

    fig, ax = plt.subplots(figsize=(14, 4))
    ax.plot(samples, linewidth=0.9, color="#2ecc71", label="ECG")
    if samples.size:
        ax.axhline(
            calculate_threshold(samples),
            color="#7f8c8d",
            linestyle="--",
            linewidth=0.8,
            label="Threshold",
        )
    if peaks:
        ax.plot(peaks, samples[peaks], "rx", markersize=8, label="Detected peaks")

    title = f"ECG snapshot | Samples: {samples.size} | Est. BPM: {estimated}"
    if series.has_reported_rate:
        title += f" | Reported BPM: {format_rate(series.rate)}"
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_xlabel("Sample Index")
    ax.set_ylabel("Value")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    fig.tight_layout()

    if save_path is not None:
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        logger.info("Plot saved to %s", save_path)

    return fig


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plot one ECG payload with detected peaks")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--url", type=str, help="Fetch the payload from this endpoint")
    src.add_argument("--file", type=Path, help="Read the payload from a JSON file")
    src.add_argument("--synthetic", action="store_true", help="Plot a generated series")
    parser.add_argument(
        "--sampling-rate",
        type=float,
        default=DEFAULT_SAMPLING_RATE_HZ,
        help="Sampling rate assumed for rate estimation (default: 250)",
    )
    parser.add_argument("--save", type=Path, default=None, help="Save the figure here")
    parser.add_argument("--no-show", action="store_true", help="Do not open a window")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(name)s | %(message)s")

    try:
        if args.url:
            source = SampleSource(args.url)
            try:
                series = source.fetch()
            finally:
                source.close()
        elif args.file:
            series = load_payload_file(args.file)
        else:
            series = SyntheticSampleSource(sampling_rate_hz=args.sampling_rate).fetch()
    except (FetchError, OSError) as exc:
        logger.error("Could not load series: %s", exc)
        return 1

    create_series_plot(series, sampling_rate_hz=args.sampling_rate, save_path=args.save)
    if not args.no_show:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
