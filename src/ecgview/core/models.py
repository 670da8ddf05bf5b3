"""Shared dataclasses for fetched ECG series."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SampleSeries:
    """One fetched payload: the raw samples plus an optional device-reported rate."""

    samples: tuple[float, ...] = field(default_factory=tuple)
    rate: Optional[float] = None

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def has_reported_rate(self) -> bool:
        # A reported rate of 0 is treated as absent.
        return bool(self.rate)
