"""Domain models for weekly summaries."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class TagCount:
    """How often a tag appeared in the window."""

    tag: str
    count: int


@dataclass(frozen=True)
class DailyCount:
    """Number of logs recorded on a single day."""

    day: date
    count: int

    @property
    def label(self) -> str:
        """Chart label, e.g. ``Mar 1``."""
        return f"{self.day:%b} {self.day.day}"


@dataclass(frozen=True)
class SummaryStats:
    """Aggregated statistics for a trailing window."""

    total_count: int = 0
    ranked_tags: list[TagCount] = field(default_factory=list)
    daily_series: list[DailyCount] = field(default_factory=list)
    daily_average: float = 0.0

    @property
    def top_tag(self) -> TagCount | None:
        return self.ranked_tags[0] if self.ranked_tags else None
