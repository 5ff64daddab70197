"""Weekly summary statistics over health logs."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from health_journal.domain.logs import LogRecord, dated_records
from health_journal.domain.summary import DailyCount, SummaryStats, TagCount
from health_journal.services.logs import HealthLogRepository

DEFAULT_WINDOW_DAYS = 7
DEFAULT_TOP_N = 3


def default_window_start(now: date, days: int = DEFAULT_WINDOW_DAYS) -> date:
    """Return the inclusive lower bound of a trailing window ending at ``now``."""
    return now - timedelta(days=days)


def compute_stats(
    logs: Iterable[LogRecord],
    window_start: date,
    now: date,
    top_n: int = DEFAULT_TOP_N,
) -> SummaryStats:
    """Compute totals, tag ranking and a sparse daily series.

    Records are kept when ``window_start <= log_date <= now``. Tags with equal
    counts keep the order in which they were first seen, which ``Counter``
    guarantees through insertion order.
    """
    tag_counts: Counter[str] = Counter()
    day_counts: Counter[date] = Counter()
    total = 0
    for log, log_day in dated_records(logs):
        if not window_start <= log_day <= now:
            continue
        total += 1
        day_counts[log_day] += 1
        tag_counts.update(log.tags or ())

    window_days = max((now - window_start).days, 1)
    return SummaryStats(
        total_count=total,
        ranked_tags=[
            TagCount(tag=tag, count=count)
            for tag, count in tag_counts.most_common(max(top_n, 0))
        ],
        daily_series=[
            DailyCount(day=day, count=day_counts[day]) for day in sorted(day_counts)
        ],
        daily_average=total / window_days,
    )


@dataclass
class SummaryService:
    """Service for trailing-window dashboard statistics."""

    repository: HealthLogRepository
    window_days: int = DEFAULT_WINDOW_DAYS
    top_n: int = DEFAULT_TOP_N

    def get_summary(
        self,
        user_id: UUID,
        today: date,
        days: int | None = None,
        top_n: int | None = None,
    ) -> SummaryStats:
        """Return statistics for the trailing window ending today."""
        window_start = default_window_start(today, days or self.window_days)
        logs = self.repository.list_logs_between(user_id, window_start, today)
        return compute_stats(
            logs,
            window_start=window_start,
            now=today,
            top_n=self.top_n if top_n is None else top_n,
        )
