"""Log book helpers: weekly aggregation and CSV export (pure, no I/O)."""

from app.logbook.export import to_csv
from app.logbook.week import filter_and_sum, get_week_range, summarize_week

__all__ = ["filter_and_sum", "get_week_range", "summarize_week", "to_csv"]
