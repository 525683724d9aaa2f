"""
CSV export of training logs.

The file opens cleanly in spreadsheet applications: a UTF-8 byte-order
mark precedes a fixed Korean header, and every row lists the minutes per
category in the fixed category order followed by the recorded total.
"""

import csv
import io
from typing import Any, Iterable

from app.logbook.records import field
from app.models.training_log import CATEGORY_LABELS, TrainingCategory

BOM = "\ufeff"

HEADERS = ["날짜", *(f"{CATEGORY_LABELS[c]}(분)" for c in TrainingCategory), "총합(분)"]

MEDIA_TYPE = "text/csv; charset=utf-8"


def to_csv(logs: Iterable[Any]) -> str:
    """Serialize ``logs`` in the given order.

    Missing categories and a missing total are written as 0.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADERS)
    for log in logs:
        trainings = field(log, "trainings") or {}
        writer.writerow([
            field(log, "date"),
            *(trainings.get(category.value) or 0 for category in TrainingCategory),
            field(log, "total_duration") or 0,
        ])
    return BOM + buffer.getvalue().rstrip("\n")


def export_filename(display_name: str) -> str:
    return f"{display_name}_훈련기록.csv"
