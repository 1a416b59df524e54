from __future__ import annotations

from typing import Tuple

# Columns of the monthly result table handed to the presentation layer.
RESULT_COLUMNS: Tuple[str, ...] = (
    "month",
    "left_pt",
    "right_pt",
    "total_pt",
    "mobilization_left",
    "mobilization_right",
    "total_mobilization",
    "total_commission",
)

# Per-side audit columns (one row per MonthlyState).
STATE_COLUMNS: Tuple[str, ...] = (
    "month_index",
    "start_of_month_pt",
    "prev_month_increase_num",
    "introducers",
    "current_increase_num",
    "increase_pt",
    "end_of_month_pt",
)

# Month labels are always shown on this day, whatever the calendar.
MONTH_LABEL_DAY: int = 20
