"""
Core package — config records and shared primitives.
No business logic lives here.
"""

from .schema import RESULT_COLUMNS, STATE_COLUMNS, MONTH_LABEL_DAY
from .config import CommissionSchedule, InitialValues, SimulationSettings, SIDES
from .utils import (
    excel_mround,
    round_to_nearest,
    floor_to_multiple,
    parse_start_month,
    month_label,
    month_labels,
)

__all__ = [
    "RESULT_COLUMNS",
    "STATE_COLUMNS",
    "MONTH_LABEL_DAY",
    "CommissionSchedule",
    "InitialValues",
    "SimulationSettings",
    "SIDES",
    "excel_mround",
    "round_to_nearest",
    "floor_to_multiple",
    "parse_start_month",
    "month_label",
    "month_labels",
]
