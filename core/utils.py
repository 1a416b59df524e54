from __future__ import annotations

from datetime import date, datetime
from typing import List, Union

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

from .schema import MONTH_LABEL_DAY


def excel_mround(x, multiple: float):
    """Excel MROUND: nearest multiple, half away from zero (vectorized)."""
    if multiple == 0:
        return x
    q = np.asarray(x, dtype=float) / multiple
    return np.sign(q) * np.floor(np.abs(q) + 0.5) * multiple


def round_to_nearest(value: float, step: float) -> float:
    if step == 0:
        return value
    return float(excel_mround(value, step))


def floor_to_multiple(value: float, step: float) -> float:
    """Greatest multiple of step that is <= value."""
    if step == 0:
        return value
    return float(np.floor(value / step) * step)


def parse_start_month(value: Union[str, date, datetime, pd.Timestamp]) -> pd.Timestamp:
    """
    Normalise a year-month anchor ("2025-04", "2025-04-13", date, Timestamp)
    to the first day of that month.
    """
    if isinstance(value, str):
        ts = pd.to_datetime(value.strip(), errors="coerce")
    else:
        ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Unparseable start month: {value!r}")
    return pd.Timestamp(year=ts.year, month=ts.month, day=1)


def month_label(start_month: pd.Timestamp, offset: int, *, day: int = MONTH_LABEL_DAY) -> str:
    """Label for `offset` calendar months after start_month, e.g. '2025/06/20'."""
    d = pd.Timestamp(start_month) + relativedelta(months=offset)
    return f"{d.year}/{d.month:02d}/{day:02d}"


def month_labels(start_month: pd.Timestamp, n_months: int) -> List[str]:
    return [month_label(start_month, k) for k in range(max(n_months, 0))]
