"""
Simulation runner — drives both sides in lockstep and combines each month
into one result row.

For month i:
  1. advance the left and right recurrences one step (independently)
  2. mobilization per side = floor(end-of-month points x mobilization rate)
  3. commission per side   = tiered commission on end-of-month points
  4. label = start month + i calendar months, shown on the fixed display day

Either every month is produced or the call raises; there are no partial runs.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, List

import pandas as pd
from loguru import logger

from core.config import SIDES, InitialValues, SimulationSettings
from core.schema import RESULT_COLUMNS
from core.utils import month_label

from .commission import calculate_commission
from .step import project_side


@dataclass(frozen=True)
class MonthlyResult:
    month: str
    left_pt: float
    right_pt: float
    total_pt: float
    mobilization_left: int
    mobilization_right: int
    total_mobilization: int
    total_commission: float

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def mobilization(points: float, rate: float) -> int:
    """Headcount drawn from a point pool; truncated, never rounded up."""
    return int(math.floor(points * (rate / 100)))


def run_simulation(initial: InitialValues, settings: SimulationSettings) -> List[MonthlyResult]:
    """
    Project both sides for initial.simulation_months months.

    Returns one MonthlyResult per month in chronological order; an empty
    list when simulation_months <= 0.
    """
    left = project_side(initial, settings, "left")
    right = project_side(initial, settings, "right")
    logger.debug(
        "Running simulation: months={} start={} left_pt={} right_pt={}",
        initial.simulation_months,
        initial.start_month,
        initial.start_left_pt,
        initial.start_right_pt,
    )

    results: List[MonthlyResult] = []
    for i, (l_state, r_state) in enumerate(zip(left, right)):
        left_pt = l_state.end_of_month_pt
        right_pt = r_state.end_of_month_pt

        mob_left = mobilization(left_pt, settings.mobilization_rate)
        mob_right = mobilization(right_pt, settings.mobilization_rate)

        commission_left = calculate_commission(left_pt, settings.commission)
        commission_right = calculate_commission(right_pt, settings.commission)

        results.append(
            MonthlyResult(
                month=month_label(initial.start_month, i),
                left_pt=left_pt,
                right_pt=right_pt,
                total_pt=left_pt + right_pt,
                mobilization_left=mob_left,
                mobilization_right=mob_right,
                total_mobilization=mob_left + mob_right,
                total_commission=commission_left + commission_right,
            )
        )

    logger.debug("Simulation finished: {} monthly rows", len(results))
    return results


def results_to_frame(results: List[MonthlyResult]) -> pd.DataFrame:
    return pd.DataFrame([r.as_dict() for r in results], columns=list(RESULT_COLUMNS))


def run_simulation_frame(initial: InitialValues, settings: SimulationSettings) -> pd.DataFrame:
    return results_to_frame(run_simulation(initial, settings))


def run_side_details(initial: InitialValues, settings: SimulationSettings) -> Dict[str, pd.DataFrame]:
    """Per-side audit tables (every intermediate figure of the recurrence)."""
    return {side: project_side(initial, settings, side).to_frame() for side in SIDES}
