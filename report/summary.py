"""
Run-level summary of a finished simulation.

Computes final-month position, cumulative and peak commission, and the
first month any side completes a full commission cycle.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from core.config import CommissionSchedule
from engine.runner import MonthlyResult


def summarize_results(
    results: List[MonthlyResult],
    *,
    schedule: Optional[CommissionSchedule] = None,
) -> Dict[str, object]:
    """
    Parameters
    ----------
    results : list of MonthlyResult
        Output of engine.runner.run_simulation(), chronological.
    schedule : CommissionSchedule, optional
        Used only for the cycle width in `first_cycle_month`.

    Returns
    -------
    Dict with n_months, final_* figures, cumulative_commission,
    peak_commission, peak_commission_month, first_cycle_month.
    """
    schedule = schedule or CommissionSchedule()

    if not results:
        return {
            "n_months": 0,
            "final_left_pt": None,
            "final_right_pt": None,
            "final_total_pt": None,
            "final_total_mobilization": None,
            "final_total_commission": None,
            "cumulative_commission": 0.0,
            "peak_commission": None,
            "peak_commission_month": None,
            "first_cycle_month": None,
        }

    last = results[-1]
    # first occurrence wins on ties
    peak = max(results, key=lambda r: r.total_commission)
    first_cycle = next(
        (
            r.month
            for r in results
            if r.left_pt >= schedule.cycle_points or r.right_pt >= schedule.cycle_points
        ),
        None,
    )

    return {
        "n_months": len(results),
        "final_left_pt": last.left_pt,
        "final_right_pt": last.right_pt,
        "final_total_pt": last.total_pt,
        "final_total_mobilization": last.total_mobilization,
        "final_total_commission": last.total_commission,
        "cumulative_commission": float(sum(r.total_commission for r in results)),
        "peak_commission": peak.total_commission,
        "peak_commission_month": peak.month,
        "first_cycle_month": first_cycle,
    }
