"""
Simulation engine — per-side point recurrence and the monthly runner.
"""

from .commission import CommissionBreakdown, calculate_commission, commission_breakdown
from .step import MonthlyState, SideProjection, advance_state, project_side, seed_state
from .runner import (
    MonthlyResult,
    mobilization,
    results_to_frame,
    run_side_details,
    run_simulation,
    run_simulation_frame,
)

__all__ = [
    "CommissionBreakdown",
    "calculate_commission",
    "commission_breakdown",
    "MonthlyState",
    "SideProjection",
    "advance_state",
    "project_side",
    "seed_state",
    "MonthlyResult",
    "mobilization",
    "results_to_frame",
    "run_side_details",
    "run_simulation",
    "run_simulation_frame",
]
