"""
Simulation configuration.
Settings and initial values are passed explicitly into every engine call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

import pandas as pd

Side = Literal["left", "right"]
SIDES: Tuple[Side, Side] = ("left", "right")


@dataclass(frozen=True)
class CommissionSchedule:
    cycle_points: float = 50.0
    cycle_commission: float = 10000.0

    # (threshold, amount) for the remainder after full cycles, highest threshold first
    remainder_tiers: Tuple[Tuple[float, float], ...] = (
        (40.0, 7500.0),
        (30.0, 6000.0),
        (20.0, 4500.0),
        (10.0, 3000.0),
        (5.0, 1500.0),
    )


@dataclass(frozen=True)
class SimulationSettings:
    referral_rate: float  # percent of last month's growth that refers someone
    referrals_per_person: float
    point_multiplier: float
    mobilization_rate: float  # percent of end-of-month points

    # MROUND multiple applied to increase points and the running total
    point_step: float = 0.5
    commission: CommissionSchedule = field(default_factory=CommissionSchedule)


@dataclass(frozen=True)
class InitialValues:
    start_month: pd.Timestamp
    start_left_pt: float = 0.0
    start_right_pt: float = 0.0
    direct_left: int = 0
    direct_right: int = 0
    simulation_months: int = 12
    name: Optional[str] = None

    def starting_points(self, side: Side) -> float:
        return self.start_left_pt if side == "left" else self.start_right_pt

    def direct_referrals(self, side: Side) -> int:
        return self.direct_left if side == "left" else self.direct_right
