"""
Tiered commission — full 50-point cycles pay a flat amount, the remainder
pays through a stepped ladder (no interpolation between tiers).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from core.config import CommissionSchedule


@dataclass(frozen=True)
class CommissionBreakdown:
    points: float
    full_cycles: int
    cycle_amount: float
    remainder: float
    remainder_amount: float

    @property
    def total(self) -> float:
        return self.cycle_amount + self.remainder_amount


def _remainder_amount(remainder: float, schedule: CommissionSchedule) -> float:
    for threshold, amount in schedule.remainder_tiers:
        if remainder >= threshold:
            return amount
    return 0.0


def commission_breakdown(points: float, schedule: CommissionSchedule) -> CommissionBreakdown:
    if schedule.cycle_points <= 0:
        raise ValueError(f"cycle_points must be positive, got {schedule.cycle_points}")

    full_cycles = int(math.floor(points / schedule.cycle_points))
    remainder = math.fmod(points, schedule.cycle_points)
    return CommissionBreakdown(
        points=points,
        full_cycles=full_cycles,
        cycle_amount=full_cycles * schedule.cycle_commission,
        remainder=remainder,
        remainder_amount=_remainder_amount(remainder, schedule),
    )


def calculate_commission(points: float, schedule: CommissionSchedule) -> float:
    """
    Commission payable on an accumulated point total.

    Negative totals are not clamped; they flow through the same formula.
    """
    return commission_breakdown(points, schedule).total
