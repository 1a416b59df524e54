"""
Per-side monthly recurrence — one side of the referral tree, month by month.

Month 0 (seed):
  start    = MROUND(starting points, step)
  increase = direct referrals (given, not derived)

Month i > 0:
  start       = previous end-of-month points (not re-rounded)
  introducers = floor(previous increase x referral rate)
  increase    = introducers x referrals per person  (may be fractional)

Every month:
  increase_pt = MROUND(increase x point multiplier, step)
  end         = MROUND(start + increase_pt, step)

Each state is a new frozen value built from the previous one only.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Iterator

import pandas as pd

from core.config import InitialValues, Side, SimulationSettings
from core.schema import STATE_COLUMNS
from core.utils import round_to_nearest


@dataclass(frozen=True)
class MonthlyState:
    """One side's figures for one simulated month."""
    month_index: int
    start_of_month_pt: float
    prev_month_increase_num: float
    introducers: int
    current_increase_num: float
    increase_pt: float
    end_of_month_pt: float


def _close_month(
    month_index: int,
    start_pt: float,
    prev_increase: float,
    introducers: int,
    current_increase: float,
    settings: SimulationSettings,
) -> MonthlyState:
    step = settings.point_step
    increase_pt = round_to_nearest(current_increase * settings.point_multiplier, step)
    end_pt = round_to_nearest(start_pt + increase_pt, step)
    return MonthlyState(
        month_index=month_index,
        start_of_month_pt=start_pt,
        prev_month_increase_num=prev_increase,
        introducers=introducers,
        current_increase_num=current_increase,
        increase_pt=increase_pt,
        end_of_month_pt=end_pt,
    )


def seed_state(starting_pt: float, direct_referrals: float, settings: SimulationSettings) -> MonthlyState:
    """Month 0: direct referrals are credited as-is, no referral-rate math."""
    start_pt = round_to_nearest(starting_pt, settings.point_step)
    return _close_month(0, start_pt, 0, 0, direct_referrals, settings)


def advance_state(previous: MonthlyState, settings: SimulationSettings) -> MonthlyState:
    """Month i > 0, derived from month i-1 only."""
    prev_increase = previous.current_increase_num
    # fractional people cannot refer: floor, not round
    introducers = int(math.floor(prev_increase * (settings.referral_rate / 100)))
    current_increase = introducers * settings.referrals_per_person
    return _close_month(
        previous.month_index + 1,
        previous.end_of_month_pt,
        prev_increase,
        introducers,
        current_increase,
        settings,
    )


class SideProjection:
    """
    Lazy, finite, restartable sequence of MonthlyState for one side.

    Iterating regenerates the chain from the seed, so the same projection
    can be walked any number of times with identical results.
    """

    def __init__(
        self,
        starting_pt: float,
        direct_referrals: float,
        settings: SimulationSettings,
        months: int,
    ):
        self.starting_pt = starting_pt
        self.direct_referrals = direct_referrals
        self.settings = settings
        self.months = months

    def __len__(self) -> int:
        return max(int(self.months), 0)

    def __iter__(self) -> Iterator[MonthlyState]:
        n = len(self)
        if n == 0:
            return
        state = seed_state(self.starting_pt, self.direct_referrals, self.settings)
        yield state
        for _ in range(1, n):
            state = advance_state(state, self.settings)
            yield state

    def to_frame(self) -> pd.DataFrame:
        rows = [asdict(s) for s in self]
        return pd.DataFrame(rows, columns=list(STATE_COLUMNS))


def project_side(initial: InitialValues, settings: SimulationSettings, side: Side) -> SideProjection:
    """Same recurrence for either side; only the seed scalars differ."""
    if side not in ("left", "right"):
        raise ValueError(f"Unknown side: {side!r}")
    return SideProjection(
        starting_pt=initial.starting_points(side),
        direct_referrals=initial.direct_referrals(side),
        settings=settings,
        months=initial.simulation_months,
    )
