"""
Shared fixtures for the simulator tests.

- reference settings (50% referral rate, 3 referrals each, 1.5x points, 15% mobilization)
- a builder for InitialValues with sensible defaults
"""

import sys
from pathlib import Path

import pandas as pd
import pytest

# Make project root importable when running without an install
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import InitialValues, SimulationSettings  # noqa: E402


@pytest.fixture
def settings() -> SimulationSettings:
    return SimulationSettings(
        referral_rate=50,
        referrals_per_person=3,
        point_multiplier=1.5,
        mobilization_rate=15,
    )


@pytest.fixture
def make_initial():
    """Factory: InitialValues starting 2025-11 with overridable fields."""

    def _make(**overrides) -> InitialValues:
        values = dict(
            start_month=pd.Timestamp("2025-11-01"),
            start_left_pt=0.0,
            start_right_pt=0.0,
            direct_left=0,
            direct_right=0,
            simulation_months=1,
        )
        values.update(overrides)
        return InitialValues(**values)

    return _make
