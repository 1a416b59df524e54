"""
Sanity checks for simulation inputs before they enter the engine.

The engine itself propagates whatever it is given; this is where callers
find out about inputs that are impossible (errors) or merely unusual (warnings).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from core.config import InitialValues, SimulationSettings

# Horizons beyond this are almost certainly a typo (50 years).
MAX_REASONABLE_MONTHS = 600


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one set of inputs."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_inputs(initial: InitialValues, settings: SimulationSettings) -> ValidationResult:
    """
    Run all checks on one set of inputs.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    numbers = {
        "start_left_pt": initial.start_left_pt,
        "start_right_pt": initial.start_right_pt,
        "referral_rate": settings.referral_rate,
        "referrals_per_person": settings.referrals_per_person,
        "point_multiplier": settings.point_multiplier,
        "mobilization_rate": settings.mobilization_rate,
    }
    bad = [k for k, v in numbers.items() if not math.isfinite(float(v))]
    if bad:
        result.errors.append(f"Non-finite values: {bad}")
        return result  # nothing below is meaningful

    # --- Direct referrals ---
    for label, count in (("direct_left", initial.direct_left), ("direct_right", initial.direct_right)):
        if count < 0:
            result.errors.append(f"{label} is negative ({count}).")

    # --- Starting points ---
    for label, pts in (("start_left_pt", initial.start_left_pt), ("start_right_pt", initial.start_right_pt)):
        if pts < 0:
            result.warnings.append(f"{label} is negative ({pts}); commission on negative points is undefined.")

    # --- Rates ---
    for label in ("referral_rate", "mobilization_rate"):
        rate = numbers[label]
        if rate < 0 or rate > 100:
            result.warnings.append(f"{label} = {rate} is outside 0-100; check it is a percent.")

    for label in ("referrals_per_person", "point_multiplier"):
        if numbers[label] < 0:
            result.warnings.append(f"{label} is negative ({numbers[label]}).")

    # --- Horizon ---
    if initial.simulation_months <= 0:
        result.warnings.append(
            f"simulation_months = {initial.simulation_months}; the run will produce no rows."
        )
    elif initial.simulation_months > MAX_REASONABLE_MONTHS:
        result.warnings.append(
            f"simulation_months = {initial.simulation_months} exceeds {MAX_REASONABLE_MONTHS}."
        )

    return result
