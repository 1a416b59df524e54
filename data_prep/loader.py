"""
Raw input parsing — form fields, JSON, or a two-column CSV into the
engine's InitialValues / SimulationSettings records.

Field names follow the original input form ids (startMonth, directLeft, ...);
snake_case names are accepted as well.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import pandas as pd
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.config import InitialValues, SimulationSettings
from core.utils import parse_start_month


class InputError(ValueError):
    """Raw inputs could not be turned into simulation records."""


# Defaults of the input form. startMonth is filled with the current month by callers.
DEFAULT_FORM_VALUES: Dict[str, Any] = {
    "startMonth": None,
    "startLeftPt": 0,
    "startRightPt": 0,
    "directLeft": 2,
    "directRight": 2,
    "simulationMonths": 12,
    "name": "",
    "referralRate": 50,
    "referralsPerPerson": 3,
    "pointMultiplier": 1.5,
    "mobilizationRate": 15,
}


class RawInputs(BaseModel):
    """One submitted input form, with numeric text coerced to numbers."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    start_month: str = Field(..., alias="startMonth")
    start_left_pt: float = Field(..., alias="startLeftPt")
    start_right_pt: float = Field(..., alias="startRightPt")
    direct_left: int = Field(..., alias="directLeft")
    direct_right: int = Field(..., alias="directRight")
    simulation_months: int = Field(..., alias="simulationMonths")
    name: Optional[str] = Field(default=None, alias="name")

    referral_rate: float = Field(..., alias="referralRate")
    referrals_per_person: float = Field(..., alias="referralsPerPerson")
    point_multiplier: float = Field(..., alias="pointMultiplier")
    mobilization_rate: float = Field(..., alias="mobilizationRate")

    @field_validator("start_month", mode="before")
    @classmethod
    def _check_start_month(cls, v):
        if v is None:
            raise ValueError("start month is required")
        # raises ValueError on garbage, which pydantic reports per field
        return parse_start_month(v).strftime("%Y-%m")

    @field_validator("name", mode="before")
    @classmethod
    def _blank_name_is_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    def to_records(self) -> Tuple[InitialValues, SimulationSettings]:
        initial = InitialValues(
            start_month=parse_start_month(self.start_month),
            start_left_pt=self.start_left_pt,
            start_right_pt=self.start_right_pt,
            direct_left=self.direct_left,
            direct_right=self.direct_right,
            simulation_months=self.simulation_months,
            name=self.name,
        )
        settings = SimulationSettings(
            referral_rate=self.referral_rate,
            referrals_per_person=self.referrals_per_person,
            point_multiplier=self.point_multiplier,
            mobilization_rate=self.mobilization_rate,
        )
        return initial, settings


def _flatten(fields: Mapping[str, Any]) -> Dict[str, Any]:
    # accept {"initial": {...}, "settings": {...}} as well as a flat mapping
    flat: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in ("initial", "settings") and isinstance(value, Mapping):
            flat.update(value)
        else:
            flat[key] = value
    return flat


def parse_inputs(fields: Mapping[str, Any]) -> Tuple[InitialValues, SimulationSettings]:
    """Validate raw fields and build the engine records. Raises InputError listing every bad field."""
    try:
        raw = RawInputs.model_validate(_flatten(fields))
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InputError("Invalid inputs:\n- " + "\n- ".join(problems)) from exc
    return raw.to_records()


def load_inputs(path: Union[str, Path]) -> Tuple[InitialValues, SimulationSettings]:
    """
    Load inputs from a .json object or a .csv of `field,value` rows.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    logger.debug("Loading inputs from {}", path)

    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as fh:
            fields = json.load(fh)
        if not isinstance(fields, dict):
            raise InputError(f"{path}: expected a JSON object, got {type(fields).__name__}")
    elif suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if list(df.columns[:2]) != ["field", "value"]:
            raise InputError(f"{path}: expected columns 'field,value', got {list(df.columns)}")
        fields = dict(zip(df["field"].str.strip(), df["value"].str.strip()))
    else:
        raise InputError(f"Unsupported input file type: {path.suffix!r} (use .json or .csv)")

    return parse_inputs(fields)
