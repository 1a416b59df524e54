"""
Tests for raw input parsing.
"""

import json

import pandas as pd
import pytest
from pydantic import ValidationError

from data_prep.loader import DEFAULT_FORM_VALUES, InputError, RawInputs, load_inputs, parse_inputs


@pytest.fixture
def form_fields():
    """Form values exactly as a browser form would submit them (all text)."""
    return {
        "startMonth": "2025-04",
        "startLeftPt": "10.5",
        "startRightPt": "0",
        "directLeft": "3",
        "directRight": "1",
        "simulationMonths": "12",
        "name": "  Tanaka  ",
        "referralRate": "50",
        "referralsPerPerson": "2.5",
        "pointMultiplier": "1.5",
        "mobilizationRate": "15",
    }


class TestParseInputs:

    def test_form_fields_coerced(self, form_fields):
        initial, settings = parse_inputs(form_fields)
        assert initial.start_month == pd.Timestamp("2025-04-01")
        assert initial.start_left_pt == 10.5
        assert initial.direct_left == 3
        assert initial.direct_right == 1
        assert initial.simulation_months == 12
        assert initial.name == "Tanaka"
        assert settings.referral_rate == 50
        assert settings.referrals_per_person == 2.5
        assert settings.point_step == 0.5

    def test_snake_case_names(self):
        initial, settings = parse_inputs({
            "start_month": "2025-04-13",
            "start_left_pt": 0,
            "start_right_pt": 0,
            "direct_left": 2,
            "direct_right": 0,
            "simulation_months": 1,
            "referral_rate": 50,
            "referrals_per_person": 3,
            "point_multiplier": 1.5,
            "mobilization_rate": 15,
        })
        assert initial.start_month == pd.Timestamp("2025-04-01")
        assert initial.name is None
        assert settings.point_multiplier == 1.5

    def test_nested_initial_and_settings(self, form_fields):
        nested = {
            "initial": {k: form_fields[k] for k in (
                "startMonth", "startLeftPt", "startRightPt", "directLeft",
                "directRight", "simulationMonths", "name",
            )},
            "settings": {k: form_fields[k] for k in (
                "referralRate", "referralsPerPerson", "pointMultiplier", "mobilizationRate",
            )},
        }
        assert parse_inputs(nested) == parse_inputs(form_fields)

    def test_blank_name_is_none(self, form_fields):
        form_fields["name"] = "   "
        initial, _ = parse_inputs(form_fields)
        assert initial.name is None

    def test_every_bad_field_reported(self, form_fields):
        form_fields["pointMultiplier"] = "abc"
        del form_fields["referralRate"]
        with pytest.raises(InputError) as exc_info:
            parse_inputs(form_fields)
        msg = str(exc_info.value)
        assert "pointMultiplier" in msg or "point_multiplier" in msg
        assert "referralRate" in msg or "referral_rate" in msg

    def test_bad_start_month(self, form_fields):
        form_fields["startMonth"] = "not-a-month"
        with pytest.raises(InputError):
            parse_inputs(form_fields)

    def test_input_error_is_value_error(self):
        assert issubclass(InputError, ValueError)

    def test_defaults_need_only_start_month(self):
        fields = dict(DEFAULT_FORM_VALUES, startMonth="2025-01")
        initial, settings = parse_inputs(fields)
        assert initial.simulation_months == DEFAULT_FORM_VALUES["simulationMonths"]
        assert settings.mobilization_rate == DEFAULT_FORM_VALUES["mobilizationRate"]

    def test_raw_model_is_frozen(self, form_fields):
        raw = RawInputs.model_validate(form_fields)
        with pytest.raises(ValidationError):
            raw.direct_left = 5


class TestLoadInputs:

    def test_json(self, tmp_path, form_fields):
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps(form_fields), encoding="utf-8")
        assert load_inputs(path) == parse_inputs(form_fields)

    def test_json_must_be_object(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(InputError):
            load_inputs(path)

    def test_csv(self, tmp_path, form_fields):
        path = tmp_path / "inputs.csv"
        pd.DataFrame({"field": list(form_fields), "value": list(form_fields.values())}).to_csv(path, index=False)
        initial, settings = load_inputs(path)
        assert initial.direct_left == 3
        assert settings.referrals_per_person == 2.5

    def test_csv_wrong_columns(self, tmp_path):
        path = tmp_path / "inputs.csv"
        path.write_text("key,val\ndirectLeft,3\n", encoding="utf-8")
        with pytest.raises(InputError):
            load_inputs(path)

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "inputs.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(InputError):
            load_inputs(path)
