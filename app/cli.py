"""
Binary point simulator — command line
=====================================

Projects left/right points, mobilization and commission month by month
and prints the result table.

Run: binary-sim --inputs inputs.json --export results.xlsx
     binary-sim --direct-left 10 --months 24
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

import pandas as pd
from loguru import logger

from data_prep.loader import DEFAULT_FORM_VALUES, load_inputs, parse_inputs
from data_prep.validators import validate_inputs
from engine.runner import results_to_frame, run_side_details, run_simulation
from report.export import export_results, results_title
from report.summary import summarize_results

# flag -> form field id
_FLAG_FIELDS: Dict[str, str] = {
    "start_month": "startMonth",
    "start_left_pt": "startLeftPt",
    "start_right_pt": "startRightPt",
    "direct_left": "directLeft",
    "direct_right": "directRight",
    "months": "simulationMonths",
    "name": "name",
    "referral_rate": "referralRate",
    "referrals_per_person": "referralsPerPerson",
    "point_multiplier": "pointMultiplier",
    "mobilization_rate": "mobilizationRate",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binary-sim",
        description="Month-by-month binary network point and commission simulation.",
    )
    parser.add_argument("--inputs", help="JSON object or field,value CSV with the input form")
    parser.add_argument("--start-month", help="YYYY-MM (default: current month)")
    parser.add_argument("--start-left-pt")
    parser.add_argument("--start-right-pt")
    parser.add_argument("--direct-left")
    parser.add_argument("--direct-right")
    parser.add_argument("--months", help="number of months to simulate")
    parser.add_argument("--name")
    parser.add_argument("--referral-rate", help="percent")
    parser.add_argument("--referrals-per-person")
    parser.add_argument("--point-multiplier")
    parser.add_argument("--mobilization-rate", help="percent")
    parser.add_argument("--export", help="write results to .csv or .xlsx")
    parser.add_argument("--details", action="store_true", help="print per-side recurrence tables")
    parser.add_argument("--log-level", default="INFO")
    return parser


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        level=level.upper(),
    )


def _form_fields(args: argparse.Namespace) -> Dict[str, object]:
    fields = dict(DEFAULT_FORM_VALUES)
    fields["startMonth"] = pd.Timestamp.today().strftime("%Y-%m")
    for attr, field_id in _FLAG_FIELDS.items():
        value = getattr(args, attr)
        if value is not None:
            fields[field_id] = value
    return fields


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        if args.inputs:
            initial, settings = load_inputs(args.inputs)
        else:
            initial, settings = parse_inputs(_form_fields(args))
    except (ValueError, OSError) as exc:
        logger.error(str(exc))
        return 2

    check = validate_inputs(initial, settings)
    for w in check.warnings:
        logger.warning(w)
    if not check.is_valid:
        logger.error(check.summary())
        return 2

    results = run_simulation(initial, settings)

    print(results_title(initial.name))
    print(results_to_frame(results).to_string(index=False))

    if args.details:
        for side, table in run_side_details(initial, settings).items():
            print(f"\n[{side}]")
            print(table.to_string(index=False))

    print()
    for key, value in summarize_results(results, schedule=settings.commission).items():
        print(f"{key}: {value}")

    if args.export:
        try:
            export_results(results, args.export, name=initial.name)
        except (ValueError, OSError) as exc:
            logger.error(str(exc))
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
