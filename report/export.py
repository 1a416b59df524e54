from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import pandas as pd
from loguru import logger

from engine.runner import MonthlyResult, results_to_frame


def results_title(name: Optional[str] = None) -> str:
    if name and name.strip():
        return f"Simulation results for {name.strip()}"
    return "Simulation results"


def export_results(
    results: List[MonthlyResult],
    path: Union[str, Path],
    *,
    name: Optional[str] = None,
) -> Path:
    """
    Write the monthly table to .csv or .xlsx.

    The xlsx sheet carries the title in its first row, the table below it.
    """
    path = Path(path)
    df = results_to_frame(results)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        df.to_csv(path, index=False)
    elif suffix == ".xlsx":
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="results", index=False, startrow=1)
            writer.sheets["results"].cell(row=1, column=1, value=results_title(name))
    else:
        raise ValueError(f"Unsupported export type: {path.suffix!r} (use .csv or .xlsx)")

    logger.debug("Exported {} rows to {}", len(df), path)
    return path
