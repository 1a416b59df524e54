"""
Reporting — run summaries and tabular export.
"""

from .summary import summarize_results
from .export import export_results, results_title

__all__ = [
    "summarize_results",
    "export_results",
    "results_title",
]
