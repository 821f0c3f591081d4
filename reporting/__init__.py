"""
Reporting — summary tables and fit comparison built on pandas/scipy.
"""

from .fit_report import best_fit, compare_fits
from .summary import frequency_frame, summarize, summary_table

__all__ = [
    "summarize",
    "summary_table",
    "frequency_frame",
    "compare_fits",
    "best_fit",
]
