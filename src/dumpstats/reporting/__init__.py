"""
Report generation for decoded heap dumps.
"""

from .reporter import (
    compute_totals,
    display_name,
    records_to_dataframe,
    render_report,
    sort_by_footprint,
    write_report,
)

__all__ = [
    "compute_totals",
    "display_name",
    "records_to_dataframe",
    "render_report",
    "sort_by_footprint",
    "write_report",
]
