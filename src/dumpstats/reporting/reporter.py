"""
Ranked per-class footprint report.

The reporter consumes the mapping produced by the decoder, orders classes by
footprint (largest first), scales word counts to bytes using the caller's word
size, and renders one line per class followed by a totals line:

    <name>: <footprint * word_size> <count>
    ...

    total: <sum(footprint) * word_size> <sum(count)>

Classes that were never named are shown by their numeric id.
"""

import logging
import sys
from typing import Dict, Iterable, List, Mapping, Optional, TextIO

import polars as pl

from ..models import AggregateRecord, ReportTotals
from ..validation import validate_positive_integer

logger = logging.getLogger(__name__)


def sort_by_footprint(records: Mapping[int, AggregateRecord]) -> List[AggregateRecord]:
    """Return the records ordered by footprint, largest first."""
    return sorted(records.values(), key=lambda r: r.footprint, reverse=True)


def display_name(record: AggregateRecord) -> str:
    """Name of the record's class, or its decimal id when it was never named."""
    if record.name is None:
        return str(record.key)
    return record.name


def compute_totals(records: Iterable[AggregateRecord]) -> ReportTotals:
    footprint = 0
    count = 0
    classes = 0
    for record in records:
        footprint += record.footprint
        count += record.count
        classes += 1
    return ReportTotals(footprint=footprint, count=count, classes=classes)


def render_report(records: Mapping[int, AggregateRecord], word_size: int) -> List[str]:
    """
    Render the report as a list of lines (without trailing newlines).

    Args:
        records: Mapping of class id to aggregate record
        word_size: Byte width of one machine word on the producing system

    Returns:
        One line per class in descending footprint order, a blank line, and
        the totals line

    Raises:
        ValidationError: If word_size is not a positive integer
    """
    word_size = validate_positive_integer(word_size, field_name="word_size")

    ranked = sort_by_footprint(records)
    lines = [
        f"{display_name(r)}: {r.footprint * word_size} {r.count}" for r in ranked
    ]
    totals = compute_totals(ranked)
    lines.append("")
    lines.append(f"total: {totals.footprint * word_size} {totals.count}")

    logger.debug(
        f"Rendered report for {totals.classes} classes, "
        f"{totals.count} instances, word size {word_size}"
    )
    return lines


def write_report(
    records: Mapping[int, AggregateRecord],
    word_size: int,
    stream: Optional[TextIO] = None,
) -> None:
    """Write the rendered report to `stream` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for line in render_report(records, word_size):
        out.write(line + "\n")
    out.flush()


def records_to_dataframe(
    records: Mapping[int, AggregateRecord], word_size: int
) -> pl.DataFrame:
    """
    Convert aggregate records to a Polars DataFrame in report order.

    Columns: class_id, name, footprint_words, footprint_bytes, instances.
    The name column holds the display name, so unnamed classes show their id.
    """
    word_size = validate_positive_integer(word_size, field_name="word_size")
    ranked = sort_by_footprint(records)
    data: Dict[str, list] = {
        "class_id": [r.key for r in ranked],
        "name": [display_name(r) for r in ranked],
        "footprint_words": [r.footprint for r in ranked],
        "footprint_bytes": [r.footprint * word_size for r in ranked],
        "instances": [r.count for r in ranked],
    }
    return pl.DataFrame(
        data,
        schema={
            "class_id": pl.Int64,
            "name": pl.Utf8,
            "footprint_words": pl.Int64,
            "footprint_bytes": pl.Int64,
            "instances": pl.Int64,
        },
    )
