"""
dumpstats: per-class memory footprint summaries from VM heap dumps.

The package reads the tagged binary heap dump written by a virtual machine's
heap dumper, aggregates instance sizes and counts per class, and reports the
classes ranked by footprint.

The package is organized into specialized modules:
- models: Aggregate record and decoder state data structures
- decoding: Primitive wire readers and the event-stream decoder
- reporting: Ranking, name resolution, and report rendering
- validation: Exception taxonomy, error handling, and argument validation
- config: Export storage settings
- storage: Persisting reports as Parquet/JSON tables
- cli: Command-line interface

Usage:
    From command line:
        dumpstats <heap dump> <word size>

    Programmatically:
        from dumpstats import decode_file, render_report
        records = decode_file("heap.dump")
        print("\\n".join(render_report(records, word_size=8)))
"""

from .models import AggregateRecord, DecoderState, ReportTotals
from .decoding import Tag, decode_file, decode_stream, get_record
from .reporting import (
    compute_totals,
    display_name,
    records_to_dataframe,
    render_report,
    sort_by_footprint,
    write_report,
)
from .validation import (
    DecodeError,
    DumpStatsError,
    InvalidLengthError,
    MalformedTagError,
    TruncatedInputError,
    UsageError,
    ValidationError,
)
from .config import StorageConfig
from .storage import ReportStorageManager
from .cli import main_cli

__version__ = "1.0.0"

__all__ = [
    # Models
    "AggregateRecord",
    "DecoderState",
    "ReportTotals",
    # Decoding
    "Tag",
    "decode_file",
    "decode_stream",
    "get_record",
    # Reporting
    "compute_totals",
    "display_name",
    "records_to_dataframe",
    "render_report",
    "sort_by_footprint",
    "write_report",
    # Errors
    "DumpStatsError",
    "UsageError",
    "ValidationError",
    "DecodeError",
    "TruncatedInputError",
    "MalformedTagError",
    "InvalidLengthError",
    # Export
    "StorageConfig",
    "ReportStorageManager",
    # CLI
    "main_cli",
]
