"""
Data models for the dumpstats package.

All models are plain dataclasses with type hints.
"""

from .records import AggregateRecord, DecoderState, ReportTotals

__all__ = [
    "AggregateRecord",
    "DecoderState",
    "ReportTotals",
]
