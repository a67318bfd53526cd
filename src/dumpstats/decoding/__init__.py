"""
Heap dump decoding.

This package reads the tagged binary event stream and aggregates it into
per-class footprint and instance counts.
"""

from .decoder import RecordMap, decode_file, decode_stream, get_record
from .reader import DumpReader
from .tags import Tag

__all__ = [
    "DumpReader",
    "RecordMap",
    "Tag",
    "decode_file",
    "decode_stream",
    "get_record",
]
