"""
Storage module for exported heap dump reports.

Reports are persisted as a per-class table (Parquet via Polars, or JSON) plus
a JSON summary, behind a common DataStorage interface.
"""

from .base import DataStorage
from .factory import create_storage, storage_for_path
from .json_storage import JsonStorage
from .parquet_storage import ParquetStorage
from .report_manager import ReportStorageManager

__all__ = [
    "DataStorage",
    "JsonStorage",
    "ParquetStorage",
    "ReportStorageManager",
    "create_storage",
    "storage_for_path",
]
