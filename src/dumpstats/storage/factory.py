"""
Storage backend selection by format name.
"""

import logging
from pathlib import Path
from typing import Union

from .base import DataStorage
from .json_storage import JsonStorage
from .parquet_storage import ParquetStorage

logger = logging.getLogger(__name__)


def create_storage(format_type: str = "parquet", compression: str = "snappy") -> DataStorage:
    """
    Create the storage backend for a table format.

    Args:
        format_type: 'parquet' or 'json'
        compression: Parquet compression codec, ignored for JSON

    Raises:
        ValueError: If the format or compression is not supported
    """
    if format_type == "json":
        return JsonStorage()
    if format_type != "parquet":
        raise ValueError(f"Unsupported storage format: {format_type}")
    logger.debug(f"Creating ParquetStorage with compression: {compression}")
    return ParquetStorage(compression=compression)


def storage_for_path(path: Union[str, Path]) -> DataStorage:
    """Pick the backend that reads an exported table, judged by its suffix."""
    return create_storage("json" if Path(path).suffix.lower() == ".json" else "parquet")
