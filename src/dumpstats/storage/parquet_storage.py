"""
Parquet table storage using Polars.

Only the per-class table goes to Parquet; dictionaries such as the report
summary are still written as JSON by the parent class.
"""

import logging
from pathlib import Path
from typing import List, Optional

import polars as pl

from ..config import SUPPORTED_COMPRESSIONS
from .json_storage import JsonStorage

logger = logging.getLogger(__name__)


class ParquetStorage(JsonStorage):
    """Parquet tables with a configurable compression codec."""

    extension = "parquet"

    def __init__(self, compression: str = "snappy"):
        if compression not in SUPPORTED_COMPRESSIONS:
            raise ValueError(f"Unsupported compression algorithm: {compression}")
        self.compression = compression

    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        try:
            df.write_parquet(path, compression=self.compression)
        except Exception as e:
            logger.error(f"Failed to write Parquet table {path}: {e}")
            raise
        logger.debug(f"Saved {len(df)} rows to {path} ({self.compression})")

    def load_dataframe(self, path: str, columns: Optional[List[str]] = None) -> pl.DataFrame:
        # Column pruning happens in the Parquet reader
        return pl.read_parquet(path, columns=columns)
