"""
JSON storage for exported reports.

Tables are written as `{"columns": [...], "rows": [{...}, ...]}` so an empty
table still records its column names.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import polars as pl

from .base import DataStorage

logger = logging.getLogger(__name__)


class JsonStorage(DataStorage):
    """Stores tables and dictionaries as UTF-8 JSON documents."""

    extension = "json"

    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        self.save_dict({"columns": df.columns, "rows": df.to_dicts()}, path)
        logger.debug(f"Saved {len(df)} rows as JSON to {path}")

    def load_dataframe(self, path: str, columns: Optional[List[str]] = None) -> pl.DataFrame:
        data = self.load_dict(path)
        df = pl.from_dicts(data["rows"], schema=data["columns"])
        return df.select(columns) if columns else df

    def save_dict(self, data: Dict[str, Any], path: str) -> None:
        """
        Write a dictionary as indented JSON.

        Class names may contain non-ASCII text, so nothing is escaped.
        """
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise

    def load_dict(self, path: str) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def file_exists(self, path: str) -> bool:
        return Path(path).is_file()

    def get_file_size(self, path: str) -> int:
        try:
            return Path(path).stat().st_size
        except FileNotFoundError:
            return 0
