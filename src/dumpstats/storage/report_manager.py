"""
Export manager for decoded heap dump reports.

This module provides a high-level interface for persisting a report in the
configured storage format, so results can be reloaded for analysis or charted
by the plotting tool.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import polars as pl

from ..config import StorageConfig
from ..models import AggregateRecord
from ..reporting import compute_totals, records_to_dataframe, render_report
from ..validation import validate_positive_integer
from .factory import create_storage

logger = logging.getLogger(__name__)

CLASS_TABLE_STEM = "class_footprint"
SUMMARY_FILENAME = "report_summary.json"
TEXT_REPORT_FILENAME = "report.txt"


class ReportStorageManager:
    """
    Saves and loads exported heap dump reports.

    Files written to the output directory:
    - class_footprint.parquet (or .json): one row per class in report order
    - report_summary.json: totals and export parameters
    - report.txt: the plain-text report, when enabled in the config
    """

    def __init__(self, output_dir: Path, storage_config: Optional[StorageConfig] = None):
        """
        Initialize the report storage manager.

        Args:
            output_dir: Directory where report files will be stored
            storage_config: Export settings, defaults to Parquet with snappy
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        config = storage_config or StorageConfig()
        self.storage_format = config.format
        self.compression = config.compression
        self.write_text_report = config.write_text_report

        self.storage = create_storage(self.storage_format, self.compression)

        logger.debug(
            f"Initialized ReportStorageManager with format: {self.storage_format}"
        )

    @property
    def class_table_path(self) -> Path:
        return self.output_dir / f"{CLASS_TABLE_STEM}.{self.storage.extension}"

    @property
    def summary_path(self) -> Path:
        return self.output_dir / SUMMARY_FILENAME

    def save_report(
        self,
        records: Mapping[int, AggregateRecord],
        word_size: int,
        source: Optional[str] = None,
    ) -> Dict[str, Path]:
        """
        Save a complete report.

        Args:
            records: Mapping of class id to aggregate record
            word_size: Byte width of one machine word
            source: Optional description of the input (usually the dump path)

        Returns:
            Mapping of output kind ('table', 'summary', 'text') to written path

        Raises:
            ValidationError: If word_size is not a positive integer
            Exception: If any storage operation fails
        """
        try:
            word_size = validate_positive_integer(word_size, field_name="word_size")
            logger.info("Saving heap dump report...")
            if not records:
                logger.warning("Heap dump contained no classes; writing an empty report")

            df = records_to_dataframe(records, word_size)
            written = {"table": self._save_class_table(df)}
            written["summary"] = self._save_summary(records, word_size, source)
            if self.write_text_report:
                written["text"] = self._save_text_report(records, word_size)

            logger.info(f"Successfully saved report to: {self.output_dir}")
            return written

        except Exception as e:
            logger.error(f"Error saving report: {e}", exc_info=True)
            raise

    def _save_class_table(self, df: pl.DataFrame) -> Path:
        file_path = self.class_table_path
        self.storage.save_dataframe(df, str(file_path))
        logger.info(f"Saved {len(df)} class rows to: {file_path}")
        return file_path

    def _save_summary(
        self,
        records: Mapping[int, AggregateRecord],
        word_size: int,
        source: Optional[str],
    ) -> Path:
        totals = compute_totals(records.values())
        summary = {
            "source": source,
            "word_size": word_size,
            "classes": totals.classes,
            "named_classes": sum(1 for r in records.values() if r.name is not None),
            "total_instances": totals.count,
            "total_footprint_words": totals.footprint,
            "total_footprint_bytes": totals.footprint * word_size,
        }
        self.storage.save_dict(summary, str(self.summary_path))
        logger.debug(f"Saved report summary to: {self.summary_path}")
        return self.summary_path

    def _save_text_report(
        self, records: Mapping[int, AggregateRecord], word_size: int
    ) -> Path:
        text_path = self.output_dir / TEXT_REPORT_FILENAME
        with open(text_path, "w", encoding="utf-8") as f:
            for line in render_report(records, word_size):
                f.write(line + "\n")
        logger.info(f"Saved text report to: {text_path}")
        return text_path

    def load_class_table(self, columns: Optional[List[str]] = None) -> pl.DataFrame:
        """
        Load the exported per-class table.

        Args:
            columns: Optional list of columns to load

        Raises:
            FileNotFoundError: If no table has been exported to the output directory
        """
        file_path = self.class_table_path
        if not self.storage.file_exists(str(file_path)):
            raise FileNotFoundError(f"No class table found in {self.output_dir}")
        return self.storage.load_dataframe(str(file_path), columns)

    def load_summary(self) -> Dict[str, Any]:
        if not self.storage.file_exists(str(self.summary_path)):
            raise FileNotFoundError(f"No report summary found in {self.output_dir}")
        return self.storage.load_dict(str(self.summary_path))

    def get_storage_info(self) -> Dict[str, Any]:
        """Export settings plus the size in bytes of each report file on disk."""
        paths = [self.class_table_path, self.summary_path, self.output_dir / TEXT_REPORT_FILENAME]
        return {
            "storage_format": self.storage_format,
            "compression": self.compression,
            "output_dir": str(self.output_dir),
            "files": {
                path.name: self.storage.get_file_size(str(path))
                for path in paths
                if self.storage.file_exists(str(path))
            },
        }
