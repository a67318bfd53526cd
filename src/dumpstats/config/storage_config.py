"""
Storage configuration model and validation.

This module defines the StorageConfig dataclass which encapsulates the options
used when exporting a decoded heap dump report: table format, compression, and
whether a plain-text copy of the report is written next to the table.
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal

SUPPORTED_FORMATS = ("parquet", "json")
SUPPORTED_COMPRESSIONS = ("snappy", "gzip", "brotli", "lz4", "zstd")


@dataclass
class StorageConfig:
    """
    Configuration model for report export settings.

    Attributes:
        format: Table storage format
            - 'parquet': Columnar format with compression
            - 'json': Human-readable list of class rows
        compression: Compression algorithm for Parquet format
            - 'snappy': Fast compression/decompression (default)
            - 'gzip': Higher compression ratio, slower
            - 'brotli': Very high compression ratio
            - 'lz4': Very fast compression
            - 'zstd': Modern balanced compression
        write_text_report: Whether to also write the plain-text report
            (`report.txt`) exactly as the command-line tool prints it

    Note:
        Compression only applies to Parquet. JSON output is uncompressed.
    """

    format: Literal["parquet", "json"] = "parquet"
    compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"
    write_text_report: bool = False

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "StorageConfig":
        """
        Create a StorageConfig instance from a dictionary.

        Args:
            config_dict: Dictionary containing storage configuration

        Returns:
            StorageConfig instance

        Raises:
            ValueError: If invalid configuration values are provided
        """
        format_type = config_dict.get("format", "parquet")
        compression = config_dict.get("compression", "snappy")
        write_text_report = config_dict.get("write_text_report", False)

        if format_type not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported storage format: {format_type}")

        if format_type == "parquet" and compression not in SUPPORTED_COMPRESSIONS:
            raise ValueError(f"Unsupported compression algorithm: {compression}")

        return cls(
            format=format_type,
            compression=compression,
            write_text_report=bool(write_text_report),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the StorageConfig to a dictionary."""
        return {
            "format": self.format,
            "compression": self.compression,
            "write_text_report": self.write_text_report,
        }
