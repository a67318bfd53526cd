"""
Configuration for the dumpstats export layer.

The command-line tool itself takes no configuration; these settings only
apply when a report is exported through the storage layer.
"""

from .storage_config import SUPPORTED_COMPRESSIONS, SUPPORTED_FORMATS, StorageConfig

__all__ = [
    "StorageConfig",
    "SUPPORTED_FORMATS",
    "SUPPORTED_COMPRESSIONS",
]
