"""
Abstract base class for data storage implementations.

This module defines the DataStorage interface used to persist exported heap
dump reports. The interface covers saving and loading DataFrames (the per-class
table), saving and loading dictionaries (the report summary), and basic file
inspection.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import polars as pl


class DataStorage(ABC):
    """Abstract base class for data storage implementations."""

    @abstractmethod
    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        """
        Save a Polars DataFrame to the specified path.

        Args:
            df: Polars DataFrame to save
            path: File path to save to
        """
        pass

    @abstractmethod
    def load_dataframe(
        self, path: str, columns: Optional[List[str]] = None
    ) -> pl.DataFrame:
        """
        Load a Polars DataFrame from the specified path.

        Args:
            path: File path to load from
            columns: Optional list of columns to load (for column pruning)

        Returns:
            Loaded Polars DataFrame
        """
        pass

    @abstractmethod
    def save_dict(self, data: Dict[str, Any], path: str) -> None:
        """Save dictionary data to the specified path."""
        pass

    @abstractmethod
    def load_dict(self, path: str) -> Dict[str, Any]:
        """Load dictionary data from the specified path."""
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def get_file_size(self, path: str) -> int:
        """Size of the file in bytes, or 0 when it does not exist."""
        pass
