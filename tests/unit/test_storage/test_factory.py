"""
Unit tests for storage factory.
"""

import pytest

from dumpstats.storage.factory import create_storage, storage_for_path
from dumpstats.storage.json_storage import JsonStorage
from dumpstats.storage.parquet_storage import ParquetStorage


class TestStorageFactory:
    """Test cases for storage factory."""

    def test_create_parquet_storage(self):
        storage = create_storage("parquet")
        assert isinstance(storage, ParquetStorage)
        assert storage.compression == "snappy"

        storage = create_storage("parquet", "gzip")
        assert storage.compression == "gzip"

    def test_create_json_storage(self):
        storage = create_storage("json", "zstd")
        assert type(storage) is JsonStorage
        assert storage.extension == "json"

    def test_create_storage_unsupported_format(self):
        with pytest.raises(ValueError) as excinfo:
            create_storage("unsupported")

        assert "Unsupported storage format" in str(excinfo.value)

    def test_create_storage_unsupported_compression(self):
        with pytest.raises(ValueError) as excinfo:
            create_storage("parquet", "rar")

        assert "Unsupported compression algorithm" in str(excinfo.value)

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("out/class_footprint.json", JsonStorage),
            ("out/CLASS_FOOTPRINT.JSON", JsonStorage),
            ("out/class_footprint.parquet", ParquetStorage),
        ],
    )
    def test_storage_for_path(self, path, expected):
        assert type(storage_for_path(path)) is expected
