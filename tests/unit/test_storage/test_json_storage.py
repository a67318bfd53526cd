"""
Unit tests for JSON storage implementation.
"""

import json

import polars as pl
import pytest

from dumpstats.storage.json_storage import JsonStorage


@pytest.fixture
def class_table():
    return pl.DataFrame(
        {
            "class_id": [10, 30],
            "name": ["java/lang/String", "Größe"],
            "footprint_bytes": [96, 80],
        }
    )


@pytest.mark.unit
class TestJsonStorage:
    """Test cases for JsonStorage class."""

    def test_table_document_layout(self, tmp_path, class_table):
        storage = JsonStorage()
        file_path = tmp_path / "nested" / "table.json"

        storage.save_dataframe(class_table, str(file_path))

        document = json.loads(file_path.read_text(encoding="utf-8"))
        assert document["columns"] == ["class_id", "name", "footprint_bytes"]
        assert document["rows"][1] == {
            "class_id": 30,
            "name": "Größe",
            "footprint_bytes": 80,
        }

    def test_load_dataframe(self, tmp_path, class_table):
        storage = JsonStorage()
        file_path = tmp_path / "table.json"
        storage.save_dataframe(class_table, str(file_path))

        loaded = storage.load_dataframe(str(file_path))
        assert loaded.columns == class_table.columns
        assert loaded["name"].to_list() == ["java/lang/String", "Größe"]

        pruned = storage.load_dataframe(str(file_path), columns=["footprint_bytes"])
        assert pruned.columns == ["footprint_bytes"]
        assert pruned["footprint_bytes"].to_list() == [96, 80]

    def test_empty_table_keeps_columns(self, tmp_path):
        storage = JsonStorage()
        file_path = tmp_path / "empty.json"
        storage.save_dataframe(pl.DataFrame({"class_id": [], "name": []}), str(file_path))

        loaded = storage.load_dataframe(str(file_path))
        assert loaded.is_empty()
        assert loaded.columns == ["class_id", "name"]

    def test_save_load_dict(self, tmp_path):
        storage = JsonStorage()
        file_path = tmp_path / "summary.json"
        data = {"source": "heap.dump", "classes": 2}

        storage.save_dict(data, str(file_path))
        assert storage.load_dict(str(file_path)) == data

    def test_file_checks(self, tmp_path):
        storage = JsonStorage()
        file_path = tmp_path / "summary.json"

        assert storage.file_exists(str(file_path)) is False
        assert storage.file_exists(str(tmp_path)) is False
        assert storage.get_file_size(str(file_path)) == 0

        file_path.write_text("{}")
        assert storage.file_exists(str(file_path)) is True
        assert storage.get_file_size(str(file_path)) == 2
