"""
Unit tests for report ranking and rendering.
"""

import io

import polars as pl
import pytest

from dumpstats.models import AggregateRecord, ReportTotals
from dumpstats.reporting import (
    compute_totals,
    display_name,
    records_to_dataframe,
    render_report,
    sort_by_footprint,
    write_report,
)
from dumpstats.validation import ValidationError


def _records(*records: AggregateRecord):
    return {r.key: r for r in records}


@pytest.fixture
def three_classes():
    return _records(
        AggregateRecord(key=1, name="A", footprint=30, count=3),
        AggregateRecord(key=2, name="B", footprint=10, count=1),
        AggregateRecord(key=3, name="C", footprint=20, count=4),
    )


@pytest.mark.unit
class TestSortByFootprint:
    """Test cases for footprint ordering."""

    def test_descending_order(self, three_classes):
        ranked = sort_by_footprint(three_classes)
        assert [r.footprint for r in ranked] == [30, 20, 10]

    def test_empty(self):
        assert sort_by_footprint({}) == []


@pytest.mark.unit
class TestDisplayName:
    """Test cases for display name resolution."""

    def test_named(self):
        assert display_name(AggregateRecord(key=4, name="Foo")) == "Foo"

    def test_unnamed_uses_decimal_id(self):
        assert display_name(AggregateRecord(key=42)) == "42"
        assert display_name(AggregateRecord(key=-3)) == "-3"

    def test_empty_name_is_kept(self):
        assert display_name(AggregateRecord(key=4, name="")) == ""

    def test_does_not_mutate_record(self):
        record = AggregateRecord(key=42)
        display_name(record)
        assert record.name is None


@pytest.mark.unit
class TestComputeTotals:
    """Test cases for report totals."""

    def test_totals(self, three_classes):
        totals = compute_totals(three_classes.values())
        assert totals == ReportTotals(footprint=60, count=8, classes=3)

    def test_empty_totals(self):
        assert compute_totals([]) == ReportTotals(footprint=0, count=0, classes=0)


@pytest.mark.unit
class TestRenderReport:
    """Test cases for text rendering."""

    def test_render_order_and_totals(self, three_classes):
        lines = render_report(three_classes, word_size=1)
        assert lines == [
            "A: 30 3",
            "C: 20 4",
            "B: 10 1",
            "",
            "total: 60 8",
        ]

    def test_word_size_scaling(self):
        records = _records(AggregateRecord(key=1, name="X", footprint=5, count=2))
        lines = render_report(records, word_size=4)
        assert lines[0] == "X: 20 2"
        assert lines[-1] == "total: 20 2"

    def test_unnamed_class_line(self):
        records = _records(AggregateRecord(key=5, footprint=2, count=1))
        assert render_report(records, word_size=1) == ["5: 2 1", "", "total: 2 1"]

    def test_empty_report(self):
        assert render_report({}, word_size=8) == ["", "total: 0 0"]

    def test_large_values_do_not_overflow(self):
        records = _records(
            AggregateRecord(key=1, name="Big", footprint=2**31 - 1, count=1)
        )
        lines = render_report(records, word_size=8)
        assert lines[0] == f"Big: {(2**31 - 1) * 8} 1"

    @pytest.mark.parametrize("word_size", [0, -4, "eight", None, 2.5, 8.0])
    def test_invalid_word_size(self, three_classes, word_size):
        with pytest.raises(ValidationError):
            render_report(three_classes, word_size=word_size)

    def test_accepts_decimal_text_word_size(self, three_classes):
        assert render_report(three_classes, word_size="2")[0] == "A: 60 3"


@pytest.mark.unit
class TestWriteReport:
    """Test cases for writing the report to a stream."""

    def test_write_to_stream(self, three_classes):
        out = io.StringIO()
        write_report(three_classes, 2, stream=out)
        assert out.getvalue() == "A: 60 3\nC: 40 4\nB: 20 1\n\ntotal: 120 8\n"

    def test_write_defaults_to_stdout(self, capsys, three_classes):
        write_report(three_classes, 1)
        assert capsys.readouterr().out.splitlines()[0] == "A: 30 3"


@pytest.mark.unit
class TestRecordsToDataFrame:
    """Test cases for DataFrame conversion."""

    def test_columns_and_order(self, three_classes):
        df = records_to_dataframe(three_classes, word_size=4)

        assert df.columns == [
            "class_id",
            "name",
            "footprint_words",
            "footprint_bytes",
            "instances",
        ]
        assert df["class_id"].to_list() == [1, 3, 2]
        assert df["footprint_bytes"].to_list() == [120, 80, 40]
        assert df["instances"].to_list() == [3, 4, 1]

    def test_unnamed_classes_use_id(self):
        records = _records(AggregateRecord(key=9, footprint=1, count=1))
        df = records_to_dataframe(records, word_size=1)
        assert df["name"].to_list() == ["9"]

    def test_empty_records(self):
        df = records_to_dataframe({}, word_size=8)
        assert df.is_empty()
        assert df.schema["footprint_bytes"] == pl.Int64

    def test_fractional_word_size_rejected(self, three_classes):
        with pytest.raises(ValidationError):
            records_to_dataframe(three_classes, word_size=2.5)
