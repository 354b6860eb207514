"""Tests for srcsync.types module."""

import pytest

from srcsync.types import CanonicalType, Suppression


class TestCanonicalType:
    """Tests for CanonicalType."""

    def test_closed_set(self):
        assert [t.value for t in CanonicalType] == [
            "Binary",
            "String",
            "Double",
            "Decimal",
            "Int64",
            "DateTime",
            "Boolean",
        ]

    @pytest.mark.parametrize("name", ["Int64", "int64", " INT64 "])
    def test_from_name_ignores_case(self, name):
        assert CanonicalType.from_name(name) is CanonicalType.INT64

    def test_from_name_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown data type"):
            CanonicalType.from_name("Int32")


class TestSuppression:
    """Tests for Suppression."""

    def test_three_kinds(self):
        assert {s.value for s in Suppression} == {
            "ignore_source_column_added",
            "ignore_data_type_change",
            "ignore_missing_source_column",
        }
