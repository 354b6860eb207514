"""Tests for DatabricksSchemaProvider."""

from unittest.mock import MagicMock

import pytest

from srcsync.databricks.provider import DatabricksSchemaProvider
from srcsync.exceptions import SchemaProviderError


class TestDatabricksSchemaProvider:
    """Tests for DatabricksSchemaProvider.get_schema()."""

    def test_returns_client_schema(self):
        client = MagicMock()
        client.describe_query.return_value = [("id", "bigint"), ("name", "string")]

        schema = DatabricksSchemaProvider(client).get_schema("SELECT id, name FROM t")

        assert schema == [("id", "bigint"), ("name", "string")]
        client.describe_query.assert_called_once_with("SELECT id, name FROM t")

    def test_query_failure_is_reported_as_absent(self, caplog):
        """Analysis errors never escape the provider."""
        client = MagicMock()
        client.describe_query.side_effect = Exception("TABLE_OR_VIEW_NOT_FOUND")

        with caplog.at_level("WARNING"):
            schema = DatabricksSchemaProvider(client).get_schema("SELECT * FROM nope")

        assert schema is None
        assert "TABLE_OR_VIEW_NOT_FOUND" in caplog.text

    def test_blank_query_is_absent(self):
        client = MagicMock()

        assert DatabricksSchemaProvider(client).get_schema("  ") is None
        client.describe_query.assert_not_called()

    def test_unusable_client_raises(self):
        """An unconnected client is a programming error, not a bad query."""
        client = MagicMock()
        client.describe_query.side_effect = SchemaProviderError("Not connected")

        with pytest.raises(SchemaProviderError):
            DatabricksSchemaProvider(client).get_schema("SELECT 1")
