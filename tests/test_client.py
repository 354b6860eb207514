from unittest.mock import MagicMock, patch

import pytest

from srcsync.databricks.client import DatabricksClient, spark_type_name
from srcsync.exceptions import SchemaProviderError


@pytest.fixture
def mock_session():
    with patch("srcsync.databricks.client.DatabricksSession") as mock_db_session:
        mock_spark = MagicMock()
        mock_builder = MagicMock()
        mock_builder.host.return_value = mock_builder
        mock_builder.token.return_value = mock_builder
        mock_builder.profile.return_value = mock_builder
        mock_builder.getOrCreate.return_value = mock_spark
        mock_db_session.builder = mock_builder
        yield mock_db_session, mock_builder, mock_spark


def make_field(name: str, type_string: str) -> MagicMock:
    field = MagicMock()
    field.name = name
    field.dataType.simpleString.return_value = type_string
    return field


def test_client_uses_host_and_token_when_provided(mock_session):
    _, mock_builder, _ = mock_session

    client = DatabricksClient(
        host="test.databricks.com",
        token="dapi123",
    )
    client.connect()

    mock_builder.host.assert_called_once_with("test.databricks.com")
    mock_builder.token.assert_called_once_with("dapi123")
    mock_builder.profile.assert_not_called()
    mock_builder.getOrCreate.assert_called_once()


def test_client_uses_env_config_when_no_host_token(mock_session):
    _, mock_builder, _ = mock_session

    client = DatabricksClient()
    client.connect()

    mock_builder.host.assert_not_called()
    mock_builder.token.assert_not_called()
    mock_builder.getOrCreate.assert_called_once()


def test_client_uses_profile(mock_session):
    _, mock_builder, _ = mock_session

    DatabricksClient(profile="dev").connect()

    mock_builder.profile.assert_called_once_with("dev")


def test_client_describe_query_returns_fields(mock_session):
    _, _, mock_spark = mock_session
    mock_df = MagicMock()
    mock_df.schema.fields = [
        make_field("id", "bigint"),
        make_field("amount", "decimal(18,2)"),
        make_field("name", "string"),
        make_field("sold_at", "timestamp"),
        make_field("address", "struct<city:string,zip:int>"),
    ]
    mock_spark.sql.return_value = mock_df

    client = DatabricksClient(host="test.databricks.com", token="dapi123")
    client.connect()
    schema = client.describe_query("SELECT * FROM sales")

    mock_spark.sql.assert_called_once_with("SELECT * FROM sales")
    mock_df.collect.assert_not_called()
    assert schema == [
        ("id", "bigint"),
        ("amount", "decimal"),
        ("name", "string"),
        ("sold_at", "datetime"),
        ("address", "struct"),
    ]


def test_client_raises_on_sql_error(mock_session):
    _, _, mock_spark = mock_session
    mock_spark.sql.side_effect = Exception("Table not found")

    client = DatabricksClient(host="test.databricks.com", token="dapi123")
    client.connect()

    with pytest.raises(Exception, match="Table not found"):
        client.describe_query("SELECT * FROM nonexistent")


def test_client_describe_before_connect_raises():
    client = DatabricksClient(host="test.databricks.com", token="dapi123")

    with pytest.raises(SchemaProviderError, match="Not connected"):
        client.describe_query("SELECT 1")


def test_client_connect_twice_raises(mock_session):
    client = DatabricksClient(host="test.databricks.com", token="dapi123")
    client.connect()

    with pytest.raises(RuntimeError, match="Already connected"):
        client.connect()


def test_client_close_is_idempotent(mock_session):
    _, _, mock_spark = mock_session

    client = DatabricksClient(host="test.databricks.com", token="dapi123")
    client.connect()
    client.close()
    client.close()

    mock_spark.stop.assert_called_once()


def test_client_context_manager(mock_session):
    _, _, mock_spark = mock_session
    mock_spark.sql.return_value.schema.fields = []

    with DatabricksClient(host="test.databricks.com", token="dapi123") as client:
        assert client.describe_query("SELECT 1") == []

    mock_spark.sql.assert_called_once_with("SELECT 1")
    mock_spark.stop.assert_called_once()


@pytest.mark.parametrize(
    "type_string,expected",
    [
        ("timestamp", "datetime"),
        ("timestamp_ntz", "datetime"),
        ("TIMESTAMP_LTZ", "datetime"),
        ("interval day to second", "duration.type"),
        ("decimal(18,2)", "decimal"),
        ("bigint", "bigint"),
    ],
)
def test_spark_type_name_scalar_types(type_string, expected):
    assert spark_type_name(type_string) == expected


@pytest.mark.parametrize(
    "type_string,expected",
    [
        ("struct<a:int>", "struct"),
        ("array<date>", "array"),
        ("map<string,int>", "map"),
    ],
)
def test_spark_type_name_complex_types_report_base_name(type_string, expected):
    """Element types of complex types are not part of the name."""
    assert spark_type_name(type_string) == expected
