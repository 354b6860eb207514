import re
from typing import Any, Optional

from databricks.connect import DatabricksSession
from pyspark.sql import SparkSession

from srcsync.exceptions import SchemaProviderError

# Spark names with no entry in the type mapping table.
SPARK_TYPE_ALIASES: dict[str, str] = {
    "timestamp": "datetime",
    "timestamp_ntz": "datetime",
    "timestamp_ltz": "datetime",
    "interval": "duration.type",
}


def spark_type_name(type_string: str) -> str:
    """Reduce a Spark simpleString() to a provider type name.

    Parameters and element types are dropped, so decimal(18,2) becomes decimal
    and array<date> becomes array. Timestamp and interval types are renamed to
    their datetime and duration equivalents.
    """
    base = re.split(r"[<(\s]", type_string.strip(), maxsplit=1)[0].lower()
    return SPARK_TYPE_ALIASES.get(base, base)


class DatabricksClient:
    """Thin wrapper around databricks-connect for describing source queries.

    Relies on Databricks SDK configuration (env vars, ~/.databrickscfg profiles)
    to determine compute target. If host/token are provided, they override
    env/profile settings.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        token: Optional[str] = None,
        profile: Optional[str] = None,
    ) -> None:
        self._host = host
        self._token = token
        self._profile = profile
        self._session: SparkSession | None = None

    def connect(self) -> None:
        """Establish a DatabricksSession. Must be called before describe_query."""
        if self._session is not None:
            raise RuntimeError("Already connected. Call close() before reconnecting.")

        builder = DatabricksSession.builder

        if self._profile:
            builder = builder.profile(self._profile)
        if self._host:
            builder = builder.host(self._host)
        if self._token:
            builder = builder.token(self._token)

        self._session = builder.getOrCreate()

    def describe_query(self, sql_statement: str) -> list[tuple[str, str]]:
        """Return (column name, type name) pairs of the query's result schema.

        The query is analysed, not executed. Type names go through
        spark_type_name().
        """
        if self._session is None:
            raise SchemaProviderError("Not connected. Call connect() first.")
        schema = self._session.sql(sql_statement).schema
        return [
            (f.name, spark_type_name(f.dataType.simpleString())) for f in schema.fields
        ]

    def close(self) -> None:
        if self._session is not None:
            try:
                self._session.stop()
            finally:
                self._session = None

    def __enter__(self) -> "DatabricksClient":
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
