"""Schema provider backed by a Databricks session."""

import logging
from typing import Optional, Protocol

from srcsync.exceptions import SchemaProviderError

logger = logging.getLogger(__name__)


class QueryDescriber(Protocol):
    """Protocol for the client used by the provider."""

    def describe_query(self, sql_statement: str) -> list[tuple[str, str]]: ...


class DatabricksSchemaProvider:
    """Describe partition queries through a connected DatabricksClient."""

    def __init__(self, client: QueryDescriber) -> None:
        self._client = client

    def get_schema(self, query: str) -> Optional[list[tuple[str, str]]]:
        """Return the query's columns, or None if it cannot be analysed."""
        if not query or not query.strip():
            return None
        try:
            return self._client.describe_query(query)
        except SchemaProviderError:
            raise
        except Exception as e:
            logger.warning(f"Unable to describe source query: {e}")
            return None
