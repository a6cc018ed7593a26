"""Validates raw search queries."""

from typing import Any

from .models import QueryValidationError


class QueryValidator:
    """Validates search queries before compilation."""

    DEFAULT_MAX_QUERY_LENGTH = 1000

    def __init__(self, max_query_length: int = DEFAULT_MAX_QUERY_LENGTH):
        self.max_query_length = max_query_length

    def validate(self, query: Any) -> None:
        """
        Validate query type and length.

        Args:
            query: Raw query to validate

        Raises:
            QueryValidationError: If validation fails
        """
        if not query or not isinstance(query, str):
            raise QueryValidationError(
                "query", query,
                "Query must be a non-empty string"
            )

        if not query.strip():
            raise QueryValidationError("query", query, "Query cannot be empty")

        if len(query) > self.max_query_length:
            raise QueryValidationError(
                "query", query,
                f"Query exceeds maximum length of {self.max_query_length} characters"
            )
