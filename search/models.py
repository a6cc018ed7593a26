"""Models for the query compiler."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet


class SearchError(Exception):
    """Base class for errors raised by the search layer."""
    code = "SEARCH_ERROR"


@dataclass
class QueryValidationError(SearchError):
    """Validation error with details."""
    field: str
    value: Any
    message: str
    code = "VALIDATION_ERROR"

    def __str__(self):
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        value = self.value if isinstance(self.value, (str, int, float, bool)) or self.value is None else repr(self.value)
        return {
            'code': self.code,
            'field': self.field,
            'value': value,
            'message': self.message
        }


@dataclass(frozen=True)
class TermSets:
    """Positive and negated vocabulary of a query."""
    include_terms: FrozenSet[str] = field(default_factory=frozenset)
    exclude_terms: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class CompiledQuery:
    """Result of compiling a user query."""
    compiled_text: str
    include_terms: FrozenSet[str] = field(default_factory=frozenset)
    exclude_terms: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def all_terms(self) -> FrozenSet[str]:
        return self.include_terms | self.exclude_terms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'compiled_text': self.compiled_text,
            'include_terms': sorted(self.include_terms),
            'exclude_terms': sorted(self.exclude_terms)
        }
