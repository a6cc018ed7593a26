"""Configuration model for the query compiler."""

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_MAX_QUERY_LENGTH = 1000


@dataclass(frozen=True)
class CompilerConfig:
    """Immutable compiler configuration, built once and shared."""
    max_query_length: int = DEFAULT_MAX_QUERY_LENGTH

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "max_query_length": self.max_query_length
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompilerConfig':
        """
        Create from dictionary.

        Raises:
            ValueError: If the data does not describe a valid configuration
        """
        from .config_validator import ConfigValidator

        is_valid, errors = ConfigValidator().validate_dict(data)
        if not is_valid:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")

        return cls(
            max_query_length=data.get("max_query_length", DEFAULT_MAX_QUERY_LENGTH)
        )

    def with_overrides(self, overrides: Dict[str, Any]) -> 'CompilerConfig':
        """Return a copy with the given fields replaced."""
        return CompilerConfig.from_dict({**self.to_dict(), **overrides})
