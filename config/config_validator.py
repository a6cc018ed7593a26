"""Configuration validation."""

from typing import Any, Dict, List, Tuple


class ConfigValidator:
    """Validates compiler configurations."""

    KNOWN_FIELDS = {"max_query_length"}

    # Largest accepted max_query_length
    MAX_QUERY_LENGTH_LIMIT = 100_000

    def validate_dict(self, data: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate raw configuration data before it becomes a CompilerConfig.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if not isinstance(data, dict):
            return False, ["Configuration must be a JSON object"]

        for key in sorted(set(data) - self.KNOWN_FIELDS):
            errors.append(f"Unknown configuration field: {key}")

        if "max_query_length" in data:
            value = data["max_query_length"]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"Max query length must be an integer: {value!r}")
            elif value <= 0:
                errors.append("Max query length must be positive")
            elif value > self.MAX_QUERY_LENGTH_LIMIT:
                errors.append(
                    f"Max query length too large (max {self.MAX_QUERY_LENGTH_LIMIT} characters)"
                )

        return len(errors) == 0, errors
