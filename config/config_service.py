"""Main configuration management service."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .compiler_config import CompilerConfig
from .config_storage import ConfigStorage
from .config_validator import ConfigValidator

logger = logging.getLogger(__name__)


class ConfigurationService:
    """
    Resolves the compiler configuration.

    Precedence, lowest to highest: built-in defaults, the JSON file under
    the base path, environment variables.
    """

    ENV_VARS = {
        "TSQUERY_MAX_QUERY_LENGTH": "max_query_length"
    }

    def __init__(self, base_path: Optional[str] = None):
        """
        Initialize configuration service.

        Args:
            base_path: Base directory for configuration (defaults to cwd)
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()
        self.storage = ConfigStorage(self.base_path)
        self.validator = ConfigValidator()

        self._stored_config: Optional[CompilerConfig] = self.storage.load_config()

    def get_config(self) -> CompilerConfig:
        """Get the effective configuration with environment overrides applied."""
        config = self._stored_config or CompilerConfig()

        env_config = self.get_environment_config()
        if env_config:
            try:
                config = config.with_overrides(env_config)
            except ValueError as e:
                logger.warning(f"Ignoring environment overrides: {e}")

        return config

    def get_environment_config(self) -> Dict[str, Any]:
        """Get configuration from environment variables."""
        env_config = {}

        for env_var, config_key in self.ENV_VARS.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            try:
                env_config[config_key] = int(value)
            except ValueError:
                logger.warning(f"Ignoring non-integer {env_var}={value!r}")

        return env_config

    def update_config(self, updates: Dict[str, Any]) -> CompilerConfig:
        """
        Update and persist the stored configuration.

        Raises:
            ValueError: If the updated configuration is invalid
        """
        current = self._stored_config or CompilerConfig()
        config = current.with_overrides(updates)
        self.storage.save_config(config)
        self._stored_config = config
        return config

    def validate_configuration(self) -> Tuple[bool, List[str]]:
        """
        Validate the stored file and the environment overrides.

        get_config() skips invalid sources with a warning; this reports them.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        config_path = self.storage.get_config_path()
        if config_path.exists():
            try:
                data = self.storage.load_raw_config()
            except ValueError as e:
                errors.append(f"{config_path}: not valid JSON ({e})")
            else:
                _, file_errors = self.validator.validate_dict(data)
                errors.extend(f"{config_path}: {error}" for error in file_errors)

        for env_var, config_key in self.ENV_VARS.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            try:
                parsed = int(value)
            except ValueError:
                errors.append(f"{env_var}: not an integer: {value!r}")
                continue
            _, env_errors = self.validator.validate_dict({config_key: parsed})
            errors.extend(f"{env_var}: {error}" for error in env_errors)

        return len(errors) == 0, errors

    def reset_configuration(self) -> None:
        """Reset configuration to defaults."""
        self.storage.remove_config()
        self._stored_config = None
