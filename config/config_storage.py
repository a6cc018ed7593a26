"""Configuration persistence and storage."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .compiler_config import CompilerConfig

logger = logging.getLogger(__name__)


class ConfigStorage:
    """Handles configuration file persistence."""

    CONFIG_FILENAME = "compiler_config.json"
    CONFIG_DIR = ".tsquery_compiler"

    def __init__(self, base_path: Optional[str] = None):
        """Initialize configuration storage."""
        self.base_path = Path(base_path) if base_path else Path.cwd()
        self.config_dir = self.base_path / self.CONFIG_DIR
        self.config_file = self.config_dir / self.CONFIG_FILENAME

    def _ensure_config_dir(self) -> None:
        """Ensure configuration directory exists."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load_raw_config(self) -> Optional[Any]:
        """
        Read the configuration file without validating it.

        Returns:
            Decoded JSON content, or None if the file does not exist

        Raises:
            ValueError: If the file is not valid JSON
        """
        if not self.config_file.exists():
            return None

        with open(self.config_file, 'r') as f:
            return json.load(f)

    def load_config(self) -> Optional[CompilerConfig]:
        """
        Load configuration from file.

        Returns:
            CompilerConfig if exists and valid, None otherwise
        """
        if not self.config_file.exists():
            return None

        try:
            return CompilerConfig.from_dict(self.load_raw_config())
        except ValueError as e:
            # Log error but don't crash
            logger.warning(f"Failed to load config from {self.config_file}: {e}")
            return None

    def save_config(self, config: CompilerConfig) -> None:
        """
        Save configuration to file with atomic write.

        Args:
            config: Configuration to save
        """
        self._ensure_config_dir()

        json_content = json.dumps(config.to_dict(), indent=2)

        temp_file = self.config_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w') as f:
                f.write(json_content)
            temp_file.replace(self.config_file)
        except OSError:
            # Clean up temp file on error
            if temp_file.exists():
                temp_file.unlink()
            raise

    def get_config_path(self) -> Path:
        """Get path to configuration file."""
        return self.config_file

    def remove_config(self) -> None:
        """Remove configuration file."""
        if self.config_file.exists():
            self.config_file.unlink()
