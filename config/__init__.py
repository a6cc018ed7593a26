"""Configuration management module for the query compiler."""

from .compiler_config import CompilerConfig, DEFAULT_MAX_QUERY_LENGTH
from .config_storage import ConfigStorage
from .config_validator import ConfigValidator
from .config_service import ConfigurationService

__all__ = [
    'CompilerConfig',
    'DEFAULT_MAX_QUERY_LENGTH',
    'ConfigurationService',
    'ConfigStorage',
    'ConfigValidator'
]
