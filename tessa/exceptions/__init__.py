"""Exception hierarchy for Tessa."""
from tessa.exceptions.base import ConfigError
from tessa.exceptions.config import ConfigFileError, ConfigValidationError

__all__ = [
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
]
