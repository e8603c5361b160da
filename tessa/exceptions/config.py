"""Configuration-related exceptions for Tessa."""

from pathlib import Path

from pydantic import ValidationError

from tessa.exceptions.base import ConfigError


class ConfigFileError(ConfigError):
    """Raised when a config file cannot be read or is not valid JSON5."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for the config document.

    This exception is raised when the ``gateway`` section (or the document
    itself) has the wrong shape, e.g. a list where the gateway section belongs.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors
