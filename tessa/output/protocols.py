"""Output handler protocols for Tessa."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol for output handling (console, logging, etc.)."""

    def print(self, message: object, **kwargs) -> None:
        """Print a message or a rich renderable."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message (alias for print)."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...
