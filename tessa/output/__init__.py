"""Output handling package for Tessa."""
from tessa.output.protocols import OutputHandler
from tessa.output.console import ConsoleOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
]
