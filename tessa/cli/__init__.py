"""Command-line interface for Tessa."""
from tessa.cli.cli_name import (
    DEFAULT_CLI_NAME,
    KNOWN_CLI_NAMES,
    replace_cli_name,
    resolve_cli_name,
    tokenize_cli_command,
)

__all__ = [
    "DEFAULT_CLI_NAME",
    "KNOWN_CLI_NAMES",
    "replace_cli_name",
    "resolve_cli_name",
    "tokenize_cli_command",
]
