"""Resolve the CLI name users invoke, and rewrite commands to use it.

Users may still run the tool as ``moltbot`` or ``clawdbot``, and hints the
CLI prints (e.g. "run tessa login first") should use the name they typed.
"""

import sys
from collections.abc import Sequence
from pathlib import PurePath
from typing import NamedTuple

from tessa.compat.legacy_names import CURRENT, LEGACY_1, LEGACY_2, NAMESPACES
from tessa.config import env as overrides
from tessa.config.env import Env

DEFAULT_CLI_NAME = CURRENT.name
LEGACY_CLI_NAME_1 = LEGACY_1.name
LEGACY_CLI_NAME_2 = LEGACY_2.name

KNOWN_CLI_NAMES = tuple(namespace.name for namespace in NAMESPACES)

# Package runners that may precede the CLI name, e.g. ``npx tessa``
RUNNERS = ("pnpm", "npm", "bunx", "npx")


class CliCommandTokens(NamedTuple):
    """A command split around its leading CLI name.

    Attributes:
        runner: Runner token plus the whitespace after it, or ``""``
        name: The CLI name as written in the command
        rest: Everything after the name, untouched
    """

    runner: str
    name: str
    rest: str


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _split_runner(command: str) -> tuple[str, str]:
    """Split a leading ``<runner><whitespace>`` off ``command``."""
    for runner in RUNNERS:
        if not command.startswith(runner):
            continue
        after = command[len(runner):]
        remainder = after.lstrip()
        if remainder != after:
            cut = len(command) - len(remainder)
            return command[:cut], remainder
    return "", command


def _match_name(text: str) -> str | None:
    """Return the known CLI name ``text`` starts with, as a whole word."""
    for name in KNOWN_CLI_NAMES:
        if not text.startswith(name):
            continue
        following = text[len(name):len(name) + 1]
        if not following or not _is_word_char(following):
            return name
    return None


def tokenize_cli_command(command: str) -> CliCommandTokens | None:
    """Split ``command`` into runner, CLI name and remainder.

    Only a name at the very start of the command (optionally after one
    runner token) is recognized.

    Returns:
        The tokens, or None if the command does not start with a CLI name
    """
    runner, remainder = _split_runner(command)
    name = _match_name(remainder)
    if name is None:
        return None
    return CliCommandTokens(runner=runner, name=name, rest=remainder[len(name):])


def resolve_cli_name(argv: Sequence[str] | None = None, env: Env | None = None) -> str:
    """Return the name the CLI was invoked as.

    Resolution order (first match wins):
    1. ``TESSA_CLI_NAME``, ``MOLTBOT_CLI_NAME``, ``CLAWDBOT_CLI_NAME``
    2. Basename of ``argv[1]`` (the launched script) if it is a known name
    3. ``tessa``

    Args:
        argv: Launcher-style argv, ``[interpreter, script, ...]``. Defaults
            to the running interpreter followed by ``sys.argv``.
        env: Environment mapping
    """
    override = overrides.CLI_NAME.lookup(env)
    if override:
        return override

    if argv is None:
        argv = [sys.executable, *sys.argv]
    if len(argv) < 2 or not argv[1]:
        return DEFAULT_CLI_NAME

    base = PurePath(argv[1]).name.strip()
    if base in KNOWN_CLI_NAMES:
        return base
    return DEFAULT_CLI_NAME


def replace_cli_name(command: str, cli_name: str | None = None) -> str:
    """Rewrite the leading CLI name in ``command`` to ``cli_name``.

    >>> replace_cli_name("npx clawdbot start", "tessa")
    'npx tessa start'
    """
    if not command.strip():
        return command
    tokens = tokenize_cli_command(command)
    if tokens is None:
        return command
    if cli_name is None:
        cli_name = resolve_cli_name()
    return f"{tokens.runner}{cli_name}{tokens.rest}"
