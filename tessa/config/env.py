"""Environment variable override families."""

import os
from collections.abc import Iterator, Mapping
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

from tessa.compat.legacy_names import CURRENT, LEGACY_2, NAMESPACES, Namespace

Env: TypeAlias = Mapping[str, str]


def current_env(env: Env | None) -> Env:
    """Return ``env`` or the live process environment."""
    return os.environ if env is None else env


class EnvOverride(BaseModel):
    """An ordered family of environment variables sharing a suffix.

    ``EnvOverride(suffix="STATE_DIR", namespaces=(CURRENT, LEGACY_1))``
    covers ``TESSA_STATE_DIR`` then ``MOLTBOT_STATE_DIR``. The first variable
    whose value is non-empty after stripping wins.
    """

    model_config = ConfigDict(frozen=True)

    suffix: str
    namespaces: tuple[Namespace, ...] = NAMESPACES

    @property
    def names(self) -> list[str]:
        """Variable names in precedence order."""
        return [namespace.env_var(self.suffix) for namespace in self.namespaces]

    def lookup_each(self, env: Env | None = None) -> Iterator[tuple[str, str]]:
        """Yield ``(variable name, trimmed value)`` for every set variable, in order."""
        env = current_env(env)
        for name in self.names:
            value = (env.get(name) or "").strip()
            if value:
                yield name, value

    def lookup(self, env: Env | None = None) -> str | None:
        """Return the trimmed value of the highest-precedence set variable."""
        found = self.lookup_source(env)
        return found[1] if found else None

    def lookup_source(self, env: Env | None = None) -> tuple[str, str] | None:
        """Like ``lookup`` but also return which variable supplied the value."""
        return next(self.lookup_each(env), None)


NIX_MODE = EnvOverride(suffix="NIX_MODE", namespaces=(CURRENT, LEGACY_2))
CLI_NAME = EnvOverride(suffix="CLI_NAME")
STATE_DIR = EnvOverride(suffix="STATE_DIR")
CONFIG_PATH = EnvOverride(suffix="CONFIG_PATH")
# No MOLTBOT_* variant for these two
OAUTH_DIR = EnvOverride(suffix="OAUTH_DIR", namespaces=(CURRENT, LEGACY_2))
GATEWAY_PORT = EnvOverride(suffix="GATEWAY_PORT", namespaces=(CURRENT, LEGACY_2))
