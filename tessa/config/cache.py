"""Memoized snapshots of the default locations.

Each accessor resolves against the live process the first time it is called
and returns the same value afterwards. Call ``invalidate()`` after changing
the environment, or call the resolvers in ``tessa.config.paths`` directly
when a live value is needed.
"""

from functools import lru_cache
from pathlib import Path

from tessa.config.paths import resolve_config_path_candidate, resolve_is_nix_mode, resolve_state_dir


@lru_cache(maxsize=1)
def state_dir() -> Path:
    return resolve_state_dir()


@lru_cache(maxsize=1)
def config_path() -> Path:
    return resolve_config_path_candidate()


@lru_cache(maxsize=1)
def is_nix_mode() -> bool:
    return resolve_is_nix_mode()


def invalidate() -> None:
    """Drop every cached snapshot."""
    state_dir.cache_clear()
    config_path.cache_clear()
    is_nix_mode.cache_clear()
