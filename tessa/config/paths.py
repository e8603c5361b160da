"""Filesystem locations for Tessa state, config, credentials and the gateway.

Every resolver is a pure function of the environment mapping, a home
directory provider and the filesystem at call time. Arguments left as
``None`` fall back to the live process (``os.environ``, ``Path.home``).

Resolution always prefers, in order:
1. An explicit environment override (``TESSA_*`` before legacy prefixes)
2. An existing file or directory (current name before legacy names)
3. The current-name default, even if it does not exist yet
"""

import logging
import math
import os
import re
import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

from tessa.compat.legacy_names import (
    CONFIG_FILENAME_NAMESPACES,
    CURRENT,
    HISTORICAL,
    LEGACY_1,
    LEGACY_2,
    NAMESPACES,
)
from tessa.config import env as overrides
from tessa.config.env import Env, EnvOverride, current_env
from tessa.config.models import TessaConfig

logger = logging.getLogger(__name__)

HomeProvider: TypeAlias = Callable[[], Path | str]
TmpProvider: TypeAlias = Callable[[], Path | str]
UidProvider: TypeAlias = Callable[[], int | None]

DEFAULT_GATEWAY_PORT = 18789
OAUTH_DIRNAME = "credentials"
OAUTH_FILENAME = "oauth.json"

# Leading base-10 integer, trailing garbage ignored ("8080abc" -> 8080)
_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")


def _home(homedir: HomeProvider | None) -> Path:
    return Path((homedir or Path.home)())


def _exists(path: Path) -> bool:
    """Return True if ``path`` exists; any probe error counts as absent."""
    try:
        return path.exists()
    except (OSError, ValueError):
        return False


def _first_existing(candidates: list[Path]) -> Path | None:
    for candidate in candidates:
        if _exists(candidate):
            return candidate
    return None


def _config_files(directory: Path) -> list[Path]:
    """Config filenames under ``directory``, current name first."""
    return [directory / namespace.config_filename for namespace in CONFIG_FILENAME_NAMESPACES]


def _same_path(a: Path, b: Path) -> bool:
    return os.path.abspath(a) == os.path.abspath(b)


def resolve_user_path(raw: str, homedir: HomeProvider | None = None) -> Path | None:
    """Expand a user-supplied path into an absolute path.

    A leading ``~`` is replaced by the home directory only when it forms a
    whole component (``~`` or ``~/...``); ``~bar`` is treated as a relative
    name. Symlinks are not resolved.

    Args:
        raw: Path as typed by the user or read from the environment
        homedir: Home directory provider

    Returns:
        Absolute path, or None if ``raw`` is blank
    """
    trimmed = raw.strip()
    if not trimmed:
        return None
    if trimmed.startswith("~") and (len(trimmed) == 1 or trimmed[1] in "/\\"):
        trimmed = str(_home(homedir)) + trimmed[1:]
    return Path(os.path.abspath(trimmed))


def _override_path(
        family: EnvOverride,
        env: Env | None,
        homedir: HomeProvider | None,
) -> Path | None:
    found = family.lookup_source(env)
    if found is None:
        return None
    name, value = found
    logger.debug(f"Using {name} override: {value}")
    return resolve_user_path(value, homedir)


def resolve_is_nix_mode(env: Env | None = None) -> bool:
    """Return True when the gateway runs under Nix (``TESSA_NIX_MODE=1``).

    Under Nix, callers skip auto-install flows and treat the config as
    externally managed. The value must be exactly ``"1"``.
    """
    env = current_env(env)
    return any(env.get(name) == "1" for name in overrides.NIX_MODE.names)


# =============================================================================
# State directory
# =============================================================================

def resolve_new_state_dir(homedir: HomeProvider | None = None) -> Path:
    """Return ``~/.tessa``."""
    return _home(homedir) / CURRENT.state_dirname


def resolve_legacy_state_dir(homedir: HomeProvider | None = None) -> Path:
    """Return ``~/.clawdbot``, the oldest state directory."""
    return _home(homedir) / LEGACY_2.state_dirname


def resolve_legacy_state_dirs(homedir: HomeProvider | None = None) -> list[Path]:
    """Return every legacy state directory for migration scans, oldest first."""
    home = _home(homedir)
    return [home / namespace.state_dirname for namespace in (LEGACY_2, LEGACY_1, HISTORICAL)]


def resolve_state_dir(
        env: Env | None = None,
        homedir: HomeProvider | None = None,
) -> Path:
    """Resolve the directory for mutable data (sessions, logs, caches).

    Resolution order (first match wins):
    1. ``TESSA_STATE_DIR``, ``MOLTBOT_STATE_DIR``, ``CLAWDBOT_STATE_DIR``
    2. Existing ``~/.tessa``, ``~/.moltbot``, ``~/.clawdbot``
    3. ``~/.tessa`` (callers create it)
    """
    override = _override_path(overrides.STATE_DIR, env, homedir)
    if override is not None:
        return override

    home = _home(homedir)
    candidates = [home / namespace.state_dirname for namespace in NAMESPACES]
    existing = _first_existing(candidates)
    if existing is not None:
        logger.debug(f"Found existing state dir: {existing}")
        return existing
    return candidates[0]


# =============================================================================
# Config file
# =============================================================================

def resolve_canonical_config_path(
        env: Env | None = None,
        state_dir: Path | str | None = None,
        homedir: HomeProvider | None = None,
) -> Path:
    """Return the config path new installs write to: override or ``{state_dir}/tessa.json``."""
    override = _override_path(overrides.CONFIG_PATH, env, homedir)
    if override is not None:
        return override
    if state_dir is None:
        state_dir = resolve_state_dir(env, homedir)
    return Path(state_dir) / CURRENT.config_filename


def resolve_default_config_candidates(
        env: Env | None = None,
        homedir: HomeProvider | None = None,
) -> list[Path]:
    """Build the ordered list of config paths to probe, without touching disk.

    Order: explicit config path (alone), then every filename under each
    ``*_STATE_DIR`` override that is set, then every filename under
    ``~/.tessa`` and the legacy state directories.
    """
    explicit = _override_path(overrides.CONFIG_PATH, env, homedir)
    if explicit is not None:
        return [explicit]

    candidates: list[Path] = []
    for _, value in overrides.STATE_DIR.lookup_each(env):
        candidates.extend(_config_files(resolve_user_path(value, homedir)))

    for directory in [resolve_new_state_dir(homedir), *resolve_legacy_state_dirs(homedir)]:
        candidates.extend(_config_files(directory))
    return candidates


def resolve_config_path_candidate(
        env: Env | None = None,
        homedir: HomeProvider | None = None,
) -> Path:
    """Return the first existing config candidate, else the canonical path."""
    existing = _first_existing(resolve_default_config_candidates(env, homedir))
    if existing is not None:
        logger.debug(f"Found existing config file: {existing}")
        return existing
    return resolve_canonical_config_path(env, resolve_state_dir(env, homedir), homedir)


def resolve_config_path(
        env: Env | None = None,
        state_dir: Path | str | None = None,
        homedir: HomeProvider | None = None,
) -> Path:
    """Resolve the active config path for a known state directory.

    Resolution order (first match wins):
    1. ``*_CONFIG_PATH`` override
    2. Existing ``tessa.json``, ``moltbot.json``, ``clawdbot.json``,
       ``moldbot.json`` under ``state_dir``
    3. ``{state_dir}/tessa.json`` if a ``*_STATE_DIR`` override is set
    4. The global candidate search if ``state_dir`` is the default one
    5. ``{state_dir}/tessa.json``
    """
    override = _override_path(overrides.CONFIG_PATH, env, homedir)
    if override is not None:
        return override

    state_dir = Path(state_dir) if state_dir is not None else resolve_state_dir(env, homedir)
    existing = _first_existing(_config_files(state_dir))
    if existing is not None:
        return existing

    canonical = state_dir / CURRENT.config_filename
    if overrides.STATE_DIR.lookup(env) is not None:
        return canonical
    if _same_path(state_dir, resolve_state_dir(env, homedir)):
        return resolve_config_path_candidate(env, homedir)
    return canonical


# =============================================================================
# Credentials
# =============================================================================

def resolve_oauth_dir(
        env: Env | None = None,
        state_dir: Path | str | None = None,
        homedir: HomeProvider | None = None,
) -> Path:
    """Resolve the OAuth credentials directory.

    Resolution order: ``TESSA_OAUTH_DIR``, ``CLAWDBOT_OAUTH_DIR``,
    ``{state_dir}/credentials``.
    """
    override = _override_path(overrides.OAUTH_DIR, env, homedir)
    if override is not None:
        return override
    if state_dir is None:
        state_dir = resolve_state_dir(env, homedir)
    return Path(state_dir) / OAUTH_DIRNAME


def resolve_oauth_path(
        env: Env | None = None,
        state_dir: Path | str | None = None,
        homedir: HomeProvider | None = None,
) -> Path:
    return resolve_oauth_dir(env, state_dir, homedir) / OAUTH_FILENAME


# =============================================================================
# Gateway
# =============================================================================

def resolve_gateway_lock_dir(
        tmpdir: TmpProvider | None = None,
        getuid: UidProvider | None = None,
) -> Path:
    """Return the ephemeral gateway lock directory: ``{tmp}/tessa-{uid}``.

    The uid suffix is dropped when the platform has no numeric user id.
    """
    base = Path((tmpdir or tempfile.gettempdir)())
    getuid = getuid or getattr(os, "getuid", None)
    uid = getuid() if getuid is not None else None
    if uid is None:
        return base / CURRENT.name
    return base / f"{CURRENT.name}-{uid}"


def _parse_port(raw: str) -> int | None:
    match = _LEADING_INT_RE.match(raw)
    return int(match.group()) if match else None


def _config_port(cfg: TessaConfig | Mapping[str, Any] | None) -> Any:
    if cfg is None:
        return None
    if isinstance(cfg, Mapping):
        gateway = cfg.get("gateway")
        return gateway.get("port") if isinstance(gateway, Mapping) else None
    return cfg.gateway.port if cfg.gateway is not None else None


def resolve_gateway_port(
        cfg: TessaConfig | Mapping[str, Any] | None = None,
        env: Env | None = None,
) -> int:
    """Resolve the gateway port.

    Resolution order (first valid wins):
    1. ``TESSA_GATEWAY_PORT`` or ``CLAWDBOT_GATEWAY_PORT``, as a positive integer
    2. ``gateway.port`` from ``cfg``, if a finite positive number
    3. ``DEFAULT_GATEWAY_PORT``
    """
    found = overrides.GATEWAY_PORT.lookup_source(env)
    if found is not None:
        name, raw = found
        port = _parse_port(raw)
        if port is not None and port > 0:
            return port
        logger.debug(f"Ignoring {name}={raw!r}: not a positive integer")

    config_port = _config_port(cfg)
    if (
        isinstance(config_port, (int, float))
        and not isinstance(config_port, bool)
        and math.isfinite(config_port)
        and config_port > 0
    ):
        return int(config_port)
    return DEFAULT_GATEWAY_PORT
