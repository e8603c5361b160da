"""Configuration and path resolution for Tessa."""

# Re-export models
from tessa.config.models import GatewaySettings, TessaConfig

# Re-export resolvers
from tessa.config.paths import (
    DEFAULT_GATEWAY_PORT,
    resolve_canonical_config_path,
    resolve_config_path,
    resolve_config_path_candidate,
    resolve_default_config_candidates,
    resolve_gateway_lock_dir,
    resolve_gateway_port,
    resolve_is_nix_mode,
    resolve_legacy_state_dir,
    resolve_legacy_state_dirs,
    resolve_new_state_dir,
    resolve_oauth_dir,
    resolve_oauth_path,
    resolve_state_dir,
    resolve_user_path,
)

# Re-export loader
from tessa.config.loader import load_config

__all__ = [
    # Models
    "GatewaySettings",
    "TessaConfig",
    # Resolvers
    "DEFAULT_GATEWAY_PORT",
    "resolve_canonical_config_path",
    "resolve_config_path",
    "resolve_config_path_candidate",
    "resolve_default_config_candidates",
    "resolve_gateway_lock_dir",
    "resolve_gateway_port",
    "resolve_is_nix_mode",
    "resolve_legacy_state_dir",
    "resolve_legacy_state_dirs",
    "resolve_new_state_dir",
    "resolve_oauth_dir",
    "resolve_oauth_path",
    "resolve_state_dir",
    "resolve_user_path",
    # Loader
    "load_config",
]
