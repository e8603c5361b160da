"""Read the resolved Tessa config file."""

import logging
from pathlib import Path

import json5
from pydantic import ValidationError

from tessa.config.models import TessaConfig
from tessa.exceptions import ConfigFileError, ConfigValidationError

logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> TessaConfig:
    """Load the config document at ``config_path``.

    The file is JSON5, so comments, unquoted keys and trailing commas are
    accepted. A missing file is not an error: new installs have no config
    yet, so an empty ``TessaConfig`` is returned.

    Args:
        config_path: Path returned by one of the config path resolvers

    Returns:
        Parsed config model

    Raises:
        ConfigFileError: If the file cannot be read or is not valid JSON5
        ConfigValidationError: If the document does not match the model
    """
    try:
        if not config_path.is_file():
            logger.debug(f"No config file at {config_path}, using empty config")
            return TessaConfig()
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json5.load(f)
    except OSError as e:
        raise ConfigFileError(f"Could not read config file {config_path}: {e}", path=config_path) from e
    except ValueError as e:
        raise ConfigFileError(f"Failed to parse config file {config_path}: {e}", path=config_path) from e

    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Config must be a JSON5 object, got {type(data).__name__}",
            path=config_path,
        )

    try:
        return TessaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config file {config_path}", errors=e) from e
