from __future__ import annotations

"""
Configuration Domain Management.

Reads the JSON build configuration file and supplies defaults for its
optional sections. Schema checks and normalization live in the validator
stage; this module only turns a path into a raw dictionary.
"""

import json
import logging
import os
from typing import Any, Dict

from buildtree.domain.constants import KEY_LOGGING, KEY_PATH_FLAGS, KEY_SUBTREES
from buildtree.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"


def get_default_config() -> Dict[str, Any]:
    """
    Generate defaults for the optional sections of a build configuration.

    Returns:
        Dict[str, Any]: Default values keyed by configuration file key.
    """
    return {
        KEY_PATH_FLAGS: {},
        KEY_SUBTREES: None,
        KEY_LOGGING: {
            "Level": DEFAULT_LOG_LEVEL,
            "File": "",
        },
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_build_config(config_path: str) -> Dict[str, Any]:
    """
    Load the raw build configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dict[str, Any]: Parsed top-level JSON object.

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    if not os.path.exists(config_path):
        raise ConfigError(f"Config file does not exist: {config_path}", config_path)
    if not os.path.isfile(config_path):
        raise ConfigError(f"Config path is not a file: {config_path}", config_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Malformed config file '{config_path}': {e.msg} (line {e.lineno}, column {e.colno})",
            config_path,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file '{config_path}': {e}", config_path) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Malformed config file '{config_path}': expected a JSON object, "
            f"received {type(data).__name__}.",
            config_path,
        )

    logger.debug(f"Configuration loaded from {config_path}")
    return data
