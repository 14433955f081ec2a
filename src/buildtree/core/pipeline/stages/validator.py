from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between the raw JSON configuration and the
pipeline. Required fields (project root, toolchain) must be present and
well-typed or a ConfigError is raised. Optional fields are coerced with
warnings and fall back to their defaults.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from buildtree.domain.config import DEFAULT_LOG_LEVEL, get_default_config
from buildtree.domain.constants import (
    DEFAULT_SUBTREES,
    KEY_LANGUAGES,
    KEY_LOGGING,
    KEY_PATH_FLAGS,
    KEY_PROJECT_ROOT,
    KEY_SUBTREES,
    REQUIRED_TOOLCHAIN_KEYS,
)
from buildtree.domain.errors import ConfigError
from buildtree.domain.subtree_models import SubtreeSpec
from buildtree.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        base_dir: Optional[str] = None,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a raw build configuration.

    Args:
        config: Raw configuration data as parsed from JSON.
        base_dir: Directory relative project roots resolve against.
                  Defaults to the current working directory.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings. Keys:
                                          project_src_root, languages,
                                          path_specific_flags, subtrees,
                                          log_level, log_file.

    Raises:
        ConfigError: On missing or invalid required fields.
    """
    warnings: List[str] = []

    # 1. Base Type Validation
    if not isinstance(config, dict):
        raise ConfigError(
            f"Invalid config type: expected object, received {type(config).__name__}."
        )

    merged: Dict[str, Any] = get_default_config()
    merged.update(config)
    base = base_dir or os.getcwd()

    # 2. Required Fields
    root_raw = merged.get(KEY_PROJECT_ROOT)
    if not isinstance(root_raw, str) or not root_raw.strip():
        raise ConfigError(f"Missing or invalid field '{KEY_PROJECT_ROOT}': expected non-empty str.")

    languages = _validate_languages(merged.get(KEY_LANGUAGES))

    # 3. Optional Sections
    path_flags = merged.get(KEY_PATH_FLAGS)
    if path_flags is None:
        path_flags = {}
    if not isinstance(path_flags, dict):
        msg = f"Invalid field '{KEY_PATH_FLAGS}': expected object, received {type(path_flags).__name__}."
        warnings.append(f"{msg} Using empty flags.")
        path_flags = {}

    subtrees = _validate_subtrees(merged.get(KEY_SUBTREES), warnings)
    log_level, log_file = _validate_logging(merged.get(KEY_LOGGING), base, warnings)

    clean: Dict[str, Any] = {
        "project_src_root": normalize_path(root_raw, base),
        "languages": languages,
        "path_specific_flags": path_flags,
        "subtrees": subtrees,
        "log_level": log_level,
        "log_file": log_file,
    }
    return clean, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: SECTIONS
# -----------------------------------------------------------------------------

def _validate_languages(value: Any) -> Dict[str, Dict[str, str]]:
    """Check that every required toolchain entry is a non-empty string."""
    if not isinstance(value, dict):
        raise ConfigError(f"Missing or invalid field '{KEY_LANGUAGES}': expected object.")

    out: Dict[str, Dict[str, str]] = {}
    for lang, tool_keys in REQUIRED_TOOLCHAIN_KEYS.items():
        section = value.get(lang)
        if not isinstance(section, dict):
            raise ConfigError(f"Missing or invalid field '{KEY_LANGUAGES}.{lang}': expected object.")
        tools: Dict[str, str] = {}
        for key in tool_keys:
            tool = section.get(key)
            if not isinstance(tool, str) or not tool.strip():
                raise ConfigError(
                    f"Missing or invalid field '{KEY_LANGUAGES}.{lang}.{key}': expected non-empty str."
                )
            tools[key] = tool.strip()
        out[lang] = tools
    return out


def _validate_subtrees(value: Any, warnings: List[str]) -> List[SubtreeSpec]:
    """Build subtree declarations, falling back to the default layout."""
    if value is None:
        return list(DEFAULT_SUBTREES)

    if not isinstance(value, list) or not value:
        raise ConfigError(f"Invalid field '{KEY_SUBTREES}': expected non-empty list.")

    specs: List[SubtreeSpec] = []
    seen: set = set()
    for i, item in enumerate(value):
        field = f"{KEY_SUBTREES}[{i}]"
        if not isinstance(item, dict):
            raise ConfigError(f"Invalid item in '{field}': expected object.")

        name = item.get("Name")
        path = item.get("Path")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"Missing or invalid field '{field}.Name': expected non-empty str.")
        if not isinstance(path, str):
            raise ConfigError(f"Missing or invalid field '{field}.Path': expected str.")

        name = name.strip()
        if name in seen:
            raise ConfigError(f"Duplicate subtree name '{name}' in '{KEY_SUBTREES}'.")
        seen.add(name)

        requires = _as_bool(
            item.get("RequiresLinkerScript"), True, f"{field}.RequiresLinkerScript", warnings
        )
        specs.append(SubtreeSpec(name, path.strip(), requires_linker_script=requires))
    return specs


def _validate_logging(
        value: Any,
        base_dir: str,
        warnings: List[str],
) -> Tuple[str, Optional[str]]:
    """Extract log level and optional log file path."""
    if value is None:
        return DEFAULT_LOG_LEVEL, None
    if not isinstance(value, dict):
        msg = f"Invalid field '{KEY_LOGGING}': expected object, received {type(value).__name__}."
        warnings.append(f"{msg} Using defaults.")
        return DEFAULT_LOG_LEVEL, None

    level = value.get("Level", DEFAULT_LOG_LEVEL)
    level_str = level.strip().upper() if isinstance(level, str) else ""
    if level_str == "WARN":
        level_str = "WARNING"
    if level_str not in _LOG_LEVELS:
        msg = f"Invalid field '{KEY_LOGGING}.Level': {level!r}."
        warnings.append(f"{msg} Using {DEFAULT_LOG_LEVEL}.")
        level_str = DEFAULT_LOG_LEVEL

    log_file = value.get("File")
    if log_file is None or (isinstance(log_file, str) and not log_file.strip()):
        return level_str, None
    if not isinstance(log_file, str):
        msg = f"Invalid field '{KEY_LOGGING}.File': expected str, received {type(log_file).__name__}."
        warnings.append(f"{msg} File logging disabled.")
        return level_str, None

    return level_str, normalize_path(log_file, base_dir)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str]) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if isinstance(value, (int, float)) and value in (0, 1):
        warnings.append(f"Field '{field}' converted from number {value} to bool.")
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    warnings.append(f"{msg} Using fallback.")
    return fallback
