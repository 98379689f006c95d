"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars

The result is loaded once per process by the caller and passed along;
nothing here is cached.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .models import LauncherConfig

logger = logging.getLogger(__name__)

_FALSE_VALUES = ("false", "0", "no", "")


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/mvnlaunch/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "mvnlaunch" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Project directory (defaults to current directory)

    Returns:
        Path to .mvnlaunch.json in the project directory
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".mvnlaunch.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`. Nested
    dicts are merged, everything else is replaced.

    Example:
        >>> deep_merge({"preferences": {"offline": False}}, {"preferences": {"offline": True}})
        {'preferences': {'offline': True}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON object file, returning None if it is missing or invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if the file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if isinstance(data, dict):
        return data
    logger.warning("Ignoring config at %s: top level is not an object", path)
    return None


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


def apply_env_overrides(
    config_dict: dict[str, Any],
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        MVNLAUNCH_OFFLINE - overrides preferences.offline
        MVNLAUNCH_DEBUG_OUTPUT - overrides preferences.debug_output
        MVNLAUNCH_USER_SETTINGS - overrides preferences.user_settings_file
        MVNLAUNCH_RUNTIME - overrides default_runtime

    Args:
        config_dict: Configuration dictionary to override
        environ: Variables to read (defaults to ``os.environ``)

    Returns:
        New configuration dictionary with env var overrides applied
    """
    env = os.environ if environ is None else environ
    result = config_dict.copy()
    preferences = dict(result.get("preferences") or {})

    if (offline := env.get("MVNLAUNCH_OFFLINE")) is not None:
        preferences["offline"] = _env_flag(offline)

    if (debug_output := env.get("MVNLAUNCH_DEBUG_OUTPUT")) is not None:
        preferences["debug_output"] = _env_flag(debug_output)

    if settings := env.get("MVNLAUNCH_USER_SETTINGS"):
        preferences["user_settings_file"] = settings

    if preferences:
        result["preferences"] = preferences

    if runtime := env.get("MVNLAUNCH_RUNTIME"):
        result["default_runtime"] = runtime

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "preferences": {"debug_output": False, "offline": False},
        "runtimes": {},
    }


def load_config(
    project_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LauncherConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (MVNLAUNCH_*)
        2. Project config (.mvnlaunch.json)
        3. User config (~/.config/mvnlaunch/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .mvnlaunch.json from (defaults to cwd)
        environ: Variables for the MVNLAUNCH_* overrides (defaults to ``os.environ``)

    Returns:
        Validated LauncherConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    merged = get_default_config()

    user_config_path = get_user_config_path()
    if user_config := load_json_file(user_config_path):
        logger.debug("Loaded user config from %s", user_config_path)
        merged = deep_merge(merged, user_config)

    project_config_path = get_project_config_path(project_dir)
    if project_config := load_json_file(project_config_path):
        logger.debug("Loaded project config from %s", project_config_path)
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged, environ)

    return LauncherConfig(**merged)
