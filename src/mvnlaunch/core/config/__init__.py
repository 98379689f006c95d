"""
Configuration models and loading.

This module provides Pydantic models for mvnlaunch configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import layered_environ
from .loader import (
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import (
    GlobalPreferences,
    LauncherConfig,
    RuntimeConfig,
)

__all__ = [
    # Models
    "GlobalPreferences",
    "LauncherConfig",
    "RuntimeConfig",
    # Loader functions
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    # Environment
    "layered_environ",
]
