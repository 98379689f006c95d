"""Environment seen by a launch.

MVNLAUNCH_* overrides and ``${env_var:NAME}`` references in property values
are resolved against one mapping built from, lowest to highest:

- the user file ``~/.config/mvnlaunch/.env``
- the project files ``.env`` and ``.env.local`` in the project directory
- the process environment

The process environment is read, never written.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from .loader import get_xdg_config_home

logger = logging.getLogger(__name__)

PROJECT_ENV_FILES = (".env", ".env.local")


def get_user_env_path() -> Path:
    return get_xdg_config_home() / "mvnlaunch" / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """Variables defined in a .env file; keys without a value are skipped."""
    if not path.is_file():
        return {}
    values = {key: value for key, value in dotenv_values(path).items() if value is not None}
    logger.debug("Loaded %d variable(s) from %s", len(values), path)
    return values


def layered_environ(
    project_dir: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Build the environment for a launch.

    Args:
        project_dir: Directory holding the project .env files (defaults to cwd)
        environ: Process environment (defaults to ``os.environ``)

    Returns:
        New mapping; a .env value never replaces a process variable

    Example:
        >>> env = layered_environ(Path("/work/app"), environ={"MVNLAUNCH_OFFLINE": "1"})
        >>> env["MVNLAUNCH_OFFLINE"]
        '1'
    """
    if project_dir is None:
        project_dir = Path.cwd()

    merged = read_env_file(get_user_env_path())
    for name in PROJECT_ENV_FILES:
        merged.update(read_env_file(project_dir / name))
    merged.update(os.environ if environ is None else environ)
    return merged


__all__ = ["PROJECT_ENV_FILES", "get_user_env_path", "layered_environ", "read_env_file"]
