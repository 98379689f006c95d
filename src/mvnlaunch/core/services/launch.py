"""
Launch service: API for assembling Maven launches.

Wraps the launch package with configuration loading so interfaces (CLI,
IDE integrations, scripts) can go from a mapping or a launch file to a
finished LaunchRequest in one call.

Usage:
    >>> from mvnlaunch.core.services.launch import LaunchService
    >>> service = LaunchService.from_config()
    >>> configuration = service.load_configuration(Path("launch.yaml"))
    >>> request = service.assemble(configuration)
    >>> request.program_arguments
    ' -Dskip=true -Pci,release -B -o --threads 4 clean install'
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mvnlaunch.core.config.env import layered_environ
from mvnlaunch.core.config.loader import load_config
from mvnlaunch.core.config.models import LauncherConfig
from mvnlaunch.core.launch import (
    ConfigurationError,
    ConfiguredRuntimeRegistry,
    LaunchAssembler,
    LaunchConfiguration,
    LaunchExtension,
    LaunchRequest,
    ProcessRunner,
)

logger = logging.getLogger(__name__)


class LaunchService:
    """
    Service for assembling Maven launch requests.

    Holds the process-wide configuration, the runtime registry built from
    it and a LaunchAssembler. All of these are read-only after construction.

    Example:
        >>> service = LaunchService.from_config()
        >>> request = service.assemble(LaunchConfiguration(goals="verify"))
    """

    def __init__(
        self,
        config: LauncherConfig,
        extensions: Sequence[LaunchExtension] = (),
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize service with dependencies.

        Args:
            config: mvnlaunch configuration
            extensions: Launch extensions, in the order they should run
            environ: Variables for ${env_var:NAME} substitution (defaults to os.environ)
        """
        self._config = config
        self._registry = ConfiguredRuntimeRegistry.from_config(config)
        self._assembler = LaunchAssembler(
            self._registry,
            extensions=extensions,
            preferences=config.preferences,
            environ=environ,
        )

    @classmethod
    def from_config(
        cls,
        config: LauncherConfig | None = None,
        *,
        project_dir: Path | None = None,
        extensions: Sequence[LaunchExtension] = (),
        environ: Mapping[str, str] | None = None,
    ) -> LaunchService:
        """
        Create service from configuration.

        Args:
            config: Optional configuration (loaded from disk if None)
            project_dir: Directory holding .mvnlaunch.json and .env (defaults to cwd)
            extensions: Launch extensions
            environ: Process environment (defaults to os.environ); .env files
                are layered under it

        Returns:
            Configured LaunchService instance
        """
        env = layered_environ(project_dir, environ=environ)
        if config is None:
            config = load_config(project_dir, env)
        return cls(config, extensions, env)

    @property
    def config(self) -> LauncherConfig:
        """The loaded mvnlaunch configuration."""
        return self._config

    @property
    def registry(self) -> ConfiguredRuntimeRegistry:
        return self._registry

    @property
    def assembler(self) -> LaunchAssembler:
        return self._assembler

    # ============================================================================
    # Launch configurations
    # ============================================================================

    @staticmethod
    def build_configuration(data: Mapping[str, Any]) -> LaunchConfiguration:
        """
        Validate a mapping of launch attributes.

        Raises:
            ConfigurationError: If an attribute is unknown or has the wrong type
        """
        try:
            return LaunchConfiguration.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid launch configuration: {e}") from e

    @staticmethod
    def load_configuration(path: Path) -> LaunchConfiguration:
        """
        Read a launch configuration from a YAML or JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read launch configuration {path}: {e}") from e

        try:
            if path.suffix == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse launch configuration {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Launch configuration {path} must be a mapping")

        logger.debug("Loaded launch configuration from %s", path)
        return LaunchService.build_configuration(data)

    # ============================================================================
    # Assembly
    # ============================================================================

    def assemble(
        self,
        configuration: LaunchConfiguration,
        runner: ProcessRunner | None = None,
    ) -> LaunchRequest:
        """
        Assemble a launch request.

        Args:
            configuration: Launch configuration
            runner: Base process runner to decorate

        Returns:
            LaunchRequest for the process-launch collaborator

        Raises:
            LaunchError: If assembly fails
        """
        return self._assembler.launch(configuration, runner)


__all__ = ["LaunchService"]
