"""
Maven runtime resolution.

The assembler asks a RuntimeRegistry for the installation a launch should
use. ConfiguredRuntimeRegistry serves runtimes declared in the mvnlaunch
configuration; hosts with their own installation management provide
another implementation of the protocol.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath
from typing import Protocol, runtime_checkable

from mvnlaunch.core.config.models import LauncherConfig, RuntimeConfig
from mvnlaunch.core.launch.errors import RuntimeNotFoundError
from mvnlaunch.core.launch.models import LaunchConfiguration, RuntimeDescriptor


@runtime_checkable
class RuntimeRegistry(Protocol):
    """Protocol for resolving the Maven runtime of a launch."""

    def resolve_runtime(self, configuration: LaunchConfiguration) -> RuntimeDescriptor:
        """
        Resolve the runtime selected by a launch configuration.

        Raises:
            RuntimeNotFoundError: If the runtime is not configured or installed
        """
        ...


def descriptor_from_config(runtime_id: str, runtime: RuntimeConfig) -> RuntimeDescriptor:
    """
    Build a RuntimeDescriptor for a configured runtime.

    Runtimes with a ``home`` get the ``maven.home`` and ``classworlds.conf``
    seed properties the classworlds launcher expects.
    """
    system_properties: dict[str, str] = {}
    if runtime.home:
        home = PurePath(runtime.home)
        system_properties["classworlds.conf"] = str(home / "bin" / "m2.conf")
        system_properties["maven.home"] = str(home)

    return RuntimeDescriptor(
        id=runtime_id,
        version=runtime.version,
        boot_classpath=list(runtime.boot_classpath),
        system_properties=system_properties,
    )


class ConfiguredRuntimeRegistry:
    """
    Registry backed by a fixed set of runtime descriptors.

    Example:
        >>> registry = ConfiguredRuntimeRegistry(
        ...     [RuntimeDescriptor(id="3.9", version="3.9.6")], default="3.9"
        ... )
        >>> registry.resolve_runtime(LaunchConfiguration()).version
        '3.9.6'
    """

    def __init__(
        self,
        runtimes: Iterable[RuntimeDescriptor] = (),
        default: str | None = None,
    ) -> None:
        self._runtimes = {runtime.id: runtime for runtime in runtimes}
        self._default = default

    @classmethod
    def from_config(cls, config: LauncherConfig) -> ConfiguredRuntimeRegistry:
        """Create a registry from the runtimes section of the configuration."""
        return cls(
            (descriptor_from_config(runtime_id, runtime)
             for runtime_id, runtime in config.runtimes.items()),
            default=config.default_runtime,
        )

    @property
    def runtime_ids(self) -> list[str]:
        return list(self._runtimes)

    def resolve_runtime(self, configuration: LaunchConfiguration) -> RuntimeDescriptor:
        runtime_id = configuration.runtime_id or self._default
        if runtime_id is None or runtime_id not in self._runtimes:
            raise RuntimeNotFoundError(runtime_id)
        return self._runtimes[runtime_id]


__all__ = [
    "ConfiguredRuntimeRegistry",
    "RuntimeRegistry",
    "descriptor_from_config",
]
