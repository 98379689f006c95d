"""
Data models for launch assembly.

Defines the launch configuration read by the assembler, the resolved runtime
descriptor, and the request handed to the process-launch collaborator.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mvnlaunch.core.launch.arguments import split_arguments

if TYPE_CHECKING:
    from mvnlaunch.core.launch.extensions import ProcessRunner


class LaunchConfiguration(BaseModel):
    """
    Declarative description of one Maven invocation.

    Immutable once built. Mappings may use either the snake_case field names
    or the camelCase attribute names (``debugOutput``, ``pomDirectory``).

    Example:
        >>> config = LaunchConfiguration(
        ...     goals="clean install",
        ...     properties=["skip=true"],
        ...     profiles="ci  release",
        ...     offline=True,
        ...     threads=4,
        ... )
        >>> config.threads
        4
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    goals: str = Field(default="", description="Goals and phases, passed verbatim")
    properties: list[str] = Field(
        default_factory=list,
        description="System properties as name[=value] entries, in order",
    )
    profiles: str | None = Field(
        default=None, description="Whitespace-separated profile ids"
    )
    debug_output: bool | None = Field(
        default=None, description="Run with -X -e (None: use global preference)"
    )
    offline: bool | None = Field(
        default=None, description="Run with -o (None: use global preference)"
    )
    update_snapshots: bool = Field(default=False, description="Run with -U")
    non_recursive: bool = Field(default=False, description="Run with -N")
    skip_tests: bool = Field(default=False, description="Skip compiling and running tests")
    threads: int = Field(default=1, ge=1, description="Parallel build thread count")
    user_settings: str | None = Field(
        default=None, description="Per-launch settings.xml, used verbatim"
    )
    pom_directory: str = Field(default="", description="Directory containing the pom.xml")
    runtime_id: str | None = Field(
        default=None, description="Maven runtime to launch (None: registry default)"
    )
    vm_arguments: str = Field(
        default="", description="User-supplied JVM arguments, passed through verbatim"
    )


class RuntimeDescriptor(BaseModel):
    """
    A resolved Maven installation.

    Resolved once per launch attempt and never modified afterwards.
    ``system_properties`` seed the process arguments, in insertion order,
    before anything else is appended.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Runtime identifier")
    version: str = Field(description="Maven version string, e.g. '3.9.6'")
    boot_classpath: list[str] = Field(
        default_factory=list, description="Boot classpath entries, in order"
    )
    system_properties: dict[str, str] = Field(
        default_factory=dict, description="Seed -D properties for the JVM"
    )

    def decorate_runner(self, runner: ProcessRunner) -> ProcessRunner:
        """
        Wrap the process runner for this runtime.

        Installations needing extra process setup override this. The
        default runner is returned as-is.
        """
        return runner


@dataclass(frozen=True)
class LaunchRequest:
    """
    Everything the process-launch collaborator needs to start Maven.

    Attributes:
        main_type_name: Launcher class to execute
        classpath: Boot classpath entries, in order
        program_arguments: Arguments for Maven's own command-line parser
        vm_arguments: Arguments for the JVM
        working_directory: Directory to launch from
        runner: Decorated process runner
    """

    main_type_name: str
    classpath: tuple[str, ...]
    program_arguments: str
    vm_arguments: str
    working_directory: Path
    runner: Any = None

    def command_line(self, java: str = "java") -> list[str]:
        """
        Render the equivalent ``java`` argv.

        Only used for display; this package never spawns the process.
        """
        argv = [java, *split_arguments(self.vm_arguments)]
        if self.classpath:
            argv += ["-classpath", os.pathsep.join(self.classpath)]
        argv.append(self.main_type_name)
        argv += split_arguments(self.program_arguments)
        return argv


__all__ = [
    "LaunchConfiguration",
    "LaunchRequest",
    "RuntimeDescriptor",
]
