"""
Launch assembly for Maven runs.

This package turns a declarative launch configuration into the launcher
class, boot classpath, Maven program arguments and JVM arguments for an
external Maven process. It never starts the process itself.

Modules:
    assembler: LaunchAssembler / LaunchAttempt orchestration
    program_args: Maven command-line assembly (-D, -P, -B, -o, ...)
    jvm_config: .mvn/jvm.config handling for Maven 3.3+
    arguments: VM argument accumulation and quoting
    versions: Version parsing and range matching
    runtimes: Runtime registry protocol and configured registry
    extensions: Extension and process runner protocols
    models: LaunchConfiguration, RuntimeDescriptor, LaunchRequest
    errors: Typed exceptions

Example Usage:
    >>> from mvnlaunch.core.launch import (
    ...     ConfiguredRuntimeRegistry, LaunchAssembler, LaunchConfiguration, RuntimeDescriptor
    ... )
    >>> registry = ConfiguredRuntimeRegistry(
    ...     [RuntimeDescriptor(id="3.9", version="3.9.6", boot_classpath=["boot/cw.jar"])],
    ...     default="3.9",
    ... )
    >>> request = LaunchAssembler(registry).launch(LaunchConfiguration(goals="verify"))
    >>> request.program_arguments
    ' -B verify'
"""

from mvnlaunch.core.launch.arguments import VMArguments, property_token, quote, split_arguments
from mvnlaunch.core.launch.assembler import (
    CLASSWORLDS2_LAUNCHER,
    LEGACY_LAUNCHER,
    LaunchAssembler,
    LaunchAttempt,
    select_main_type,
)
from mvnlaunch.core.launch.errors import (
    AttemptClosedError,
    ConfigReadError,
    ConfigurationError,
    FrozenStateError,
    InvalidVersionSpecError,
    LaunchAssemblyError,
    LaunchError,
    RuntimeNotFoundError,
    UnsupportedVersionError,
)
from mvnlaunch.core.launch.extensions import (
    BaseLaunchExtension,
    LaunchExtension,
    ProcessRunner,
)
from mvnlaunch.core.launch.jvm_config import (
    MULTI_MODULE_PROJECT_DIRECTORY,
    RuntimeSpecificArgumentPolicy,
    read_config_lines,
)
from mvnlaunch.core.launch.models import (
    LaunchConfiguration,
    LaunchRequest,
    RuntimeDescriptor,
)
from mvnlaunch.core.launch.program_args import (
    ProgramArgumentBuilder,
    parse_property,
    substitute_variables,
)
from mvnlaunch.core.launch.runtimes import (
    ConfiguredRuntimeRegistry,
    RuntimeRegistry,
    descriptor_from_config,
)
from mvnlaunch.core.launch.versions import MAVEN_33_PLUS, ArtifactVersion, VersionRange

__all__ = [
    # Assembly
    "LaunchAssembler",
    "LaunchAttempt",
    "select_main_type",
    "CLASSWORLDS2_LAUNCHER",
    "LEGACY_LAUNCHER",
    # Arguments
    "ProgramArgumentBuilder",
    "RuntimeSpecificArgumentPolicy",
    "VMArguments",
    "MULTI_MODULE_PROJECT_DIRECTORY",
    "parse_property",
    "property_token",
    "quote",
    "split_arguments",
    "read_config_lines",
    "substitute_variables",
    # Versions
    "ArtifactVersion",
    "VersionRange",
    "MAVEN_33_PLUS",
    # Collaborators
    "BaseLaunchExtension",
    "ConfiguredRuntimeRegistry",
    "LaunchExtension",
    "ProcessRunner",
    "RuntimeRegistry",
    "descriptor_from_config",
    # Models
    "LaunchConfiguration",
    "LaunchRequest",
    "RuntimeDescriptor",
    # Errors
    "AttemptClosedError",
    "ConfigReadError",
    "ConfigurationError",
    "FrozenStateError",
    "InvalidVersionSpecError",
    "LaunchAssemblyError",
    "LaunchError",
    "RuntimeNotFoundError",
    "UnsupportedVersionError",
]
