"""
Launch assembly.

A LaunchAssembler turns a LaunchConfiguration into the launcher class,
boot classpath, program arguments and VM arguments for one Maven run. Each
request gets its own LaunchAttempt; the attempt caches what it computes and
is discarded when the request ends, successful or not.

Usage:
    >>> assembler = LaunchAssembler(registry, extensions=[DebugAgent()])
    >>> request = assembler.launch(configuration, runner)
    >>> request.runner.run(request)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from types import MappingProxyType

from mvnlaunch.core.config.models import GlobalPreferences
from mvnlaunch.core.launch.arguments import VMArguments
from mvnlaunch.core.launch.errors import (
    AttemptClosedError,
    ConfigurationError,
    LaunchError,
    UnsupportedVersionError,
)
from mvnlaunch.core.launch.extensions import LaunchExtension, ProcessRunner
from mvnlaunch.core.launch.jvm_config import RuntimeSpecificArgumentPolicy
from mvnlaunch.core.launch.models import LaunchConfiguration, LaunchRequest, RuntimeDescriptor
from mvnlaunch.core.launch.program_args import ProgramArgumentBuilder
from mvnlaunch.core.launch.runtimes import RuntimeRegistry
from mvnlaunch.core.launch.versions import MAVEN_33_PLUS, ArtifactVersion, VersionRange

logger = logging.getLogger(__name__)

LEGACY_LAUNCHER = "org.codehaus.classworlds.Launcher"

# classworlds 2.0
CLASSWORLDS2_LAUNCHER = "org.codehaus.plexus.classworlds.launcher.Launcher"

LAUNCHERS_BY_MAJOR_VERSION: Mapping[int, str] = MappingProxyType({
    2: LEGACY_LAUNCHER,
    3: CLASSWORLDS2_LAUNCHER,
})


def select_main_type(version: str | None) -> str:
    """
    Pick the launcher class for a Maven version.

    Raises:
        ConfigurationError: If the version is missing or has no numeric part
        UnsupportedVersionError: If no launcher is known for its major version

    Example:
        >>> select_main_type("3.9.6")
        'org.codehaus.plexus.classworlds.launcher.Launcher'
    """
    if version is None or not version.strip():
        raise ConfigurationError("Maven runtime does not report a version")

    major = ArtifactVersion.parse(version).major
    if major is None:
        raise ConfigurationError(f"Cannot determine the major version of '{version}'")

    launcher = LAUNCHERS_BY_MAJOR_VERSION.get(major)
    if launcher is None:
        raise UnsupportedVersionError(version)
    return launcher


class LaunchAttempt:
    """
    State of one launch request.

    Resolves the runtime on first use and computes each argument string at
    most once. After :meth:`close` every accessor raises AttemptClosedError.

    Extensions receive the attempt and may read :attr:`configuration` and
    :attr:`runtime`; they must not request the argument strings they are
    contributing to.
    """

    def __init__(
        self,
        configuration: LaunchConfiguration,
        *,
        registry: RuntimeRegistry,
        extensions: Sequence[LaunchExtension],
        program_builder: ProgramArgumentBuilder,
        policy: RuntimeSpecificArgumentPolicy,
    ) -> None:
        self._configuration = configuration
        self._registry = registry
        self._extensions = extensions
        self._program_builder = program_builder
        self._policy = policy
        self._runtime: RuntimeDescriptor | None = None
        self._program_arguments: str | None = None
        self._vm_arguments: str | None = None
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise AttemptClosedError("Launch attempt has already ended")

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def configuration(self) -> LaunchConfiguration:
        self._check_open()
        return self._configuration

    @property
    def runtime(self) -> RuntimeDescriptor:
        """The Maven runtime for this attempt, resolved once."""
        self._check_open()
        if self._runtime is None:
            self._runtime = self._registry.resolve_runtime(self._configuration)
        return self._runtime

    @property
    def main_type_name(self) -> str:
        return select_main_type(self.runtime.version)

    @property
    def classpath(self) -> list[str]:
        """Boot classpath exactly as the runtime supplies it."""
        return list(self.runtime.boot_classpath)

    @property
    def working_directory(self) -> Path:
        pom_directory = self.configuration.pom_directory
        return Path(pom_directory) if pom_directory else Path.cwd()

    def program_arguments(self) -> str:
        """Maven command-line arguments, computed once per attempt."""
        self._check_open()
        if self._program_arguments is None:
            extra: list[str] = []
            for extension in self._extensions:
                extra.extend(extension.contribute_program_arguments(self))
            self._program_arguments = self._program_builder.build(self._configuration, extra)
        return self._program_arguments

    def vm_arguments(self) -> str:
        """
        JVM arguments, computed once per attempt.

        Order: runtime seed properties, runtime-specific arguments
        (jvm.config and the project root), user arguments, then extension
        contributions.

        Raises:
            LaunchAssemblyError: If .mvn/jvm.config cannot be read
        """
        self._check_open()
        if self._vm_arguments is None:
            runtime = self.runtime
            arguments = VMArguments()
            for name, value in runtime.system_properties.items():
                arguments.append_property(name, value)

            self._policy.apply(runtime.version, arguments, self._configuration.pom_directory)

            user_arguments = self._configuration.vm_arguments.strip()
            if user_arguments:
                arguments.append(user_arguments)

            for extension in self._extensions:
                arguments.extend(tuple(extension.contribute_process_arguments(self)))

            self._vm_arguments = arguments.to_final_string()
        return self._vm_arguments

    def decorate_runner(self, runner: ProcessRunner) -> ProcessRunner:
        """Wrap ``runner`` with the runtime, then each extension in order."""
        decorated = self.runtime.decorate_runner(runner)
        for extension in self._extensions:
            decorated = extension.wrap_process_runner(decorated)
        return decorated

    def to_request(self, runner: ProcessRunner | None = None) -> LaunchRequest:
        """Collect everything the process-launch collaborator needs."""
        return LaunchRequest(
            main_type_name=self.main_type_name,
            classpath=tuple(self.classpath),
            program_arguments=self.program_arguments(),
            vm_arguments=self.vm_arguments(),
            working_directory=self.working_directory,
            runner=self.decorate_runner(runner) if runner is not None else None,
        )

    def close(self) -> None:
        """End the attempt and drop everything it resolved."""
        self._closed = True
        self._runtime = None
        self._program_arguments = None
        self._vm_arguments = None


class LaunchAssembler:
    """
    Builds launch requests for Maven runs.

    The registry, extensions, preferences and version range are fixed at
    construction and shared read-only by every attempt, so independent
    attempts may run concurrently.

    Example:
        >>> assembler = LaunchAssembler(ConfiguredRuntimeRegistry([runtime], default="3.9"))
        >>> with assembler.attempt(LaunchConfiguration(goals="verify")) as attempt:
        ...     attempt.program_arguments()
        ' -B verify'
    """

    def __init__(
        self,
        registry: RuntimeRegistry,
        extensions: Sequence[LaunchExtension] = (),
        preferences: GlobalPreferences | None = None,
        version_range: VersionRange = MAVEN_33_PLUS,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._registry = registry
        self._extensions = tuple(extensions)
        self._preferences = preferences or GlobalPreferences()
        self._program_builder = ProgramArgumentBuilder(self._preferences, environ)
        self._policy = RuntimeSpecificArgumentPolicy(version_range)

    @property
    def extensions(self) -> tuple[LaunchExtension, ...]:
        return self._extensions

    @property
    def preferences(self) -> GlobalPreferences:
        return self._preferences

    @contextmanager
    def attempt(self, configuration: LaunchConfiguration) -> Iterator[LaunchAttempt]:
        """Open a launch attempt that is closed when the block exits."""
        attempt = LaunchAttempt(
            configuration,
            registry=self._registry,
            extensions=self._extensions,
            program_builder=self._program_builder,
            policy=self._policy,
        )
        try:
            yield attempt
        finally:
            attempt.close()

    def launch(
        self,
        configuration: LaunchConfiguration,
        runner: ProcessRunner | None = None,
    ) -> LaunchRequest:
        """
        Assemble a complete launch request.

        Nothing is handed out unless assembly succeeds end to end.

        Args:
            configuration: Launch configuration
            runner: Base process runner to decorate

        Returns:
            LaunchRequest for the process-launch collaborator

        Raises:
            LaunchError: If any part of the assembly fails
        """
        with self.attempt(configuration) as attempt:
            try:
                working_directory = attempt.working_directory
                program_arguments = attempt.program_arguments()
                logger.info("%s", working_directory)
                logger.info(" mvn%s", program_arguments)

                for extension in self._extensions:
                    extension.configure_source_lookup(attempt)

                return attempt.to_request(runner)
            except LaunchError as e:
                logger.error("Cannot launch Maven in %s: %s", configuration.pom_directory, e)
                raise


__all__ = [
    "CLASSWORLDS2_LAUNCHER",
    "LAUNCHERS_BY_MAJOR_VERSION",
    "LEGACY_LAUNCHER",
    "LaunchAssembler",
    "LaunchAttempt",
    "select_main_type",
]
