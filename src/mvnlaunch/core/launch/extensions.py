"""
Launch extension and process runner protocols.

Extensions are the seam through which other concerns (source lookup,
debugging agents, profilers) add arguments to a launch or wrap the process
runner without the assembler knowing their details. They are passed to the
LaunchAssembler explicitly, as an ordered sequence.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mvnlaunch.core.launch.assembler import LaunchAttempt
    from mvnlaunch.core.launch.models import LaunchRequest


@runtime_checkable
class ProcessRunner(Protocol):
    """
    Protocol for whatever finally spawns the Maven JVM.

    Implemented by the host's process-launch machinery. Runners are
    decorated by the runtime descriptor and then by each extension.
    """

    def run(self, request: LaunchRequest) -> Any:
        """Start the process described by ``request``."""
        ...


@runtime_checkable
class LaunchExtension(Protocol):
    """
    Protocol for launch extensions.

    Extensions are invoked in registration order. Their contributions are
    appended after everything the assembler produces itself.
    """

    def contribute_program_arguments(self, attempt: LaunchAttempt) -> Sequence[str]:
        """
        Extra tokens for Maven's command line.

        Args:
            attempt: The launch attempt being assembled

        Returns:
            Tokens to append, in order
        """
        ...

    def contribute_process_arguments(self, attempt: LaunchAttempt) -> Sequence[str]:
        """
        Extra tokens for the JVM.

        Args:
            attempt: The launch attempt being assembled

        Returns:
            Tokens to append, in order
        """
        ...

    def wrap_process_runner(self, runner: ProcessRunner) -> ProcessRunner:
        """
        Decorate the process runner.

        Args:
            runner: Runner produced by the previous decorator

        Returns:
            The runner to hand to the next decorator
        """
        ...

    def configure_source_lookup(self, attempt: LaunchAttempt) -> None:
        """Wire up source lookup for the launch, once per attempt."""
        ...


class BaseLaunchExtension:
    """Convenience base class: contributes nothing and wraps nothing."""

    def contribute_program_arguments(self, attempt: LaunchAttempt) -> Sequence[str]:
        return ()

    def contribute_process_arguments(self, attempt: LaunchAttempt) -> Sequence[str]:
        return ()

    def wrap_process_runner(self, runner: ProcessRunner) -> ProcessRunner:
        return runner

    def configure_source_lookup(self, attempt: LaunchAttempt) -> None:
        return None


__all__ = ["BaseLaunchExtension", "LaunchExtension", "ProcessRunner"]
