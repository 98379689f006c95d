"""
Standardized error handling and exit codes for the mvnlaunch CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from pydantic import ValidationError
from rich.console import Console

from mvnlaunch.core.launch.errors import (
    ConfigurationError,
    LaunchAssemblyError,
    RuntimeNotFoundError,
)

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for mvnlaunch CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Assembly failed for a reason outside the launch configuration."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def report_error(error: Exception) -> ExitCode:
    """
    Print a launch error and return the matching exit code.

    Args:
        error: The exception raised while loading config or assembling

    Returns:
        Exit code the command should terminate with
    """
    if isinstance(error, RuntimeNotFoundError):
        print_error(
            str(error),
            reason="Runtimes are declared in .mvnlaunch.json or ~/.config/mvnlaunch/config.json",
            solution='add {"runtimes": {"<id>": {"version": "...", "home": "..."}}}',
        )
        return ExitCode.USER_ERROR

    if isinstance(error, LaunchAssemblyError):
        cause = error.__cause__
        print_error(str(error), reason=str(cause) if cause else None)
        return ExitCode.GENERAL_ERROR

    if isinstance(error, (ConfigurationError, ValidationError)):
        print_error(str(error), solution="check the launch options and configuration files")
        return ExitCode.USER_ERROR

    print_error(str(error))
    return ExitCode.GENERAL_ERROR
