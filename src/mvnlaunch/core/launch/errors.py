"""
Typed exceptions for launch assembly.

Every error raised while assembling a launch derives from LaunchError so
callers can abort the attempt with a single except clause. None of these
are retried: they are either configuration problems the user must fix, or
read failures at a user-inspectable path.
"""

from __future__ import annotations

from pathlib import Path


class LaunchError(Exception):
    """Base exception for launch assembly errors."""


class ConfigurationError(LaunchError):
    """A launch configuration attribute is missing or invalid."""


class InvalidVersionSpecError(ConfigurationError):
    """A version range specification could not be parsed."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        super().__init__(f"Invalid version range '{spec}': {reason}")


class UnsupportedVersionError(ConfigurationError):
    """No launcher is known for the runtime's major version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Unsupported Maven runtime version '{version}'")


class RuntimeNotFoundError(LaunchError):
    """The requested runtime is not configured or not installed."""

    def __init__(self, runtime_id: str | None) -> None:
        self.runtime_id = runtime_id
        if runtime_id:
            message = f"Maven runtime '{runtime_id}' is not configured"
        else:
            message = "No Maven runtime selected and no default runtime configured"
        super().__init__(message)


class ConfigReadError(LaunchError):
    """An existing configuration file could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class LaunchAssemblyError(LaunchError):
    """Assembly of the process arguments failed."""


class FrozenStateError(LaunchError):
    """An argument list was modified after it was serialized."""


class AttemptClosedError(LaunchError):
    """A launch attempt was used after it ended."""


__all__ = [
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
