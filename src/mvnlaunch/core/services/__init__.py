"""
Service layer for mvnlaunch.

Services compose the launch package with configuration loading into a
small API surface. They accept typed inputs, return typed outputs and raise
typed exceptions; presentation is the caller's job.

Modules:
    launch: LaunchService assembles Maven launch requests.
"""

from mvnlaunch.core.services.launch import LaunchService

__all__ = ["LaunchService"]
