"""
mvnlaunch - Maven launch argument assembly

Builds the launcher class, classpath, program arguments and JVM arguments
for running Maven as an external process.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from mvnlaunch.core.config.models import GlobalPreferences, LauncherConfig
from mvnlaunch.core.launch.models import LaunchConfiguration, LaunchRequest, RuntimeDescriptor

__all__ = [
    "GlobalPreferences",
    "LaunchConfiguration",
    "LaunchRequest",
    "LauncherConfig",
    "RuntimeDescriptor",
    "__version__",
]
