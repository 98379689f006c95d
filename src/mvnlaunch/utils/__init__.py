"""Utility modules for mvnlaunch."""

from .project import MAVEN_PROJECT_MARKER, find_ancestor_with_marker

__all__ = [
    "MAVEN_PROJECT_MARKER",
    "find_ancestor_with_marker",
]
