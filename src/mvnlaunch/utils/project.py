"""
Project root discovery utilities for mvnlaunch.

Maven 3.3+ identifies the root of a multi-module build by the presence of a
``.mvn/`` directory. This module walks upward from a module directory to
find that root.
"""

from pathlib import Path

# Marker directory that identifies a multi-module project root
MAVEN_PROJECT_MARKER = ".mvn"


def find_ancestor_with_marker(start: Path, marker: str = MAVEN_PROJECT_MARKER) -> Path:
    """
    Find the closest directory at or above ``start`` containing ``marker``.

    The marker must be a directory. The filesystem root itself is never
    considered a project root, so the search stops one level below it.

    Args:
        start: Directory to start searching from
        marker: Name of the marker subdirectory

    Returns:
        The first ancestor (or ``start`` itself, made absolute) that contains
        the marker, or ``start`` unchanged when no marker is found. A
        nonexistent ``start`` is treated as "not found".

    Example:
        >>> find_ancestor_with_marker(Path("/work/app/module"))  # .mvn in /work/app
        PosixPath('/work/app')
    """
    current = start.absolute()
    while current != current.parent:
        if (current / marker).is_dir():
            return current
        current = current.parent
    return start
