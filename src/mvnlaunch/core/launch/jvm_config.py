"""
Runtime-specific JVM arguments.

Maven 3.3 introduced project-local JVM configuration: the multi-module
project root is marked by a ``.mvn/`` directory, ``.mvn/jvm.config`` holds
extra JVM arguments, and the launcher must be told the root through the
``maven.multiModuleProjectDirectory`` system property.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from mvnlaunch.core.launch.arguments import VMArguments
from mvnlaunch.core.launch.errors import ConfigReadError, LaunchAssemblyError
from mvnlaunch.core.launch.versions import MAVEN_33_PLUS, VersionRange
from mvnlaunch.utils.project import MAVEN_PROJECT_MARKER, find_ancestor_with_marker

logger = logging.getLogger(__name__)

JVM_CONFIG_FILE = "jvm.config"
MULTI_MODULE_PROJECT_DIRECTORY = "maven.multiModuleProjectDirectory"

# Only CR, LF and CRLF end a line; other Unicode separators stay in the token
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def read_config_lines(path: Path) -> list[str]:
    """
    Read a config file as literal argument tokens, one per line.

    Lines are returned verbatim: no trimming, comment stripping or quoting.

    Args:
        path: File to read

    Returns:
        The file's lines, or an empty list if it is missing or not a regular file

    Raises:
        ConfigReadError: If the file exists but cannot be read
    """
    if not path.is_file():
        return []

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, e) from e
    lines = _LINE_BREAK_RE.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


class RuntimeSpecificArgumentPolicy:
    """
    Adds jvm.config arguments and the project root property for Maven 3.3+.

    Example:
        >>> policy = RuntimeSpecificArgumentPolicy()
        >>> policy.applies("3.5.0")
        True
        >>> policy.applies("2.2.1")
        False
    """

    def __init__(
        self,
        version_range: VersionRange = MAVEN_33_PLUS,
        marker: str = MAVEN_PROJECT_MARKER,
    ) -> None:
        self._version_range = version_range
        self._marker = marker

    @property
    def version_range(self) -> VersionRange:
        return self._version_range

    def applies(self, runtime_version: str) -> bool:
        """Whether the runtime version reads project-local JVM config."""
        return self._version_range.contains_version(runtime_version)

    def apply(
        self,
        runtime_version: str,
        arguments: VMArguments,
        project_dir: str | Path | None,
    ) -> None:
        """
        Append runtime-specific arguments for a launch.

        Does nothing when no project directory is configured or the runtime
        predates Maven 3.3. Otherwise appends every line of
        ``<root>/.mvn/jvm.config`` followed by the project root property,
        which is added even when jvm.config is absent.

        Raises:
            LaunchAssemblyError: If jvm.config exists but cannot be read
        """
        if project_dir is None or not str(project_dir):
            return
        if not self.applies(runtime_version):
            logger.debug(
                "Maven %s predates %s, skipping jvm.config", runtime_version, self._version_range
            )
            return

        base_dir = find_ancestor_with_marker(Path(project_dir), self._marker)
        jvm_config = base_dir / self._marker / JVM_CONFIG_FILE

        try:
            lines = read_config_lines(jvm_config)
        except ConfigReadError as e:
            logger.error("Cannot read %s", e.path.absolute())
            raise LaunchAssemblyError(f"Cannot read JVM config {e.path.absolute()}") from e

        if lines:
            logger.debug("Appending %d argument(s) from %s", len(lines), jvm_config)
        arguments.extend(lines)
        arguments.append_property(MULTI_MODULE_PROJECT_DIRECTORY, str(base_dir.absolute()))


__all__ = [
    "JVM_CONFIG_FILE",
    "MULTI_MODULE_PROJECT_DIRECTORY",
    "RuntimeSpecificArgumentPolicy",
    "read_config_lines",
]
