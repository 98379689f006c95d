"""
Maven program argument assembly.

Builds the argument string handed to Maven's own command-line parser. The
layout is a compatibility contract with Maven's CLI:

    <-D properties> <-P profiles> -B [-X -e] [-o] [-U] [-N]
    [-Dmaven.test.skip=true -DskipTests] [--threads n] [-s settings]
    <goals> <extension tokens>

Every token is preceded by exactly one space.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from mvnlaunch.core.config.models import GlobalPreferences
from mvnlaunch.core.launch.arguments import property_token, quote
from mvnlaunch.core.launch.errors import ConfigurationError
from mvnlaunch.core.launch.models import LaunchConfiguration

logger = logging.getLogger(__name__)

_VARIABLE_RE = re.compile(r"\$\{([^}]*)\}")
_WHITESPACE_RE = re.compile(r"\s+")


def substitute_variables(value: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Resolve ``${...}`` variables in a property value.

    Supports ``${env_var:NAME}`` and the shorthand ``${NAME}``, both read
    from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigurationError: If a variable is unknown or undefined

    Example:
        >>> substitute_variables("${env_var:HOME}/.m2", {"HOME": "/home/dev"})
        '/home/dev/.m2'
    """
    env = os.environ if environ is None else environ

    def _replace(match: re.Match[str]) -> str:
        expression = match.group(1)
        kind, sep, argument = expression.partition(":")
        if not sep:
            key = kind
        elif kind == "env_var":
            key = argument
        else:
            raise ConfigurationError(f"Unknown variable type '{kind}' in '{value}'")
        if key not in env:
            raise ConfigurationError(f"Variable '{key}' is not defined (in '{value}')")
        return env[key]

    return _VARIABLE_RE.sub(_replace, value)


def parse_property(entry: str) -> tuple[str, str | None]:
    """
    Split a ``name[=value]`` entry.

    A missing ``=`` or an empty value both mean "no value".

    Raises:
        ConfigurationError: If the name part is empty
    """
    name, sep, value = entry.partition("=")
    if not name:
        raise ConfigurationError(f"Property '{entry}' has no name")
    if not sep or not value:
        return name, None
    return name, value


class ProgramArgumentBuilder:
    """
    Composes Maven program arguments from a launch configuration.

    Output depends only on the configuration, the global preferences, the
    environment used for variable substitution and whether the global
    settings file exists.

    Example:
        >>> builder = ProgramArgumentBuilder()
        >>> builder.build(LaunchConfiguration(goals="verify", offline=True))
        ' -B -o verify'
    """

    def __init__(
        self,
        preferences: GlobalPreferences | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._preferences = preferences or GlobalPreferences()
        self._environ = environ

    def property_tokens(self, configuration: LaunchConfiguration) -> list[str]:
        """``-D`` tokens for configured properties, then the ``-P`` token."""
        tokens: list[str] = []
        for entry in configuration.properties:
            name, value = parse_property(entry)
            if value is not None:
                value = substitute_variables(value, self._environ)
            tokens.append(property_token(name, value))

        profiles = configuration.profiles
        if profiles is not None and profiles.strip():
            tokens.append("-P" + _WHITESPACE_RE.sub(",", profiles.strip()))
        return tokens

    def preference_tokens(self, configuration: LaunchConfiguration) -> list[str]:
        """Batch mode and the flag-style options, in Maven CLI order."""
        tokens = ["-B"]

        debug_output = configuration.debug_output
        if debug_output is None:
            debug_output = self._preferences.debug_output
        if debug_output:
            tokens += ["-X", "-e"]

        offline = configuration.offline
        if offline is None:
            offline = self._preferences.offline
        if offline:
            tokens.append("-o")

        if configuration.update_snapshots:
            tokens.append("-U")
        if configuration.non_recursive:
            tokens.append("-N")
        if configuration.skip_tests:
            tokens += ["-Dmaven.test.skip=true", "-DskipTests"]
        if configuration.threads > 1:
            tokens.append(f"--threads {configuration.threads}")

        settings = self.resolve_settings_file(configuration)
        if settings is not None:
            tokens.append(f"-s {quote(settings)}")
        return tokens

    def resolve_settings_file(self, configuration: LaunchConfiguration) -> str | None:
        """
        Pick the settings.xml to pass with ``-s``.

        A per-launch setting is trusted verbatim. Otherwise the global
        preference is used, but only if the file it names exists.
        """
        settings = configuration.user_settings
        if settings is None or not settings.strip():
            settings = self._preferences.user_settings_file
            if settings and settings.strip() and not Path(settings.strip()).exists():
                logger.debug("Ignoring missing global settings file %s", settings)
                settings = None

        if settings and settings.strip():
            return settings
        return None

    def build(self, configuration: LaunchConfiguration, extra: Sequence[str] = ()) -> str:
        """
        Build the full program argument string.

        Args:
            configuration: Launch configuration
            extra: Extension-contributed tokens, appended last

        Raises:
            ConfigurationError: If a property entry is invalid
        """
        tokens = self.property_tokens(configuration) + self.preference_tokens(configuration)
        result = "".join(" " + token for token in tokens)
        if configuration.goals:
            result += " " + configuration.goals
        result += "".join(" " + token for token in extra)
        return result


__all__ = [
    "ProgramArgumentBuilder",
    "parse_property",
    "substitute_variables",
]
