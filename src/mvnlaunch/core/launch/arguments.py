"""
Process (VM) argument accumulation.

VMArguments collects the tokens that control the launched JVM in the order
they are appended. Nothing is reordered or deduplicated: when the same
``-D`` name appears twice the JVM reads them left to right and the last one
wins.
"""

from __future__ import annotations

import re

from mvnlaunch.core.launch.errors import FrozenStateError

# Backslash is not in the set: Windows paths quote the same on every host
_NEEDS_QUOTING_RE = re.compile(r"[\s\"'&|;<>()$`*?]")


def quote(value: str) -> str:
    """
    Quote a value for the Maven/JVM command line.

    The value is returned unchanged unless it is empty or contains
    whitespace or a shell-significant character, in which case it is
    wrapped in double quotes with embedded double quotes escaped.

    Example:
        >>> quote("bar baz")
        '"bar baz"'
        >>> quote("/opt/maven")
        '/opt/maven'
    """
    if value and _NEEDS_QUOTING_RE.search(value) is None:
        return value
    return '"' + value.replace('"', '\\"') + '"'


def split_arguments(text: str) -> list[str]:
    """
    Split an argument string into argv entries, undoing :func:`quote`.

    Whitespace separates arguments outside double quotes. Inside double
    quotes ``\\"`` is a literal quote. Backslashes and single quotes are
    otherwise ordinary characters, and an unterminated quote runs to the
    end of the string.

    Example:
        >>> split_arguments('-Dfoo="bar baz" -Duser.name=O\\'Neil')
        ['-Dfoo=bar baz', "-Duser.name=O'Neil"]
    """
    arguments: list[str] = []
    current: list[str] = []
    in_argument = False
    in_quotes = False
    i = 0
    while i < len(text):
        char = text[i]
        if in_quotes:
            if char == "\\" and text.startswith('"', i + 1):
                current.append('"')
                i += 1
            elif char == '"':
                in_quotes = False
            else:
                current.append(char)
        elif char.isspace():
            if in_argument:
                arguments.append("".join(current))
                current = []
                in_argument = False
        elif char == '"':
            in_quotes = True
            in_argument = True
        else:
            current.append(char)
            in_argument = True
        i += 1

    if in_argument:
        arguments.append("".join(current))
    return arguments


def property_token(name: str, value: str | None = None) -> str:
    """Render a ``-D`` token, quoting the value when needed."""
    if value is None:
        return f"-D{name}"
    return f"-D{name}={quote(value)}"


class VMArguments:
    """
    Ordered, append-only list of process argument tokens.

    The list freezes the first time it is serialized; later appends raise
    FrozenStateError.

    Example:
        >>> args = VMArguments()
        >>> args.append("-Xmx512m")
        >>> args.append_property("foo", "bar baz")
        >>> args.to_final_string()
        '-Xmx512m -Dfoo="bar baz"'
    """

    def __init__(self, tokens: list[str] | None = None) -> None:
        self._tokens: list[str] = list(tokens or [])
        self._final: str | None = None

    @property
    def frozen(self) -> bool:
        """Whether the arguments have been serialized."""
        return self._final is not None

    @property
    def tokens(self) -> tuple[str, ...]:
        """Appended tokens in emission order."""
        return tuple(self._tokens)

    def _check_mutable(self) -> None:
        if self._final is not None:
            raise FrozenStateError("VM arguments were already serialized and cannot change")

    def append(self, token: str) -> None:
        """Append a raw token verbatim."""
        self._check_mutable()
        self._tokens.append(token)

    def extend(self, tokens: list[str] | tuple[str, ...]) -> None:
        """Append several raw tokens, in order."""
        self._check_mutable()
        self._tokens.extend(tokens)

    def append_property(self, name: str, value: str | None = None) -> None:
        """Append ``-D<name>`` or ``-D<name>=<quoted value>``."""
        self._check_mutable()
        self._tokens.append(property_token(name, value))

    def to_final_string(self) -> str:
        """Join all tokens with single spaces and freeze the list."""
        if self._final is None:
            self._final = " ".join(self._tokens)
        return self._final

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        state = "frozen" if self.frozen else "open"
        return f"VMArguments({self._tokens!r}, {state})"


__all__ = ["VMArguments", "property_token", "quote", "split_arguments"]
