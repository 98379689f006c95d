"""
Maven runtime version parsing and range matching.

Versions are dotted numeric releases with an optional qualifier
(``3.3.0-beta``). Range membership compares the numeric release only, so a
qualifier never moves a version across a bound: ``3.3.0-alpha`` is a 3.3
runtime as far as launch behavior is concerned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from mvnlaunch.core.launch.errors import InvalidVersionSpecError

_RELEASE_RE = re.compile(r"^(\d+(?:\.\d+)*)(.*)$")


@total_ordering
@dataclass(frozen=True, eq=False)
class ArtifactVersion:
    """
    A parsed runtime version.

    Attributes:
        release: Leading numeric components, as written
        qualifier: Everything after the numeric part, without the leading
            separator. Not used for ordering.

    Trailing zero components do not affect comparisons, so ``3.3`` equals
    ``3.3.0``.
    """

    release: tuple[int, ...]
    qualifier: str = ""

    @classmethod
    def parse(cls, version: str) -> ArtifactVersion:
        """
        Parse a version string.

        Strings without a leading number have an empty release and sort
        below every numbered release.

        Example:
            >>> ArtifactVersion.parse("3.3.0-beta")
            ArtifactVersion(release=(3, 3, 0), qualifier='beta')
        """
        text = version.strip()
        match = _RELEASE_RE.match(text)
        if match is None:
            return cls((), text)

        numbers = tuple(int(part) for part in match.group(1).split("."))
        return cls(numbers, match.group(2).lstrip("-."))

    @property
    def _key(self) -> tuple[int, ...]:
        numbers = list(self.release)
        while numbers and numbers[-1] == 0:
            numbers.pop()
        return tuple(numbers)

    @property
    def major(self) -> int | None:
        """Major version number, or None when the version has no numeric part."""
        return self.release[0] if self.release else None

    @property
    def has_release(self) -> bool:
        return bool(self.release)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArtifactVersion):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ArtifactVersion):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)


@dataclass(frozen=True)
class VersionRange:
    """
    A single Maven-style version range such as ``[3.3,)``.

    Build instances with :meth:`parse`; a malformed specification raises
    immediately so no half-built range can ever answer a query.
    """

    spec: str
    lower: ArtifactVersion | None
    lower_inclusive: bool
    upper: ArtifactVersion | None
    upper_inclusive: bool

    @classmethod
    def parse(cls, spec: str) -> VersionRange:
        """
        Parse a range specification.

        Supported forms: ``[low,high]``, ``[low,)``, ``(low,high)``,
        ``(,high]`` and an exact ``[v]``. A bare version without brackets
        is taken as the exact range ``[v,v]``.

        Raises:
            InvalidVersionSpecError: If the specification is malformed
        """
        text = spec.strip()
        if not text:
            raise InvalidVersionSpecError(spec, "empty specification")

        if text[0] not in "[(":
            exact = cls._bound(spec, text)
            return cls(spec, exact, True, exact, True)

        if text[-1] not in "])":
            raise InvalidVersionSpecError(spec, "missing closing bracket")

        lower_inclusive = text[0] == "["
        upper_inclusive = text[-1] == "]"
        inner = text[1:-1]

        if "," not in inner:
            if not (lower_inclusive and upper_inclusive):
                raise InvalidVersionSpecError(spec, "single version must use []")
            exact = cls._bound(spec, inner)
            return cls(spec, exact, True, exact, True)

        low_text, _, high_text = inner.partition(",")
        if "," in high_text:
            raise InvalidVersionSpecError(spec, "only a single range is supported")

        lower = cls._bound(spec, low_text) if low_text.strip() else None
        upper = cls._bound(spec, high_text) if high_text.strip() else None
        if lower is None and upper is None:
            raise InvalidVersionSpecError(spec, "range has no bounds")
        if lower is None and lower_inclusive:
            raise InvalidVersionSpecError(spec, "unbounded lower side must use (")
        if upper is None and upper_inclusive:
            raise InvalidVersionSpecError(spec, "unbounded upper side must use )")
        if lower is not None and upper is not None and upper < lower:
            raise InvalidVersionSpecError(spec, "lower bound exceeds upper bound")

        return cls(spec, lower, lower_inclusive, upper, upper_inclusive)

    @staticmethod
    def _bound(spec: str, text: str) -> ArtifactVersion:
        version = ArtifactVersion.parse(text)
        if not version.has_release:
            raise InvalidVersionSpecError(spec, f"'{text.strip()}' is not a version")
        return version

    def contains_version(self, version: str | ArtifactVersion) -> bool:
        """Check whether a version falls inside this range."""
        if isinstance(version, str):
            version = ArtifactVersion.parse(version)

        if self.lower is not None:
            if version < self.lower or (version == self.lower and not self.lower_inclusive):
                return False
        if self.upper is not None:
            if version > self.upper or (version == self.upper and not self.upper_inclusive):
                return False
        return True

    def __str__(self) -> str:
        return self.spec


# Runtimes that read .mvn/jvm.config and need maven.multiModuleProjectDirectory
MAVEN_33_PLUS = VersionRange.parse("[3.3,)")


__all__ = ["ArtifactVersion", "MAVEN_33_PLUS", "VersionRange"]
