"""
Semantic version data model for depclash.

Versions follow Semantic Versioning 2.0 (https://semver.org/): a numeric
``MAJOR.MINOR.PATCH`` triple with optional pre-release identifiers and
build metadata. Parsing and precedence come from
:class:`semantic_version.Version`; :class:`SemanticVersion` adds the
depclash error type and makes equality ignore build metadata, so that
equality agrees with ordering::

    1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0-rc.1 < 1.0.0
"""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable, Tuple, Union

import semantic_version

from depclash.exceptions import InvalidVersionError


@total_ordering
class SemanticVersion:
    """
    A parsed semantic version.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Pre-release identifiers (empty for a release).
        build: Build metadata identifiers, ignored for precedence.
    """

    __slots__ = ("_version",)

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: Iterable[str] = (),
        build: Iterable[str] = (),
    ) -> None:
        self._version = semantic_version.Version(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=tuple(prerelease),
            build=tuple(build),
        )

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """
        Parse a full ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` version string.

        Args:
            text: Version string, surrounding whitespace allowed.

        Returns:
            Parsed version.

        Raises:
            InvalidVersionError: If ``text`` is not a semantic version.
        """
        try:
            parsed = semantic_version.Version(text.strip())
        except ValueError as exc:
            raise InvalidVersionError(
                f"Invalid semantic version: {text!r}",
                version=text,
            ) from exc

        return cls(
            parsed.major,
            parsed.minor,
            parsed.patch,
            parsed.prerelease,
            parsed.build,
        )

    @property
    def major(self) -> int:
        return self._version.major

    @property
    def minor(self) -> int:
        return self._version.minor

    @property
    def patch(self) -> int:
        return self._version.patch

    @property
    def prerelease(self) -> Tuple[str, ...]:
        return tuple(self._version.prerelease)

    @property
    def build(self) -> Tuple[str, ...]:
        return tuple(self._version.build)

    @property
    def release(self) -> Tuple[int, int, int]:
        """The numeric ``(major, minor, patch)`` triple."""
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self._version.prerelease)

    def _key(self) -> Tuple[int, int, int, Tuple[str, ...]]:
        return self.release + (self.prerelease,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._version < other._version

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"SemanticVersion('{self}')"

    def __str__(self) -> str:
        return str(self._version)


VersionLike = Union[str, SemanticVersion]


def coerce_version(value: VersionLike) -> SemanticVersion:
    """Return ``value`` as a :class:`SemanticVersion`, parsing strings."""
    if isinstance(value, SemanticVersion):
        return value
    return SemanticVersion.parse(value)
