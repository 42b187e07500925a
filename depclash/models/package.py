"""
Package specifier data model for depclash.

A specifier pairs a package name with the version requirement parsed from
a string such as ``requests>=2.0.0``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from packaging.utils import canonicalize_name

from depclash.models.requirement import ANY_VERSION, VersionRequirement


@dataclass(frozen=True)
class PackageSpecifier:
    """
    An immutable ``name + requirement`` pair.

    Attributes:
        name: Package name exactly as written.
        requirement: Version requirement; unconstrained when none was given.
        raw: Original input string, kept for diagnostics only.
    """

    name: str
    requirement: VersionRequirement = ANY_VERSION
    raw: str = field(default="", compare=False)

    @property
    def canonical_name(self) -> str:
        """PEP 503 normalized name (``Django_REST`` -> ``django-rest``)."""
        return canonicalize_name(self.name)

    @property
    def is_unconstrained(self) -> bool:
        return self.requirement.is_unconstrained

    def same_package(self, other: "PackageSpecifier", *, normalize: bool = False) -> bool:
        """
        Return True if both specifiers name the same package.

        Args:
            other: Specifier to compare against.
            normalize: Compare PEP 503 normalized names instead of the
                names as written.
        """
        if normalize:
            return self.canonical_name == other.canonical_name
        return self.name == other.name

    def __str__(self) -> str:
        return f"{self.name} {self.requirement}"
