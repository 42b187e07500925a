"""
Unified data model exports for depclash.

Example:
    >>> from depclash.models import PackageSpecifier, VersionRequirement
"""

from __future__ import annotations

from depclash.models.version import SemanticVersion
from depclash.models.requirement import (
    ANY_VERSION,
    Comparator,
    Op,
    VersionRequirement,
)
from depclash.models.package import PackageSpecifier
from depclash.models.conflict import ConflictReport, ConflictResult

__all__ = [
    "SemanticVersion",
    "Op",
    "Comparator",
    "VersionRequirement",
    "ANY_VERSION",
    "PackageSpecifier",
    "ConflictResult",
    "ConflictReport",
]
