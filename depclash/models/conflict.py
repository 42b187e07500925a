"""
Conflict check result models for depclash.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from depclash.models.package import PackageSpecifier
from depclash.models.version import SemanticVersion


class ConflictResult(str, Enum):
    """Finding of a conflict check between two specifiers."""

    DIFFERENT_PACKAGES = "different_packages"
    NO_CONFLICT = "no_conflict"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class ConflictReport:
    """
    Outcome of checking two specifiers against each other.

    Attributes:
        first: First specifier as given.
        second: Second specifier as given.
        result: The finding.
        witness: First probe version accepted by both requirements, set
            only when ``result`` is ``NO_CONFLICT``.
    """

    first: PackageSpecifier
    second: PackageSpecifier
    result: ConflictResult
    witness: Optional[SemanticVersion] = None

    @property
    def has_conflict(self) -> bool:
        return self.result is ConflictResult.CONFLICT

    def to_log_dict(self) -> Dict[str, Any]:
        """Return a flat summary for debug logging."""
        return {
            "first": str(self.first),
            "second": str(self.second),
            "result": self.result.value,
            "witness": str(self.witness) if self.witness else None,
        }
