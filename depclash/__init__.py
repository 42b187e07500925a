"""
depclash: heuristic version conflict checker for Python package specifiers

Given two specifiers such as ``requests>=2.0.0`` and ``requests<3.0.0``,
depclash reports whether some version can satisfy both. Satisfiability is
approximated by probing a fixed set of semantic versions, so a
"conflict" verdict means no probe version fits, not that no version
exists.

Example::

    >>> from depclash import parse_specifier, check_conflict
    >>> report = check_conflict(
    ...     parse_specifier("django>=4.0.0"),
    ...     parse_specifier("django<3.0.0"),
    ... )
    >>> report.result
    <ConflictResult.CONFLICT: 'conflict'>
"""

from __future__ import annotations

from depclash.__version__ import __version__
from depclash.core import check_conflict, packages_conflict, parse_specifier
from depclash.models import ConflictReport, ConflictResult, PackageSpecifier

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "depclash Contributors"
__license__ = "Apache-2.0"
__description__ = "Heuristic conflict checks between Python package version specifiers."

__all__ = [
    "__version__",
    "parse_specifier",
    "packages_conflict",
    "check_conflict",
    "PackageSpecifier",
    "ConflictResult",
    "ConflictReport",
]
