"""
Core functionality exports for depclash.

    from depclash.core import parse_specifier, check_conflict
"""

from __future__ import annotations

from depclash.core.parser import (
    parse_specifier,
    split_specifier,
    translate_operators,
)
from depclash.core.detector import (
    PROBE_VERSIONS,
    check_conflict,
    find_witness,
    packages_conflict,
)

__all__ = [
    "parse_specifier",
    "split_specifier",
    "translate_operators",
    "PROBE_VERSIONS",
    "check_conflict",
    "find_witness",
    "packages_conflict",
]
