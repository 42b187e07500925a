"""Probe-based conflict detection between two package specifiers.

Two requirements for the same package are treated as compatible when at
least one version from a fixed probe set satisfies both. This is a
heuristic, not a range intersection: requirements that only overlap
between probe versions (``>=1.1.0, <1.2.0`` against ``>=1.1.5``) are
reported as conflicting. Extra probe versions can be supplied to cover
such ranges.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from depclash.utils import get_logger
from depclash.constants import DEFAULT_PROBE_VERSIONS
from depclash.models import (
    ConflictReport,
    ConflictResult,
    PackageSpecifier,
    SemanticVersion,
)

logger = get_logger("detector")

#: Parsed probe versions, tried in this order.
PROBE_VERSIONS: Tuple[SemanticVersion, ...] = tuple(
    SemanticVersion.parse(version) for version in DEFAULT_PROBE_VERSIONS
)


def find_witness(
    first: PackageSpecifier,
    second: PackageSpecifier,
    probes: Iterable[SemanticVersion] = PROBE_VERSIONS,
) -> Optional[SemanticVersion]:
    """Return the first probe version accepted by both requirements.

    Names are not compared here.

    Args:
        first: First specifier.
        second: Second specifier.
        probes: Candidate versions in the order they should be tried.

    Returns:
        The first version satisfying both requirements, or ``None``.
    """
    for version in probes:
        if first.requirement.matches(version) and second.requirement.matches(version):
            return version
    return None


def packages_conflict(
    first: PackageSpecifier,
    second: PackageSpecifier,
    probes: Iterable[SemanticVersion] = PROBE_VERSIONS,
) -> bool:
    """Return True if no probe version satisfies both specifiers.

    Specifiers for different packages never conflict.
    """
    if first.name != second.name:
        return False
    return find_witness(first, second, probes) is None


def check_conflict(
    first: PackageSpecifier,
    second: PackageSpecifier,
    *,
    normalize_names: bool = False,
    extra_probes: Sequence[SemanticVersion] = (),
) -> ConflictReport:
    """Check two specifiers and classify the outcome.

    Args:
        first: First specifier.
        second: Second specifier.
        normalize_names: Treat names equal under PEP 503 normalization as
            the same package.
        extra_probes: Versions tried after the built-in probe set.

    Returns:
        A :class:`ConflictReport`. Differing names short-circuit to
        ``DIFFERENT_PACKAGES`` without probing.
    """
    if not first.same_package(second, normalize=normalize_names):
        logger.debug("Different packages: %s vs %s", first.name, second.name)
        return ConflictReport(first, second, ConflictResult.DIFFERENT_PACKAGES)

    witness = find_witness(first, second, PROBE_VERSIONS + tuple(extra_probes))
    if witness is None:
        logger.debug(
            "No probe version satisfies both %s and %s",
            first.requirement,
            second.requirement,
        )
        return ConflictReport(first, second, ConflictResult.CONFLICT)

    logger.debug("Version %s satisfies both requirements", witness)
    return ConflictReport(first, second, ConflictResult.NO_CONFLICT, witness)
