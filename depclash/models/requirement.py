"""
Version requirement data model for depclash.

A requirement is an ordered set of comparator clauses combined with AND
semantics. Clauses use the semantic-versioning comparator grammar:

- ``=1.2.3`` exact match (``=1.2`` and ``=1`` match on the parts given)
- ``>1.2``, ``>=1.2.3``, ``<2``, ``<=2.0.0`` ordered comparisons
- ``~1.2.3`` same major.minor, at least the given patch
- ``^1.2.3`` (or a bare ``1.2.3``) same leftmost non-zero component
- ``1.*``, ``1.2.x`` wildcards

Clauses are separated by commas. A requirement with no clauses (text form
``*``) matches every version.

Version numbers, pre-release and build identifiers are validated by
``semantic_version``; this module only splits off the operator and the
wildcard parts and implements the matching rules above.

Example::

    >>> req = VersionRequirement.parse(">=2.0.0, <3.0.0")
    >>> req.matches("2.5.1")
    True
    >>> str(req)
    '>=2.0.0, <3.0.0'
"""

from __future__ import annotations

import re
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

import semantic_version

from depclash.exceptions import InvalidVersionError
from depclash.constants import UNCONSTRAINED_REQUIREMENT
from depclash.models.version import SemanticVersion, VersionLike, coerce_version

# Only literal spaces may separate an operator from its version
OPERATOR_PATTERN = re.compile(r"(?P<op>>=|<=|>|<|=|~|\^)? *")

_SUFFIX_START = re.compile(r"[-+]")

_WILDCARDS = frozenset({"*", "x", "X"})


class Op(str, Enum):
    """Comparator operators."""

    EXACT = "="
    GREATER = ">"
    GREATER_EQ = ">="
    LESS = "<"
    LESS_EQ = "<="
    TILDE = "~"
    CARET = "^"
    WILDCARD = "*"


@dataclass(frozen=True)
class Comparator:
    """
    A single ``operator + version`` clause.

    Attributes:
        op: Comparison operator.
        major: Major version number.
        minor: Minor version number, or ``None`` when omitted.
        patch: Patch version number, or ``None`` when omitted.
        prerelease: Pre-release identifiers (only with a full version).
    """

    op: Op
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "Comparator":
        """
        Parse one comparator clause such as ``>=1.2`` or ``~1.20``.

        Missing minor and patch parts are padded with zeros for
        validation by :class:`semantic_version.Version` and recorded as
        ``None``.

        Args:
            text: Clause text; surrounding spaces are ignored.

        Returns:
            Parsed comparator.

        Raises:
            InvalidVersionError: If the clause is not valid comparator syntax.
        """
        clause = text.strip(" ")
        head = OPERATOR_PATTERN.match(clause)
        op_text = head.group("op")
        version_text = clause[head.end():]

        core = _SUFFIX_START.split(version_text, maxsplit=1)[0]
        suffix = version_text[len(core):]
        parts = core.split(".")
        if len(parts) > 3:
            raise InvalidVersionError(
                f"Invalid version comparator: {clause!r}",
                version=clause,
            )

        if parts[0] in _WILDCARDS:
            raise InvalidVersionError(
                "Wildcard major version is only allowed on its own as '*'",
                version=clause,
            )

        numbers: List[str] = []
        wildcard = False
        for part in parts:
            if part in _WILDCARDS:
                wildcard = True
            elif wildcard:
                raise InvalidVersionError(
                    "Version number cannot follow a wildcard",
                    version=clause,
                )
            else:
                numbers.append(part)

        padded = numbers + ["0"] * (3 - len(numbers))
        try:
            version = semantic_version.Version(".".join(padded) + suffix)
        except ValueError as exc:
            raise InvalidVersionError(
                f"Invalid version comparator: {clause!r}",
                version=clause,
            ) from exc

        if version.prerelease and (wildcard or len(numbers) < 3):
            raise InvalidVersionError(
                "Pre-release requires a full major.minor.patch version",
                version=clause,
            )

        if wildcard:
            if op_text not in (None, "="):
                raise InvalidVersionError(
                    f"Wildcard cannot be combined with operator {op_text!r}",
                    version=clause,
                )
            op = Op.WILDCARD
        elif op_text is None:
            op = Op.CARET
        else:
            op = Op(op_text)

        # Build metadata carries no precedence and is dropped here
        return cls(
            op=op,
            major=version.major,
            minor=version.minor if len(numbers) > 1 else None,
            patch=version.patch if len(numbers) > 2 else None,
            prerelease=tuple(version.prerelease),
        )

    def matches(self, version: SemanticVersion) -> bool:
        """Return True if ``version`` satisfies this clause alone."""
        if self.op in (Op.EXACT, Op.WILDCARD):
            return _matches_exact(self, version)
        if self.op is Op.GREATER:
            return _matches_greater(self, version)
        if self.op is Op.GREATER_EQ:
            return _matches_greater(self, version) or _matches_exact(self, version)
        if self.op is Op.LESS:
            return _matches_less(self, version)
        if self.op is Op.LESS_EQ:
            return _matches_less(self, version) or _matches_exact(self, version)
        if self.op is Op.TILDE:
            return _matches_tilde(self, version)
        return _matches_caret(self, version)

    def allows_prerelease_of(self, version: SemanticVersion) -> bool:
        """True if this clause names ``version``'s release with a pre-release."""
        return (
            bool(self.prerelease)
            and self.major == version.major
            and self.minor == version.minor
            and self.patch == version.patch
        )

    def __str__(self) -> str:
        prefix = "" if self.op is Op.WILDCARD else self.op.value
        text = f"{prefix}{self.major}"
        if self.minor is None:
            return text + ".*" if self.op is Op.WILDCARD else text
        text += f".{self.minor}"
        if self.patch is None:
            return text + ".*" if self.op is Op.WILDCARD else text
        text += f".{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        return text


def _floor(cmp: Comparator, ver: SemanticVersion) -> SemanticVersion:
    # ver's release with cmp's pre-release, for comparing pre-releases alone
    return SemanticVersion(ver.major, ver.minor, ver.patch, cmp.prerelease)


def _matches_exact(cmp: Comparator, ver: SemanticVersion) -> bool:
    if ver.major != cmp.major:
        return False
    if cmp.minor is not None and ver.minor != cmp.minor:
        return False
    if cmp.patch is not None and ver.patch != cmp.patch:
        return False
    return ver.prerelease == cmp.prerelease


def _matches_greater(cmp: Comparator, ver: SemanticVersion) -> bool:
    if ver.major != cmp.major:
        return ver.major > cmp.major
    if cmp.minor is None:
        return False
    if ver.minor != cmp.minor:
        return ver.minor > cmp.minor
    if cmp.patch is None:
        return False
    if ver.patch != cmp.patch:
        return ver.patch > cmp.patch
    return ver > _floor(cmp, ver)


def _matches_less(cmp: Comparator, ver: SemanticVersion) -> bool:
    if ver.major != cmp.major:
        return ver.major < cmp.major
    if cmp.minor is None:
        return False
    if ver.minor != cmp.minor:
        return ver.minor < cmp.minor
    if cmp.patch is None:
        return False
    if ver.patch != cmp.patch:
        return ver.patch < cmp.patch
    return ver < _floor(cmp, ver)


def _matches_tilde(cmp: Comparator, ver: SemanticVersion) -> bool:
    if ver.major != cmp.major:
        return False
    if cmp.minor is not None and ver.minor != cmp.minor:
        return False
    if cmp.patch is not None and ver.patch != cmp.patch:
        return ver.patch > cmp.patch
    return ver >= _floor(cmp, ver)


def _matches_caret(cmp: Comparator, ver: SemanticVersion) -> bool:
    if ver.major != cmp.major:
        return False

    if cmp.minor is None:
        return True

    if cmp.patch is None:
        if cmp.major > 0:
            return ver.minor >= cmp.minor
        return ver.minor == cmp.minor

    if cmp.major > 0:
        if ver.minor != cmp.minor:
            return ver.minor > cmp.minor
        if ver.patch != cmp.patch:
            return ver.patch > cmp.patch
    elif cmp.minor > 0:
        if ver.minor != cmp.minor:
            return False
        if ver.patch != cmp.patch:
            return ver.patch > cmp.patch
    elif ver.minor != cmp.minor or ver.patch != cmp.patch:
        return False

    return ver >= _floor(cmp, ver)


@dataclass(frozen=True)
class VersionRequirement:
    """
    An ordered set of comparator clauses that must all hold.

    Attributes:
        comparators: Clauses in the order they were written. Empty means
            the requirement is unconstrained.
    """

    comparators: Tuple[Comparator, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "VersionRequirement":
        """
        Parse a comma-separated list of comparator clauses.

        The empty string or a lone ``*`` yields the unconstrained
        requirement. Text made only of spaces is an empty clause.

        Args:
            text: Requirement text, e.g. ``">=2.0, <3.0"``.

        Returns:
            Parsed requirement.

        Raises:
            InvalidVersionError: If any clause is malformed or empty.
        """
        if not text or text.strip(" ") in _WILDCARDS:
            return ANY_VERSION

        comparators: List[Comparator] = []
        for clause in text.split(","):
            if not clause.strip(" "):
                raise InvalidVersionError(
                    f"Empty comparator in requirement {text!r}",
                    version=text,
                )
            comparators.append(Comparator.parse(clause))

        return cls(tuple(comparators))

    @property
    def is_unconstrained(self) -> bool:
        return not self.comparators

    def matches(self, version: VersionLike) -> bool:
        """
        Check whether ``version`` satisfies every clause.

        The unconstrained requirement accepts everything. Otherwise a
        pre-release version only matches when some clause names the same
        ``major.minor.patch`` with a pre-release of its own, so ``>=1.0.0``
        does not pick up ``2.0.0-rc.1``.

        Args:
            version: Version string or parsed :class:`SemanticVersion`.

        Returns:
            True if the version is accepted.

        Raises:
            InvalidVersionError: If ``version`` is a malformed string.
        """
        parsed = coerce_version(version)

        if self.is_unconstrained:
            return True

        if not all(cmp.matches(parsed) for cmp in self.comparators):
            return False

        if not parsed.is_prerelease:
            return True

        return any(cmp.allows_prerelease_of(parsed) for cmp in self.comparators)

    def __contains__(self, version: VersionLike) -> bool:
        return self.matches(version)

    def __len__(self) -> int:
        return len(self.comparators)

    def __str__(self) -> str:
        if self.is_unconstrained:
            return UNCONSTRAINED_REQUIREMENT
        return ", ".join(str(cmp) for cmp in self.comparators)


#: Requirement that matches every version.
ANY_VERSION = VersionRequirement()
