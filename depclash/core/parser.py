"""Package specifier parser.

Turns a Python-style specifier such as ``django>=3.2,<4.0`` into a
:class:`PackageSpecifier`. The name is the leading run of
``[A-Za-z0-9_-]`` characters; the rest of the string is the constraint.
Python operator tokens are rewritten into the comparator grammar of
:class:`VersionRequirement` before parsing:

====== ======
Python Result
====== ======
``>=`` ``>=``
``<=`` ``<=``
``==`` ``=``
``~=`` ``~``
``!=`` ``!``
====== ======

``!`` has no comparator equivalent, so any ``!=`` clause is rejected as an
invalid requirement.

Typical usage::

    >>> spec = parse_specifier("django==3.2.0")
    >>> spec.name, str(spec.requirement)
    ('django', '=3.2.0')
"""

from __future__ import annotations

import re
from typing import Tuple

from depclash.utils import get_logger
from depclash.models import ANY_VERSION, PackageSpecifier, VersionRequirement
from depclash.constants import OPERATOR_TRANSLATIONS, PACKAGE_NAME_PATTERN
from depclash.exceptions import (
    InvalidFormatError,
    InvalidRequirementError,
    InvalidVersionError,
)

logger = get_logger("parser")

SPECIFIER_PATTERN = re.compile(rf"({PACKAGE_NAME_PATTERN})(.*)")


def split_specifier(raw: str) -> Tuple[str, str]:
    """Split ``raw`` into the package name and the remaining constraint text.

    Args:
        raw: Specifier string, e.g. ``"requests>=2.0.0"``.

    Returns:
        ``(name, version_str)``; ``version_str`` is empty when no
        constraint follows the name.

    Raises:
        InvalidFormatError: ``raw`` does not start with a package name.
    """
    match = SPECIFIER_PATTERN.fullmatch(raw)
    if not match:
        raise InvalidFormatError(
            f"Invalid package format: {raw}",
            specifier=raw,
        )
    return match.group(1), match.group(2)


def translate_operators(version_str: str) -> str:
    """Rewrite Python operator tokens into comparator syntax."""
    translated = version_str
    for python_op, comparator_op in OPERATOR_TRANSLATIONS:
        translated = translated.replace(python_op, comparator_op)
    return translated


def parse_specifier(raw: str) -> PackageSpecifier:
    """Parse a ``name + constraint`` string into a :class:`PackageSpecifier`.

    Args:
        raw: Specifier string, e.g. ``"numpy~=1.20"``.

    Returns:
        The parsed specifier. A bare name yields an unconstrained
        requirement.

    Raises:
        InvalidFormatError: No leading package name.
        InvalidRequirementError: The constraint is not a valid requirement.
    """
    name, version_str = split_specifier(raw)

    if not version_str:
        logger.debug("Parsed %r: %s (unconstrained)", raw, name)
        return PackageSpecifier(name=name, requirement=ANY_VERSION, raw=raw)

    translated = translate_operators(version_str)
    try:
        requirement = VersionRequirement.parse(translated)
    except InvalidVersionError as exc:
        logger.debug("Rejected requirement %r for %s: %s", translated, name, exc)
        raise InvalidRequirementError(
            f"Invalid version requirement: {version_str}",
            specifier=raw,
            requirement=translated,
        ) from exc

    logger.debug("Parsed %r: %s %s", raw, name, requirement)
    return PackageSpecifier(name=name, requirement=requirement, raw=raw)
