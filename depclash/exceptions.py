"""
Custom exception hierarchy for depclash.

This module defines structured exception types used across depclash.
All exceptions inherit from :class:`DepClashError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class DepClashError(Exception):
    """Base exception for all depclash errors.

    All depclash-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ParseError(DepClashError):
    """Raised when a package specifier cannot be parsed.

    Args:
        message: Error description.
        specifier: Raw specifier string that failed to parse.
    """

    __slots__ = ("specifier",)

    def __init__(
        self,
        message: str,
        *,
        specifier: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "specifier", specifier)

        super().__init__(message, details)

        self.specifier = specifier


class InvalidFormatError(ParseError):
    """Raised when a specifier does not start with a package name."""


class InvalidRequirementError(ParseError):
    """Raised when the version constraint of a specifier is not valid.

    Args:
        message: Error description.
        requirement: Constraint text after operator translation.
        **kwargs: Additional arguments forwarded to ``ParseError``.
    """

    __slots__ = ("requirement",)

    def __init__(
        self,
        message: str,
        *,
        requirement: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)

        self.requirement = requirement
        if requirement is not None:
            self.details["requirement"] = requirement


class InvalidVersionError(DepClashError):
    """Raised when a semantic version or comparator is malformed.

    Args:
        message: Error description.
        version: Offending version or comparator text.
    """

    __slots__ = ("version",)

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "version", version)

        super().__init__(message, details)

        self.version = version


class ConfigError(DepClashError):
    """Raised when configuration cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
