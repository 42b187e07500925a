"""
Console output utilities for depclash using Rich.

This module renders user-facing results of a conflict check. For
diagnostic or debug output, use :mod:`depclash.utils.logger`.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional

from rich.theme import Theme
from rich.console import Console
from rich.markup import escape

from depclash.models import ConflictReport, ConflictResult, PackageSpecifier

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

DEPCLASH_THEME = Theme(
    {
        "success": "green",
        "conflict": "bold red",
        "error": "bold red",
        "warning": "bold yellow",
        "dim": "dim",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return a singleton Rich Console instance."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=DEPCLASH_THEME,
                    no_color=not use_color,
                    highlight=False,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the cached console so the next print re-reads ``NO_COLOR``."""
    global _console
    with _console_lock:
        _console = None


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(escape(f"{prefix} {message}"), style="error")


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(escape(f"{prefix} {message}"), style="warning")


# ---------------------------------------------------------------------------
# Conflict report rendering
# ---------------------------------------------------------------------------


def print_analysis_header(first: PackageSpecifier, second: PackageSpecifier) -> None:
    """Print the two specifiers being compared."""
    console = _get_console()
    console.print()
    console.print("Analyzing potential conflicts between:")
    console.print(escape(f"  Package 1: {first.name} {first.requirement}"))
    console.print(escape(f"  Package 2: {second.name} {second.requirement}"))
    console.print()


def print_report(report: ConflictReport) -> None:
    """Print the finding of a conflict check.

    Args:
        report: Result of :func:`depclash.core.check_conflict`.
    """
    console = _get_console()

    if report.result is ConflictResult.DIFFERENT_PACKAGES:
        console.print("No conflict: Different packages", style="success")
    elif report.result is ConflictResult.CONFLICT:
        console.print("CONFLICT DETECTED!", style="conflict")
        console.print("The version requirements are mutually exclusive.")
    else:
        console.print("No conflict detected", style="success")
        console.print("The version requirements are compatible.")
