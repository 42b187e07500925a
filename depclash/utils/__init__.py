"""
Utility helpers for depclash.

- Logging configuration and retrieval
- Console output helpers (Rich-based)

Console helpers are imported from :mod:`depclash.utils.console` directly,
since they depend on :mod:`depclash.models`.
"""

from __future__ import annotations

from depclash.utils.logger import (
    disable_logging,
    get_logger,
    level_for_verbosity,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "disable_logging",
    "level_for_verbosity",
]
