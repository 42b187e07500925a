"""
Centralized constants for depclash.

This module defines immutable configuration values used across depclash,
including the probe versions used by the conflict detector, specifier
parsing rules, configuration file names, and logging formats. All values
are intended to be treated as read-only.
"""

from typing import Final, Sequence, Tuple

# ---------------------------------------------------------------------------
# Conflict probing
# ---------------------------------------------------------------------------

#: Candidate versions tested against both requirements, in probe order.
DEFAULT_PROBE_VERSIONS: Final[Sequence[str]] = (
    "0.1.0",
    "1.0.0",
    "2.0.0",
    "3.0.0",
    "4.0.0",
    "5.0.0",
    "6.0.0",
    "7.0.0",
    "1.2.3",
    "2.3.4",
    "3.4.5",
    "4.5.6",
    "5.6.7",
    "1.0.1",
    "2.0.1",
    "3.0.1",
    "4.0.1",
    "5.0.1",
)

# ---------------------------------------------------------------------------
# Specifier parsing
# ---------------------------------------------------------------------------

#: Characters allowed in a package name.
PACKAGE_NAME_PATTERN: Final[str] = r"[A-Za-z0-9_-]+"

#: Python operator tokens and their comparator equivalents, applied in order.
OPERATOR_TRANSLATIONS: Final[Sequence[Tuple[str, str]]] = (
    (">=", ">="),
    ("<=", "<="),
    ("==", "="),
    ("~=", "~"),
    ("!=", "!"),
)

#: Text form of a requirement that matches every version.
UNCONSTRAINED_REQUIREMENT: Final[str] = "*"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file name.
CONFIG_FILE_NAME: Final[str] = "depclash.toml"

#: Compare package names after PEP 503 normalization.
DEFAULT_NORMALIZE_NAMES: Final[bool] = False

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
