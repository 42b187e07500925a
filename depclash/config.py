"""Configuration file loader for depclash.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``depclash.toml``: settings under ``[depclash]`` table
- ``pyproject.toml``: settings under ``[tool.depclash]`` table

Discovery order:

1. Explicit path from ``--config`` or ``DEPCLASH_CONFIG``
2. ``depclash.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.depclash]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``depclash.toml``)::

    [depclash]
    normalize_names = true
    extra_probe_versions = ["1.1.5", "2.31.0"]
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from depclash.models import SemanticVersion
from depclash.utils.logger import get_logger
from depclash.exceptions import ConfigError, InvalidVersionError
from depclash.constants import CONFIG_FILE_NAME, DEFAULT_NORMALIZE_NAMES

logger = get_logger("config")


@dataclass
class DepClashConfig:
    """Parsed and validated depclash configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        normalize_names: Compare package names after PEP 503 normalization,
            so ``Django`` and ``django`` count as the same package.
        extra_probe_versions: Versions probed after the built-in set.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    normalize_names: bool = DEFAULT_NORMALIZE_NAMES
    extra_probe_versions: Tuple[SemanticVersion, ...] = ()

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "normalize_names": self.normalize_names,
            "extra_probe_versions": [str(v) for v in self.extra_probe_versions],
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_depclash_section(pyproject_toml):
        logger.debug("Found [tool.depclash] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_depclash_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.depclash]`` section.

    An unreadable pyproject.toml is treated as having no section.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return "depclash" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> DepClashConfig:
    """Load and validate depclash configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`DepClashConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return DepClashConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("depclash", {})
    else:
        section = raw.get("depclash", {})

    if not section:
        logger.debug("Config file found but no depclash section, using defaults")
        return DepClashConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> DepClashConfig:
    """Validate the ``[depclash]`` or ``[tool.depclash]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or malformed versions.
    """
    config = DepClashConfig()

    known_top = {
        "normalize_names",
        "extra_probe_versions",
    }

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "normalize_names" in section:
        val = section["normalize_names"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"normalize_names must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="normalize_names",
            )
        config.normalize_names = val

    if "extra_probe_versions" in section:
        config.extra_probe_versions = parse_probe_versions(
            section["extra_probe_versions"],
            config_path=config_path,
        )

    return config


def parse_probe_versions(
    values: Any,
    *,
    config_path: Optional[str] = None,
) -> Tuple[SemanticVersion, ...]:
    """Parse a list of probe version strings.

    Args:
        values: Raw value; must be a list of strings.
        config_path: Path string for error messages.

    Returns:
        Parsed versions in the given order.

    Raises:
        ConfigError: ``values`` is not a list of valid semantic versions.
    """
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ConfigError(
            "extra_probe_versions must be a list of strings",
            config_path=config_path,
            option="extra_probe_versions",
        )

    versions: List[SemanticVersion] = []
    for value in values:
        try:
            versions.append(SemanticVersion.parse(value))
        except InvalidVersionError as exc:
            raise ConfigError(
                f"Invalid probe version {value!r}: expected MAJOR.MINOR.PATCH",
                config_path=config_path,
                option="extra_probe_versions",
            ) from exc
    return tuple(versions)
