"""
Command-line interface for depclash.

This module provides the CLI entry point: it parses options, loads
configuration, runs the specifier parser and conflict detector, and
renders the finding.

Exit codes:
    0   A finding was reported (including a conflict)
    1   A specifier or configuration could not be parsed, or an
        unexpected error occurred
    2   Usage error (Click)
    130 Interrupted by user (Ctrl+C)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from depclash.config import load_config
from depclash.__version__ import __version__
from depclash.core import check_conflict, parse_specifier
from depclash.exceptions import DepClashError, InvalidVersionError
from depclash.models import SemanticVersion
from depclash.utils.logger import get_logger, level_for_verbosity, setup_logging
from depclash.utils.console import (
    print_analysis_header,
    print_error,
    print_report,
    print_warning,
    reconfigure_console,
)

logger = get_logger("cli")


def _parse_probes(
    ctx: click.Context,
    param: click.Parameter,
    values: Tuple[str, ...],
) -> Tuple[SemanticVersion, ...]:
    """Parse repeated --probe values into versions."""
    versions = []
    for value in values:
        try:
            versions.append(SemanticVersion.parse(value))
        except InvalidVersionError as exc:
            raise click.BadParameter(
                f"{value!r} is not a MAJOR.MINOR.PATCH version",
                ctx=ctx,
                param=param,
            ) from exc
    return tuple(versions)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--pkg1",
    "-1",
    required=True,
    help='First package with version constraint (e.g., "requests>=2.0.0").',
)
@click.option(
    "--pkg2",
    "-2",
    required=True,
    help='Second package with version constraint (e.g., "requests<3.0.0").',
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="DEPCLASH_CONFIG",
)
@click.option(
    "--normalize-names",
    is_flag=True,
    help="Treat names equal under PEP 503 normalization as the same package.",
)
@click.option(
    "--probe",
    "probes",
    multiple=True,
    metavar="VERSION",
    callback=_parse_probes,
    help="Additional version to probe (repeatable).",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="DEPCLASH_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="depclash",
    message="%(prog)s %(version)s",
)
def cli(
    pkg1: str,
    pkg2: str,
    config: Optional[Path],
    normalize_names: bool,
    probes: Tuple[SemanticVersion, ...],
    verbose: int,
    color: bool,
) -> None:
    """Detect whether two package version constraints can both be satisfied.

    \b
    Examples:
      depclash --pkg1 "requests>=2.0.0" --pkg2 "requests<3.0.0"
      depclash -1 "django>=4.0.0" -2 "django<3.0.0"
      depclash -v -1 "numpy~=1.20" -2 "numpy<2" --probe 1.24.0
    """
    setup_logging(level=level_for_verbosity(verbose), verbose=verbose >= 2)

    # Respect NO_COLOR for the console and downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    loaded_config = load_config(config)

    logger.debug("depclash v%s", __version__)
    logger.debug("Config path: %s", loaded_config.source_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())

    normalize_names = normalize_names or loaded_config.normalize_names
    extra_probes = loaded_config.extra_probe_versions + probes

    first = parse_specifier(pkg1)
    second = parse_specifier(pkg2)

    print_analysis_header(first, second)

    report = check_conflict(
        first,
        second,
        normalize_names=normalize_names,
        extra_probes=extra_probes,
    )
    logger.info("Result: %s", report.result.value)
    logger.debug("Report: %s", report.to_log_dict())

    print_report(report)


def main() -> int:
    """Main entry point for the depclash CLI.

    Returns:
        Process exit code (see module docstring).
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except DepClashError as exc:
        print_error(str(exc))
        logger.debug(
            "DepClashError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
