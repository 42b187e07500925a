from __future__ import annotations

import io
import logging
from typing import Generator
from unittest.mock import patch

import pytest

from depclash.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    level_for_verbosity,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the depclash logger before and after each test."""
    root_logger = logging.getLogger("depclash")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    yield
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


def _record(level: int = logging.WARNING, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("depclash.test", level, __file__, 1, msg, None, None)


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_plain_when_color_disabled(self) -> None:
        """Test no escape codes are emitted with use_color=False."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "WARNING: hello"

    def test_colored_on_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the level name is wrapped in ANSI codes on a terminal."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch("sys.stderr.isatty", return_value=True):
            output = formatter.format(_record(logging.ERROR))

        assert output == "\033[31mERROR\033[0m: hello"

    def test_record_not_mutated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test coloring leaves the record's level name intact."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)
        formatter = ColoredFormatter("%(levelname)s")
        record = _record(logging.INFO)

        with patch("sys.stderr.isatty", return_value=True):
            formatter.format(record)

        assert record.levelname == "INFO"

    @pytest.mark.parametrize("env_var", ["NO_COLOR", "CI"])
    def test_env_disables_color(self, env_var: str, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test NO_COLOR and CI suppress colors even on a terminal."""
        monkeypatch.setenv(env_var, "1")
        formatter = ColoredFormatter("%(levelname)s")

        with patch("sys.stderr.isatty", return_value=True):
            assert formatter.format(_record()) == "WARNING"


@pytest.mark.unit
class TestLevelForVerbosity:
    """Tests for level_for_verbosity."""

    @pytest.mark.parametrize(
        "verbose, level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        """Test -v counts map to logging levels."""
        assert level_for_verbosity(verbose) == level


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_to_stream(self) -> None:
        """Test messages at or above the level reach the stream."""
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        get_logger("parser").info("parsed")
        get_logger("parser").debug("hidden")

        assert stream.getvalue() == "INFO: parsed\n"

    def test_repeated_calls_keep_single_handler(self) -> None:
        """Test reconfiguring replaces the handler."""
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("depclash").handlers) == 1

    def test_verbose_format(self) -> None:
        """Test verbose mode includes the logger name."""
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, verbose=True, stream=stream)

        get_logger("detector").debug("probe")

        assert "depclash.detector - DEBUG - probe" in stream.getvalue()


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "depclash"),
            ("depclash", "depclash"),
            ("cli", "depclash.cli"),
            ("depclash.core.parser", "depclash.core.parser"),
        ],
    )
    def test_namespacing(self, name, expected: str) -> None:
        """Test loggers live under the depclash hierarchy."""
        assert get_logger(name).name == expected

    def test_null_handler_when_unconfigured(self) -> None:
        """Test library use installs a NullHandler on the root logger."""
        get_logger("cli")

        handlers = logging.getLogger("depclash").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


@pytest.mark.unit
class TestDisableLogging:
    """Tests for disable_logging."""

    def test_silences_output(self) -> None:
        """Test no output is produced after disabling."""
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        disable_logging()

        get_logger("cli").warning("ignored")

        assert stream.getvalue() == ""
