from __future__ import annotations

import pytest

from depclash.exceptions import (
    ConfigError,
    DepClashError,
    InvalidFormatError,
    InvalidRequirementError,
    InvalidVersionError,
    ParseError,
)


@pytest.mark.unit
class TestDepClashError:
    """Tests for the base exception."""

    def test_str_without_details(self) -> None:
        """Test the message is returned unchanged without details."""
        assert str(DepClashError("boom")) == "boom"

    def test_str_with_details(self) -> None:
        """Test details are appended as key=value pairs."""
        error = DepClashError("boom", {"a": 1, "b": "x"})

        assert str(error) == "boom (a=1, b=x)"

    def test_repr(self) -> None:
        """Test repr shows the class, message and details."""
        assert repr(DepClashError("boom", {"a": 1})) == (
            "DepClashError(message='boom', details={'a': 1})"
        )


@pytest.mark.unit
class TestParseErrors:
    """Tests for specifier parse errors."""

    def test_invalid_format_details(self) -> None:
        """Test the offending specifier is recorded."""
        error = InvalidFormatError("Invalid package format: @x", specifier="@x")

        assert isinstance(error, ParseError)
        assert error.specifier == "@x"
        assert str(error) == "Invalid package format: @x (specifier=@x)"

    def test_invalid_requirement_details(self) -> None:
        """Test both the specifier and translated requirement are recorded."""
        error = InvalidRequirementError(
            "Invalid version requirement: !=1",
            specifier="pkg!=1",
            requirement="!1",
        )

        assert isinstance(error, ParseError)
        assert error.requirement == "!1"
        assert dict(error.details) == {"specifier": "pkg!=1", "requirement": "!1"}

    def test_none_values_omitted(self) -> None:
        """Test unset metadata does not appear in details."""
        assert InvalidRequirementError("bad").details == {}


@pytest.mark.unit
class TestOtherErrors:
    """Tests for version and configuration errors."""

    def test_invalid_version(self) -> None:
        """Test the offending version is recorded."""
        error = InvalidVersionError("bad version", version="1.x.y")

        assert error.version == "1.x.y"
        assert error.details == {"version": "1.x.y"}

    def test_config_error(self) -> None:
        """Test path and option are recorded."""
        error = ConfigError("bad", config_path="a.toml", option="normalize_names")

        assert isinstance(error, DepClashError)
        assert str(error) == "bad (path=a.toml, option=normalize_names)"
