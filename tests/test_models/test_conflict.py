"""Unit tests for depclash.models.conflict."""

from __future__ import annotations

import pytest

from depclash.models import (
    ConflictReport,
    ConflictResult,
    PackageSpecifier,
    SemanticVersion,
    VersionRequirement,
)


@pytest.fixture
def pair() -> tuple:
    first = PackageSpecifier("requests", VersionRequirement.parse(">=2.0.0"))
    second = PackageSpecifier("requests", VersionRequirement.parse("<3.0.0"))
    return first, second


@pytest.mark.unit
class TestConflictResult:
    """Tests for the ConflictResult enum."""

    def test_members(self) -> None:
        """Test the three findings exist with stable values."""
        assert {r.value for r in ConflictResult} == {
            "different_packages",
            "no_conflict",
            "conflict",
        }


@pytest.mark.unit
class TestConflictReport:
    """Tests for ConflictReport."""

    def test_has_conflict(self, pair) -> None:
        """Test has_conflict is True only for CONFLICT."""
        first, second = pair

        assert ConflictReport(first, second, ConflictResult.CONFLICT).has_conflict
        assert not ConflictReport(first, second, ConflictResult.NO_CONFLICT).has_conflict
        assert not ConflictReport(
            first, second, ConflictResult.DIFFERENT_PACKAGES
        ).has_conflict

    def test_to_log_dict_with_witness(self, pair) -> None:
        """Test log summary includes the witness version."""
        first, second = pair
        report = ConflictReport(
            first,
            second,
            ConflictResult.NO_CONFLICT,
            witness=SemanticVersion.parse("2.0.0"),
        )

        assert report.to_log_dict() == {
            "first": "requests >=2.0.0",
            "second": "requests <3.0.0",
            "result": "no_conflict",
            "witness": "2.0.0",
        }

    def test_to_log_dict_without_witness(self, pair) -> None:
        """Test witness is None when no version was found."""
        first, second = pair
        report = ConflictReport(first, second, ConflictResult.CONFLICT)

        assert report.to_log_dict()["witness"] is None
