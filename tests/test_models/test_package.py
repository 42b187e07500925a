"""Unit tests for depclash.models.package."""

from __future__ import annotations

import dataclasses

import pytest

from depclash.models.package import PackageSpecifier
from depclash.models.requirement import ANY_VERSION, VersionRequirement


@pytest.mark.unit
class TestPackageSpecifier:
    """Tests for PackageSpecifier."""

    def test_defaults_to_unconstrained(self) -> None:
        """Test a specifier without a requirement matches any version."""
        spec = PackageSpecifier(name="requests")

        assert spec.requirement is ANY_VERSION
        assert spec.is_unconstrained
        assert str(spec) == "requests *"

    def test_is_frozen(self) -> None:
        """Test specifiers cannot be mutated after construction."""
        spec = PackageSpecifier(name="requests")

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.name = "flask"  # type: ignore[misc]

    def test_raw_not_part_of_equality(self) -> None:
        """Test the raw input string does not affect equality."""
        req = VersionRequirement.parse(">=1.0")

        assert PackageSpecifier("pkg", req, raw="pkg>=1.0") == PackageSpecifier(
            "pkg", req, raw="pkg >=1.0"
        )

    @pytest.mark.parametrize(
        "name, canonical",
        [
            ("Django", "django"),
            ("Django_REST-framework", "django-rest-framework"),
            ("zope__interface", "zope-interface"),
        ],
    )
    def test_canonical_name(self, name: str, canonical: str) -> None:
        """Test PEP 503 normalization of the package name."""
        assert PackageSpecifier(name=name).canonical_name == canonical


@pytest.mark.unit
class TestSamePackage:
    """Tests for PackageSpecifier.same_package."""

    def test_exact_comparison_by_default(self) -> None:
        """Test names are compared as written by default."""
        assert PackageSpecifier("django").same_package(PackageSpecifier("django"))
        assert not PackageSpecifier("Django").same_package(PackageSpecifier("django"))

    def test_normalized_comparison(self) -> None:
        """Test normalize=True compares canonical names."""
        first = PackageSpecifier("Typing_Extensions")
        second = PackageSpecifier("typing-extensions")

        assert first.same_package(second, normalize=True)
        assert not first.same_package(PackageSpecifier("typing"), normalize=True)
