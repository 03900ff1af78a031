"""Tests for heading slug generation."""

from __future__ import annotations

import pytest

from mdlite.slugger import Slugger


class TestSerialize:
    """Tests for Slugger.serialize."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Hello, World!", "hello-world"),
            ("  Mixed CASE  ", "mixed-case"),
            ("<em>Tagged</em> title", "tagged-title"),
            ("snake_case-and-dash", "snake_case-and-dash"),
            ("What's new? (2024)", "whats-new-2024"),
            ("Ünïcode Títle", "ünïcode-títle"),
            ("dash—em", "dashem"),
        ],
    )
    def test_normalizes_value(self, value: str, expected: str) -> None:
        assert Slugger.serialize(value) == expected


class TestSlug:
    """Tests for Slugger.slug."""

    def test_repeats_get_numeric_suffix(self) -> None:
        slugger = Slugger()
        assert [slugger.slug("Intro") for _ in range(3)] == ["intro", "intro-1", "intro-2"]

    def test_dry_run_does_not_record(self) -> None:
        slugger = Slugger()

        assert slugger.slug("a", dry_run=True) == "a"
        assert slugger.slug("a") == "a"
        assert slugger.slug("a", dry_run=True) == "a-1"
        assert slugger.slug("a") == "a-1"

    def test_skips_suffix_already_taken(self) -> None:
        slugger = Slugger()

        assert slugger.slug("a-1") == "a-1"
        assert slugger.slug("a") == "a"
        assert slugger.slug("a") == "a-2"

    def test_instances_are_independent(self) -> None:
        first = Slugger()
        first.slug("x")
        assert Slugger().slug("x") == "x"
