"""Tests for digit extraction."""

from __future__ import annotations

import pytest

from pdvkit.domain.digits import strip_non_digits


class TestStripNonDigits:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("(11) 98765-4321", "11987654321"),
            ("529.982.247-25", "52998224725"),
            ("abc", ""),
            ("", ""),
            ("0a0b1", "001"),
        ],
    )
    def test_strings(self, value: str, expected: str) -> None:
        assert strip_non_digits(value) == expected

    @pytest.mark.parametrize("value", [None, 11987654321, 3.5, ["1"]])
    def test_non_strings_yield_empty(self, value: object) -> None:
        assert strip_non_digits(value) == ""

    def test_non_ascii_digits_dropped(self) -> None:
        assert strip_non_digits("١٢٣45") == "45"
