"""Tests for display formatters."""

from decimal import Decimal

import pytest

from pdvkit.domain.formatting import capitalize_words, format_order_number, format_price


class TestFormatPrice:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "R$ 0,00"),
            (12.5, "R$ 12,50"),
            (1234.5, "R$ 1.234,50"),
            (1234567.891, "R$ 1.234.567,89"),
            (Decimal("0.005"), "R$ 0,01"),
            ("7", "R$ 7,00"),
            (-1, "-R$ 1,00"),
        ],
    )
    def test_values(self, value: object, expected: str) -> None:
        assert format_price(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (float("nan"), "R$ NaN"),
            (Decimal("NaN"), "R$ NaN"),
            ("abc", "R$ NaN"),
            (float("inf"), "R$ ∞"),
            (float("-inf"), "-R$ ∞"),
            (Decimal("-Infinity"), "-R$ ∞"),
        ],
    )
    def test_non_finite_does_not_raise(self, value: object, expected: str) -> None:
        assert format_price(value) == expected

    def test_amount_beyond_default_precision(self) -> None:
        assert format_price(Decimal("1e30")) == "R$ 1" + ".000" * 10 + ",00"


class TestFormatOrderNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(7, "007"), (42, "042"), (123, "123"), (1234, "1234"), ("5", "005")],
    )
    def test_padding(self, value: object, expected: str) -> None:
        assert format_order_number(value) == expected


class TestCapitalizeWords:
    def test_basic(self) -> None:
        assert capitalize_words("maria DA silva") == "Maria Da Silva"

    def test_keeps_spacing(self) -> None:
        assert capitalize_words("ana  paula") == "Ana  Paula"

    def test_empty(self) -> None:
        assert capitalize_words("") == ""
