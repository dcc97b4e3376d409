"""Tests for pt-BR formatting helpers."""

from datetime import date

import pytest

from cltcalc.sdk.formatting import amount_in_words, format_currency, format_date, format_percent


class TestFormatCurrency:
    @pytest.mark.parametrize("amount,expected", [
        (0, "R$ 0,00"),
        (1234.5, "R$ 1.234,50"),
        (1000000, "R$ 1.000.000,00"),
        (-3000, "-R$ 3.000,00"),
        (0.004, "R$ 0,00"),
    ])
    def test_brazilian_separators(self, amount, expected):
        assert format_currency(amount) == expected


class TestFormatDate:
    def test_date(self):
        assert format_date(date(2024, 2, 9)) == "09/02/2024"

    def test_iso_string(self):
        assert format_date("2024-12-31") == "31/12/2024"

    def test_empty(self):
        assert format_date(None) == ""


class TestFormatPercent:
    @pytest.mark.parametrize("rate,expected", [(0.075, "7,5%"), (0.14, "14%"), (0.0, "0%"), (0.275, "27,5%")])
    def test_trims_zeros(self, rate, expected):
        assert format_percent(rate) == expected


class TestAmountInWords:
    """Tests for spelling amounts out in reais."""

    @pytest.mark.parametrize("amount,expected", [
        (0, "zero reais"),
        (1, "um real"),
        (100, "cem reais"),
        (101, "cento e um reais"),
        (15, "quinze reais"),
        (1000, "mil reais"),
        (2500, "dois mil e quinhentos reais"),
        (1250.5, "mil e duzentos e cinquenta reais e cinquenta centavos"),
        (0.01, "um centavo"),
    ])
    def test_words(self, amount, expected):
        assert amount_in_words(amount) == expected

    def test_rounds_to_cents_before_spelling(self):
        """Fractions of a cent carry into reais instead of reading 'cem centavos'."""
        assert amount_in_words(1.999) == "dois reais"
        assert amount_in_words(0.004) == "zero reais"

    def test_negative_amount(self):
        assert amount_in_words(-5.5) == "menos cinco reais e cinquenta centavos"
