import pytest
from cardgate.app.payments.amounts import (
    ZERO_DECIMAL_CURRENCIES,
    is_zero_decimal,
    localize_amount,
)


@pytest.mark.parametrize("currency", sorted(ZERO_DECIMAL_CURRENCIES))
def test_zero_decimal_currencies_are_multiplied(currency):
    assert localize_amount(3000, currency) == 300000


@pytest.mark.parametrize("currency", ["USD", "EUR", "GBP", "AZN", "KWD"])
def test_fractional_currencies_pass_through(currency):
    assert localize_amount(1999, currency) == 1999


def test_currency_code_is_case_insensitive():
    assert localize_amount(500, "jpy") == 50000
    assert localize_amount(500, " krw ") == 50000


def test_unknown_or_missing_currency_takes_fractional_path():
    assert localize_amount(1234, "XYZ") == 1234
    assert localize_amount(1234, "") == 1234
    assert localize_amount(1234, None) == 1234


def test_zero_amount_stays_zero():
    assert localize_amount(0, "JPY") == 0


def test_is_zero_decimal():
    assert is_zero_decimal("JPY")
    assert not is_zero_decimal("USD")
    assert not is_zero_decimal(None)
