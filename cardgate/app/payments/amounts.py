"""Amount scaling at the boundary with the remote client.

The remote client divides every amount in a zero-decimal currency by 100,
assuming it was handed cents. The host hands over the major-unit amount for
those currencies (¥3000 is 3000), so without ``localize_amount`` the charge
would be ¥30. Remove this module once the client stops scaling.
"""

from __future__ import annotations

ZERO_DECIMAL_CURRENCIES = frozenset(
    {
        "BIF",
        "BYR",
        "CLP",
        "CVE",
        "DJF",
        "GNF",
        "HUF",
        "ISK",
        "JPY",
        "KMF",
        "KRW",
        "MGA",
        "PYG",
        "RWF",
        "UGX",
        "VND",
        "VUV",
        "XAF",
        "XOF",
        "XPF",
    }
)


def is_zero_decimal(currency: str | None) -> bool:
    if not currency:
        return False
    return currency.strip().upper() in ZERO_DECIMAL_CURRENCIES


def localize_amount(amount: int, currency: str | None) -> int:
    if is_zero_decimal(currency):
        return amount * 100
    return amount


__all__ = ["ZERO_DECIMAL_CURRENCIES", "is_zero_decimal", "localize_amount"]
