from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .base import PaymentSource

# Anchored at the start of the whole id; a "tok_" after a newline does not count.
TOKEN_PATTERN = re.compile(r"^\w*tok_")


@dataclass(frozen=True)
class Token:
    token: str

    def serialize(self) -> str:
        return self.token


@dataclass(frozen=True)
class CustomerCardPair:
    customer_id: str | None
    card_id: str

    def serialize(self) -> str:
        # Stripe-style "cus_x|card_y"; the client splits it back apart
        return f"{self.customer_id or ''}|{self.card_id}"


@dataclass(frozen=True)
class RawCard:
    source: PaymentSource

    def serialize(self) -> PaymentSource:
        return self.source


PaymentObject = Union[Token, CustomerCardPair, RawCard]


def is_token(value: str | None) -> bool:
    return bool(value) and TOKEN_PATTERN.match(value) is not None  # type: ignore[arg-type]


def resolve_source(source: PaymentSource) -> PaymentObject:
    """Pick what to charge: a one-time token, a stored customer card, or the card itself.

    The checks run in that order, so a token always wins over a customer id.
    """
    profile_id = source.gateway_payment_profile_id
    if is_token(profile_id):
        return Token(profile_id)  # type: ignore[arg-type]
    if profile_id:
        return CustomerCardPair(source.gateway_customer_profile_id, profile_id)
    return RawCard(source)


def serialize_payment_object(payment_object: PaymentObject) -> str | PaymentSource:
    if isinstance(payment_object, (Token, CustomerCardPair, RawCard)):
        return payment_object.serialize()
    raise TypeError(f"Unsupported payment object: {type(payment_object).__name__}")


__all__ = [
    "CustomerCardPair",
    "PaymentObject",
    "RawCard",
    "TOKEN_PATTERN",
    "Token",
    "is_token",
    "resolve_source",
    "serialize_payment_object",
]
