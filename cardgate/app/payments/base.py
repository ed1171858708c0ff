from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel, Field


class GatewayResult(BaseModel):
    success: bool
    authorization: str | None = None
    message: str = ""
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return not self.success


class GatewayPreferences(BaseModel):
    secret_key: str = ""
    publishable_key: str = ""


@dataclass(frozen=True)
class Country:
    name: str


@dataclass(frozen=True)
class State:
    name: str


@dataclass(frozen=True)
class Address:
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    zipcode: str | None = None
    country: Country | None = None
    state: State | None = None


@dataclass(frozen=True)
class Order:
    number: str
    email: str | None = None
    bill_address: Address | None = None


@dataclass
class PaymentSource:
    """A stored card as the host keeps it.

    Raw card fields are only populated until the card has been exchanged
    for remote profile ids.
    """

    card_brand: str | None = None
    number: str | None = None
    month: int | None = None
    year: int | None = None
    verification_value: str | None = None
    name: str | None = None
    gateway_customer_profile_id: str | None = None
    gateway_payment_profile_id: str | None = None

    @property
    def has_raw_card(self) -> bool:
        return bool(self.number and self.number.strip())

    @property
    def last_digits(self) -> str | None:
        if not self.has_raw_card:
            return None
        return self.number.strip()[-4:]  # type: ignore[union-attr]


@dataclass(frozen=True)
class Payment:
    order: Order
    source: PaymentSource


@dataclass(frozen=True)
class GatewayOptions:
    order_id: str
    currency: str
    billing_address: Address | None = None
    description: str | None = None


class GatewayClient(Protocol):
    def purchase(self, amount: int, payment_object: Any, options: dict[str, Any]) -> GatewayResult: ...

    def authorize(self, amount: int, payment_object: Any, options: dict[str, Any]) -> GatewayResult: ...

    def capture(self, amount: int, reference: str, options: dict[str, Any]) -> GatewayResult: ...

    def refund(self, amount: int, reference: str, options: dict[str, Any]) -> GatewayResult: ...

    def void(self, reference: str, options: dict[str, Any]) -> GatewayResult: ...

    def store(self, payment_object: Any, options: dict[str, Any]) -> GatewayResult: ...
