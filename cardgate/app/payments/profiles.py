"""Remote customer profiles for stored cards.

A source gets at most one remote customer: once
``gateway_customer_profile_id`` is set, ``ensure_profile`` returns the ids it
already has without calling the gateway. The check is local to the source
object, so two concurrent requests for the same fresh source can still both
create a customer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..logging_config import get_logger
from .base import Address, GatewayClient, GatewayPreferences, Order, Payment, PaymentSource
from .exceptions import GatewayRejection

logger = get_logger(__name__)

CARD_BRAND_MAPPING = {
    "American Express": "american_express",
    "Diners Club": "diners_club",
    "Visa": "visa",
}


@dataclass(frozen=True)
class ProfileIds:
    customer_id: str | None
    payment_profile_id: str | None
    created: bool = False


def map_card_brand(brand: str | None) -> str | None:
    """Translate a host card brand into the gateway's vocabulary."""
    if brand is None:
        return None
    return CARD_BRAND_MAPPING.get(brand, brand)


def address_block(address: Address) -> dict[str, Any]:
    block: dict[str, Any] = {
        "address1": address.address1,
        "address2": address.address2,
        "city": address.city,
        "zip": address.zipcode,
    }
    if address.country is not None:
        block["country"] = address.country.name
    if address.state is not None:
        block["state"] = address.state.name
    return block


def address_for(order: Order) -> dict[str, Any]:
    if order.bill_address is None:
        return {}
    return {"address": address_block(order.bill_address)}


class ProfileManager:
    def __init__(self, client: GatewayClient, preferences: GatewayPreferences) -> None:
        self.client = client
        self.preferences = preferences

    def store_options(self, order: Order) -> dict[str, Any]:
        options: dict[str, Any] = {
            "email": order.email,
            "login": self.preferences.secret_key,
        }
        options.update(address_for(order))
        return options

    @staticmethod
    def payment_object_for(source: PaymentSource) -> str | PaymentSource:
        if not source.has_raw_card and source.gateway_payment_profile_id:
            return source.gateway_payment_profile_id
        return source

    def ensure_profile(self, payment: Payment) -> ProfileIds:
        source = payment.source
        if source.gateway_customer_profile_id is not None:
            return ProfileIds(
                customer_id=source.gateway_customer_profile_id,
                payment_profile_id=source.gateway_payment_profile_id,
            )

        options = self.store_options(payment.order)

        # The remapped brand stays on the source even if the store fails.
        source.card_brand = map_card_brand(source.card_brand)
        payment_object = self.payment_object_for(source)

        log = logger.bind(order_id=payment.order.number, card_brand=source.card_brand)
        log.info("profile_store", last_digits=source.last_digits)
        result = self.client.store(payment_object, options)

        if not result.success:
            log.warning("profile_store_failed", message=result.message)
            raise GatewayRejection(
                result.message,
                result=result,
                details={"order_id": payment.order.number},
            )

        source.gateway_customer_profile_id = result.params.get("id")
        source.gateway_payment_profile_id = result.params.get(
            "default_source"
        ) or result.params.get("default_card")
        log.info(
            "profile_stored",
            customer_id=source.gateway_customer_profile_id,
            payment_profile_id=source.gateway_payment_profile_id,
        )
        return ProfileIds(
            customer_id=source.gateway_customer_profile_id,
            payment_profile_id=source.gateway_payment_profile_id,
            created=True,
        )


__all__ = [
    "CARD_BRAND_MAPPING",
    "ProfileIds",
    "ProfileManager",
    "address_block",
    "address_for",
    "map_card_brand",
]
