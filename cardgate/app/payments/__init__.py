"""Stripe card gateway: amount scaling, source resolution, profiles and charges."""

from .amounts import localize_amount
from .base import (
    Address,
    Country,
    GatewayClient,
    GatewayOptions,
    GatewayPreferences,
    GatewayResult,
    Order,
    Payment,
    PaymentSource,
    State,
)
from .exceptions import GatewayError, GatewayRejection, GatewayValidationError, TransportFailure
from .factory import get_gateway, get_gateway_client
from .gateway import StripeGateway
from .profiles import ProfileIds, ProfileManager, map_card_brand
from .sources import CustomerCardPair, PaymentObject, RawCard, Token, resolve_source

__all__ = [
    "Address",
    "Country",
    "CustomerCardPair",
    "GatewayClient",
    "GatewayError",
    "GatewayOptions",
    "GatewayPreferences",
    "GatewayRejection",
    "GatewayResult",
    "GatewayValidationError",
    "Order",
    "Payment",
    "PaymentObject",
    "PaymentSource",
    "ProfileIds",
    "ProfileManager",
    "RawCard",
    "State",
    "StripeGateway",
    "Token",
    "TransportFailure",
    "get_gateway",
    "get_gateway_client",
    "localize_amount",
    "map_card_brand",
    "resolve_source",
]
