from __future__ import annotations

from functools import lru_cache

from ..settings import settings
from .base import GatewayClient, GatewayPreferences
from .gateway import StripeGateway
from .mock import MockGatewayClient
from .stripe_client import StripeClient


def get_preferences() -> GatewayPreferences:
    return GatewayPreferences(
        secret_key=settings.secret_key,
        publishable_key=settings.publishable_key,
    )


@lru_cache(maxsize=1)
def get_gateway_client() -> GatewayClient:
    if not settings.live_mode:
        return MockGatewayClient()

    if not settings.secret_key:
        raise RuntimeError("STRIPE_SECRET_KEY is not set. Set PAYMENTS_MODE=mock to use the mock gateway.")

    return StripeClient(login=settings.secret_key, timeout=settings.STRIPE_API_TIMEOUT_SECONDS)


@lru_cache(maxsize=1)
def get_gateway() -> StripeGateway:
    return StripeGateway(get_gateway_client(), get_preferences())
