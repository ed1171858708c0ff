import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Never reach Stripe from the test suite
os.environ["PAYMENTS_MODE"] = "mock"
os.environ.pop("STRIPE_SECRET_KEY", None)

from cardgate.app.payments.base import (  # noqa: E402
    Address,
    Country,
    GatewayOptions,
    GatewayPreferences,
    Order,
    Payment,
    PaymentSource,
    State,
)
from cardgate.app.payments.factory import get_gateway, get_gateway_client  # noqa: E402
from cardgate.app.payments.gateway import StripeGateway  # noqa: E402
from cardgate.app.payments.mock import MockGatewayClient  # noqa: E402

SECRET_KEY = "sk_test_secret"
PUBLISHABLE_KEY = "pk_test_publishable"


@pytest.fixture(autouse=True)
def reset_factory_caches():
    get_gateway.cache_clear()
    get_gateway_client.cache_clear()
    yield
    get_gateway.cache_clear()
    get_gateway_client.cache_clear()


@pytest.fixture
def preferences() -> GatewayPreferences:
    return GatewayPreferences(secret_key=SECRET_KEY, publishable_key=PUBLISHABLE_KEY)


@pytest.fixture
def client() -> MockGatewayClient:
    return MockGatewayClient()


@pytest.fixture
def gateway(client: MockGatewayClient, preferences: GatewayPreferences) -> StripeGateway:
    return StripeGateway(client, preferences)


@pytest.fixture
def raw_card_source() -> PaymentSource:
    return PaymentSource(
        card_brand="Visa",
        number="4242424242424242",
        month=12,
        year=2030,
        verification_value="123",
        name="Ana Mammadova",
    )


@pytest.fixture
def bill_address() -> Address:
    return Address(
        address1="28 May St",
        address2="Apt 4",
        city="Baku",
        zipcode="AZ1000",
        country=Country(name="Azerbaijan"),
        state=State(name="Absheron"),
    )


@pytest.fixture
def order(bill_address: Address) -> Order:
    return Order(number="R123456789", email="buyer@example.com", bill_address=bill_address)


@pytest.fixture
def payment(order: Order, raw_card_source: PaymentSource) -> Payment:
    return Payment(order=order, source=raw_card_source)


@pytest.fixture
def usd_options() -> GatewayOptions:
    return GatewayOptions(order_id="R123456789", currency="USD")


@pytest.fixture
def jpy_options() -> GatewayOptions:
    return GatewayOptions(order_id="R987654321", currency="JPY")
