"""Test structured logging and error payloads."""

import structlog
from cardgate.app.logging_config import add_app_context, configure_structlog, get_logger
from cardgate.app.payments.exceptions import (
    GatewayError,
    GatewayRejection,
    GatewayValidationError,
    TransportFailure,
)
from cardgate.app.payments.gateway import StripeGateway
from cardgate.app.payments.mock import MockGatewayClient
from cardgate.app.settings import settings
from structlog.testing import capture_logs


def test_add_app_context():
    event = add_app_context(None, "info", {"event": "gateway_purchase"})
    assert event["service"] == "cardgate"
    assert "environment" in event
    assert event["version"] == "0.1.0"


def test_configure_structlog_json_output():
    configure_structlog(json_logs=True)
    try:
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_app_context in processors
    finally:
        structlog.reset_defaults()


def test_configure_structlog_console_in_debug(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    monkeypatch.setattr(settings, "LOG_JSON", False)
    configure_structlog()
    try:
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()


def test_get_logger_binds_context():
    with capture_logs() as logs:
        get_logger("cardgate.test").bind(order_id="R1").info("gateway_purchase", amount=300000)
    assert logs == [{"event": "gateway_purchase", "order_id": "R1", "amount": 300000, "log_level": "info"}]


def test_raw_card_number_is_not_logged(preferences, payment, usd_options):
    gateway = StripeGateway(MockGatewayClient(), preferences)
    with capture_logs() as logs:
        gateway.create_profile(payment)
        gateway.purchase(1000, payment.source, usd_options)

    assert logs
    assert all("4242424242424242" not in repr(entry) for entry in logs)
    store_event = next(entry for entry in logs if entry["event"] == "profile_store")
    assert store_event["last_digits"] == "4242"


def test_declines_are_logged_as_warnings(preferences, raw_card_source, usd_options):
    gateway = StripeGateway(MockGatewayClient(failures={"purchase": "Declined"}), preferences)
    with capture_logs() as logs:
        gateway.purchase(1000, raw_card_source, usd_options)

    declined = [entry for entry in logs if entry["event"] == "gateway_declined"]
    assert declined[0]["log_level"] == "warning"
    assert declined[0]["message"] == "Declined"


def test_error_hierarchy_and_payload():
    for cls in (GatewayRejection, GatewayValidationError, TransportFailure):
        assert issubclass(cls, GatewayError)

    error = TransportFailure("Could not connect", details={"operation": "purchase"})
    assert error.to_dict() == {
        "error": "GATEWAY_TRANSPORT_FAILURE",
        "message": "Could not connect",
        "details": {"operation": "purchase"},
    }
    assert str(error) == "Could not connect"
    assert GatewayRejection("no").error_code == "GATEWAY_REJECTION"
