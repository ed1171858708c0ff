"""
Remote client for Stripe charges and customers.

Speaks the Charges/Customers API through a per-instance ``stripe.StripeClient``
(its own HTTP client and timeout, nothing set on the ``stripe`` module) and keeps
the calling convention of a cents-based card gateway: amounts arrive in the
host's cents representation and zero-decimal currencies are divided by 100
before they are sent.

Outcomes:
- approved calls return ``GatewayResult(success=True)`` with the Stripe object
  as ``params``;
- card declines and invalid requests return ``success=False`` with Stripe's
  message;
- connection, authentication, rate-limit and API errors raise
  ``TransportFailure``. Nothing is retried here.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import stripe

from ..logging_config import get_logger
from .amounts import is_zero_decimal
from .base import GatewayResult, PaymentSource
from .exceptions import GatewayValidationError, TransportFailure
from .sources import CustomerCardPair, RawCard, Token, serialize_payment_object

logger = get_logger(__name__)

DEFAULT_CURRENCY = "USD"
APPROVED_MESSAGE = "Transaction approved"

TRANSPORT_ERRORS = (
    stripe.APIConnectionError,
    stripe.AuthenticationError,
    stripe.RateLimitError,
    stripe.APIError,
)


def scale_amount(amount: int, currency: str | None) -> int:
    """Convert cents into what Stripe expects for ``currency``."""
    if is_zero_decimal(currency):
        return round(amount / 100)
    return amount


class StripeClient:
    def __init__(self, login: str = "", *, timeout: float = 10.0) -> None:
        self.login = login
        self.timeout = timeout
        self.sdk = stripe.StripeClient(login, http_client=stripe.RequestsClient(timeout=timeout))

    def purchase(self, amount: int, payment_object: Any, options: dict[str, Any]) -> GatewayResult:
        return self._charge(amount, payment_object, options, capture=True)

    def authorize(self, amount: int, payment_object: Any, options: dict[str, Any]) -> GatewayResult:
        return self._charge(amount, payment_object, options, capture=False)

    def capture(self, amount: int, reference: str, options: dict[str, Any]) -> GatewayResult:
        currency = options.get("currency") or DEFAULT_CURRENCY
        return self._call(
            "capture",
            lambda: self.sdk.v1.charges.capture(
                reference,
                params={"amount": scale_amount(amount, currency)},
                options=self._request_options(options),
            ),
            reference=reference,
        )

    def refund(self, amount: int, reference: str, options: dict[str, Any]) -> GatewayResult:
        currency = options.get("currency") or DEFAULT_CURRENCY
        return self._call(
            "refund",
            lambda: self.sdk.v1.refunds.create(
                params={"charge": reference, "amount": scale_amount(amount, currency)},
                options=self._request_options(options),
            ),
            reference=reference,
        )

    def void(self, reference: str, options: dict[str, Any]) -> GatewayResult:
        # Stripe has no void; refunding the whole charge releases it
        return self._call(
            "void",
            lambda: self.sdk.v1.refunds.create(
                params={"charge": reference}, options=self._request_options(options)
            ),
            reference=reference,
        )

    def store(self, payment_object: Any, options: dict[str, Any]) -> GatewayResult:
        params: dict[str, Any] = {}
        if options.get("email"):
            params["email"] = options["email"]
        if options.get("description"):
            params["description"] = options["description"]
        params.update(self._payment_params(payment_object, options))
        return self._call(
            "store",
            lambda: self.sdk.v1.customers.create(params=params, options=self._request_options(options)),
        )

    def _charge(
        self,
        amount: int,
        payment_object: Any,
        options: dict[str, Any],
        *,
        capture: bool,
    ) -> GatewayResult:
        currency = options.get("currency") or DEFAULT_CURRENCY
        params: dict[str, Any] = {
            "amount": scale_amount(amount, currency),
            "currency": currency.lower(),
            "capture": capture,
        }
        if options.get("description"):
            params["description"] = options["description"]
        params.update(self._payment_params(payment_object, options))
        return self._call(
            "purchase" if capture else "authorize",
            lambda: self.sdk.v1.charges.create(params=params, options=self._request_options(options)),
            amount=params["amount"],
            currency=params["currency"],
        )

    def _request_options(self, options: dict[str, Any]) -> dict[str, Any]:
        return {"api_key": options.get("login") or self.login}

    def _payment_params(self, payment_object: Any, options: dict[str, Any]) -> dict[str, Any]:
        if isinstance(payment_object, (Token, CustomerCardPair, RawCard)):
            payment_object = serialize_payment_object(payment_object)

        if isinstance(payment_object, PaymentSource):
            return {"source": self._card_params(payment_object, options.get("address"))}
        if isinstance(payment_object, str) and payment_object:
            customer, sep, card = payment_object.partition("|")
            if not sep:
                return {"source": payment_object}
            params = {"source": card}
            if customer:
                params["customer"] = customer
            return params
        raise GatewayValidationError(
            "Unsupported payment object",
            details={"type": type(payment_object).__name__},
        )

    @staticmethod
    def _card_params(source: PaymentSource, address: dict[str, Any] | None) -> dict[str, Any]:
        if not source.has_raw_card:
            raise GatewayValidationError("Card number is required to charge a card directly")
        card: dict[str, Any] = {
            "object": "card",
            "number": source.number.strip(),  # type: ignore[union-attr]
            "exp_month": source.month,
            "exp_year": source.year,
            "cvc": source.verification_value,
            "name": source.name,
        }
        if address:
            card.update(
                address_line1=address.get("address1"),
                address_line2=address.get("address2"),
                address_city=address.get("city"),
                address_zip=address.get("zip"),
                address_state=address.get("state"),
                address_country=address.get("country"),
            )
        return {key: value for key, value in card.items() if value is not None}

    def _call(self, operation: str, request: Callable[[], Any], **log_context: Any) -> GatewayResult:
        log = logger.bind(operation=operation, **log_context)
        start_time = time.time()
        try:
            response = request()
        except TRANSPORT_ERRORS as exc:
            duration_ms = (time.time() - start_time) * 1000
            log.error("stripe_transport_failure", error=type(exc).__name__, duration_ms=duration_ms)
            raise TransportFailure(
                exc.user_message or str(exc),
                details={"operation": operation, "error": type(exc).__name__},
            ) from exc
        except stripe.StripeError as exc:
            # card declines, invalid requests
            return self._declined(log, exc, start_time)

        duration_ms = (time.time() - start_time) * 1000
        params = response.to_dict()
        if params.get("status") == "failed":
            message = params.get("failure_message") or "Transaction failed"
            log.warning("stripe_declined", message=message, duration_ms=duration_ms)
            return GatewayResult(success=False, authorization=params.get("id"), message=message, params=params)

        log.info("stripe_completed", reference=params.get("id"), duration_ms=duration_ms)
        return GatewayResult(
            success=True,
            authorization=params.get("id"),
            message=APPROVED_MESSAGE,
            params=params,
        )

    @staticmethod
    def _declined(log: Any, exc: stripe.StripeError, start_time: float) -> GatewayResult:
        duration_ms = (time.time() - start_time) * 1000
        message = exc.user_message or str(exc)
        log.warning("stripe_declined", message=message, code=exc.code, duration_ms=duration_ms)
        error: dict[str, Any] = {"type": type(exc).__name__, "code": exc.code, "message": message}
        decline_code = getattr(exc, "decline_code", None)
        if decline_code:
            error["decline_code"] = decline_code
        return GatewayResult(success=False, message=message, params={"error": error})


__all__ = ["StripeClient", "scale_amount"]
