"""Charge operations the host calls on the Stripe payment method.

Every operation makes exactly one call on the remote client and returns its
``GatewayResult`` as is. A declined charge is ``success=False``, not an
exception; deciding what to tell the buyer is the host's job.
"""

from __future__ import annotations

from typing import Any

from ..logging_config import get_logger
from .amounts import localize_amount
from .base import (
    GatewayClient,
    GatewayOptions,
    GatewayPreferences,
    GatewayResult,
    Payment,
    PaymentSource,
)
from .profiles import ProfileIds, ProfileManager, address_block
from .sources import PaymentObject, RawCard, resolve_source

logger = get_logger(__name__)


class StripeGateway:
    method_type = "stripe"
    partial_name = "stripe"
    payment_profiles_supported = True

    def __init__(self, client: GatewayClient, preferences: GatewayPreferences) -> None:
        self.client = client
        self.preferences = preferences
        self.profiles = ProfileManager(client, preferences)

    @property
    def secret_key(self) -> str:
        return self.preferences.secret_key

    @property
    def publishable_key(self) -> str:
        return self.preferences.publishable_key

    def purchase(self, money: int, source: PaymentSource, options: GatewayOptions) -> GatewayResult:
        amount, payment_object, charge_options = self._purchase_or_auth_args(money, source, options)
        logger.info(
            "gateway_purchase",
            order_id=options.order_id,
            amount=amount,
            currency=options.currency,
            payment_object=type(payment_object).__name__,
        )
        return self._log_result("purchase", self.client.purchase(amount, payment_object, charge_options))

    def authorize(self, money: int, source: PaymentSource, options: GatewayOptions) -> GatewayResult:
        amount, payment_object, charge_options = self._purchase_or_auth_args(money, source, options)
        logger.info(
            "gateway_authorize",
            order_id=options.order_id,
            amount=amount,
            currency=options.currency,
            payment_object=type(payment_object).__name__,
        )
        return self._log_result("authorize", self.client.authorize(amount, payment_object, charge_options))

    def capture(self, money: int, response_code: str, options: GatewayOptions) -> GatewayResult:
        amount = localize_amount(money, options.currency)
        logger.info("gateway_capture", reference=response_code, amount=amount, currency=options.currency)
        client_options = self._client_options(currency=options.currency)
        return self._log_result("capture", self.client.capture(amount, response_code, client_options))

    def credit(
        self,
        money: int,
        source: PaymentSource | None,
        response_code: str,
        options: GatewayOptions,
    ) -> GatewayResult:
        amount = localize_amount(money, options.currency)
        logger.info("gateway_credit", reference=response_code, amount=amount, currency=options.currency)
        client_options = self._client_options(currency=options.currency)
        return self._log_result("credit", self.client.refund(amount, response_code, client_options))

    def void(
        self,
        response_code: str,
        source: PaymentSource | None = None,
        options: GatewayOptions | None = None,
    ) -> GatewayResult:
        logger.info("gateway_void", reference=response_code)
        return self._log_result("void", self.client.void(response_code, self._client_options()))

    def cancel(self, response_code: str) -> GatewayResult:
        logger.info("gateway_cancel", reference=response_code)
        return self._log_result("cancel", self.client.void(response_code, self._client_options()))

    def create_profile(self, payment: Payment) -> ProfileIds:
        return self.profiles.ensure_profile(payment)

    def _purchase_or_auth_args(
        self, money: int, source: PaymentSource, options: GatewayOptions
    ) -> tuple[int, PaymentObject, dict[str, Any]]:
        amount = localize_amount(money, options.currency)
        charge_options = self._client_options(
            description=options.description or f"Order ID: {options.order_id}",
            currency=options.currency,
        )
        payment_object = resolve_source(source)
        if isinstance(payment_object, RawCard) and options.billing_address is not None:
            charge_options["address"] = address_block(options.billing_address)
        return amount, payment_object, charge_options

    def _client_options(self, **extra: Any) -> dict[str, Any]:
        # every remote call authenticates with the configured secret key
        return {"login": self.secret_key, **extra}

    @staticmethod
    def _log_result(operation: str, result: GatewayResult) -> GatewayResult:
        if result.success:
            logger.info("gateway_result", operation=operation, authorization=result.authorization)
        else:
            logger.warning("gateway_declined", operation=operation, message=result.message)
        return result


__all__ = ["StripeGateway"]
