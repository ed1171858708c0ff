from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from .base import GatewayResult


@dataclass
class RecordedCall:
    operation: str
    args: tuple[Any, ...]
    options: dict[str, Any]


@dataclass
class MockGatewayClient:
    """Toy client that approves everything unless told otherwise.

    ``failures`` maps an operation name to the decline message it should
    answer with. Every call is kept in ``calls``.
    """

    failures: dict[str, str] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)

    def purchase(self, amount: int, payment_object: Any, options: dict[str, Any]) -> GatewayResult:
        return self._respond("purchase", (amount, payment_object), options, prefix="ch")

    def authorize(self, amount: int, payment_object: Any, options: dict[str, Any]) -> GatewayResult:
        return self._respond("authorize", (amount, payment_object), options, prefix="ch")

    def capture(self, amount: int, reference: str, options: dict[str, Any]) -> GatewayResult:
        return self._respond("capture", (amount, reference), options, reference=reference)

    def refund(self, amount: int, reference: str, options: dict[str, Any]) -> GatewayResult:
        return self._respond("refund", (amount, reference), options, prefix="re")

    def void(self, reference: str, options: dict[str, Any]) -> GatewayResult:
        return self._respond("void", (reference,), options, prefix="re")

    def store(self, payment_object: Any, options: dict[str, Any]) -> GatewayResult:
        self.calls.append(RecordedCall("store", (payment_object,), dict(options)))
        if "store" in self.failures:
            return GatewayResult(success=False, message=self.failures["store"])
        customer_id = f"cus_mock_{uuid4().hex[:12]}"
        card_id = f"card_mock_{uuid4().hex[:12]}"
        return GatewayResult(
            success=True,
            authorization=customer_id,
            message="Customer stored",
            params={"id": customer_id, "default_source": card_id, "email": options.get("email")},
        )

    def operations(self) -> list[str]:
        return [call.operation for call in self.calls]

    def _respond(
        self,
        operation: str,
        args: tuple[Any, ...],
        options: dict[str, Any],
        *,
        prefix: str = "ch",
        reference: str | None = None,
    ) -> GatewayResult:
        self.calls.append(RecordedCall(operation, args, dict(options)))
        if operation in self.failures:
            return GatewayResult(success=False, message=self.failures[operation])
        txn_id = reference or f"{prefix}_mock_{uuid4().hex[:12]}"
        return GatewayResult(
            success=True,
            authorization=txn_id,
            message="Transaction approved",
            params={"id": txn_id, "operation": operation, "options": dict(options)},
        )


__all__ = ["MockGatewayClient", "RecordedCall"]
