"""
Sandbox-only state transitions used when testing an integration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import TestOperationPerformedInProductionError
from .models import Transaction

if TYPE_CHECKING:  # pragma: no cover
    from .client import BraintreeGateway

__all__ = ["TestingGateway"]


class TestingGateway:
    __test__ = False

    def __init__(self, gateway: "BraintreeGateway") -> None:
        self.gateway = gateway

    def settle(self, transaction_id: str) -> Transaction:
        return self._transition(transaction_id, "settle")

    def settlement_confirm(self, transaction_id: str) -> Transaction:
        return self._transition(transaction_id, "settlement_confirm")

    def settlement_decline(self, transaction_id: str) -> Transaction:
        return self._transition(transaction_id, "settlement_decline")

    def settlement_pending(self, transaction_id: str) -> Transaction:
        return self._transition(transaction_id, "settlement_pending")

    def _transition(self, transaction_id: str, action: str) -> Transaction:
        if self.gateway.config.is_production:
            raise TestOperationPerformedInProductionError()
        response = self.gateway.execute("PUT", f"transactions/{transaction_id}/{action}")
        return response.expect(200).transaction()
