"""
Transaction operations.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import replace
from decimal import Decimal
from typing import TYPE_CHECKING, Iterator, List, Optional

from . import xmlcodec
from .errors import ResponseParseError
from .models import (
    SearchResult,
    Transaction,
    TransactionCloneRequest,
    TransactionRequest,
    TransactionSearchResult,
)
from .pagination import page_ids
from .search import SearchQuery, parse_search_results

if TYPE_CHECKING:  # pragma: no cover
    from .client import BraintreeGateway

__all__ = ["TransactionGateway"]


class TransactionGateway:
    def __init__(self, gateway: "BraintreeGateway") -> None:
        self.gateway = gateway

    def create(self, request: TransactionRequest) -> Transaction:
        """Initiate a transaction."""
        response = self.gateway.execute("POST", "transactions", request)
        return response.expect(201).transaction()

    def sale(self, request: TransactionRequest) -> Transaction:
        return self.create(replace(request, type="sale"))

    def clone(self, transaction_id: str, request: TransactionCloneRequest) -> Transaction:
        response = self.gateway.execute(
            "POST", f"transactions/{transaction_id}/clone", request
        )
        return response.expect(201).transaction()

    def submit_for_settlement(
        self,
        transaction_id: str,
        amount: Optional[Decimal] = None,
    ) -> Transaction:
        """
        Submit an authorized transaction for settlement.

        When ``amount`` is omitted the full authorized amount is settled.
        """
        body = TransactionRequest(amount=amount) if amount is not None else None
        response = self.gateway.execute(
            "PUT", f"transactions/{transaction_id}/submit_for_settlement", body
        )
        return response.expect(200).transaction()

    def settle(self, transaction_id: str) -> Transaction:
        """Deprecated alias of ``gateway.testing().settle``."""
        warnings.warn(
            "TransactionGateway.settle is deprecated; use gateway.testing().settle",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.gateway.testing().settle(transaction_id)

    def void(self, transaction_id: str) -> Transaction:
        """
        Void an authorized or submitted-for-settlement transaction.

        Braintree reverses the authorization where it can so the customer
        is not left with a pending charge.
        """
        return self._put_action(transaction_id, "void")

    def cancel_release(self, transaction_id: str) -> Transaction:
        """Cancel a pending release from escrow."""
        return self._put_action(transaction_id, "cancel_release")

    def release_from_escrow(self, transaction_id: str) -> Transaction:
        return self._put_action(transaction_id, "release_from_escrow")

    def hold_in_escrow(self, transaction_id: str) -> Transaction:
        return self._put_action(transaction_id, "hold_in_escrow")

    def refund(
        self,
        transaction_id: str,
        amount: Optional[Decimal] = None,
    ) -> Transaction:
        """
        Refund a settled or settling transaction, fully unless ``amount`` is given.

        Transactions that have not begun settling should be voided instead.
        """
        body = TransactionRequest(amount=amount) if amount is not None else None
        response = self.gateway.execute(
            "POST", f"transactions/{transaction_id}/refund", body
        )
        return response.expect(200, 201).transaction()

    def find(self, transaction_id: str) -> Transaction:
        response = self.gateway.execute("GET", f"transactions/{transaction_id}")
        return response.expect(200).transaction()

    def search(self, query: SearchQuery) -> TransactionSearchResult:
        """
        Run ``query`` and return its first page.

        Use :meth:`search_next` for the following pages.
        """
        search_result = self._fetch_ids(query)
        logging.info(
            "Transaction search matched %s ids (page size %s)",
            search_result.total_items,
            search_result.page_size,
        )
        first_page = self._page(query, search_result.ids, search_result.page_size, 1)
        if first_page is None:
            return TransactionSearchResult(
                total_items=search_result.total_items,
                total_ids=search_result.ids,
                current_page_number=1,
                page_size=search_result.page_size,
                search_query=query,
            )
        return first_page

    def search_next(
        self, result: TransactionSearchResult
    ) -> Optional[TransactionSearchResult]:
        """Fetch the page after ``result``, or ``None`` once the ids are exhausted."""
        if result.search_query is None:
            raise ValueError("The search result does not carry its query")
        return self._page(
            result.search_query,
            result.total_ids,
            result.page_size,
            result.current_page_number + 1,
        )

    def search_all(self, query: SearchQuery) -> Iterator[Transaction]:
        page: Optional[TransactionSearchResult] = self.search(query)
        while page is not None:
            yield from page.transactions
            page = self.search_next(page)

    def _put_action(self, transaction_id: str, action: str) -> Transaction:
        response = self.gateway.execute("PUT", f"transactions/{transaction_id}/{action}")
        return response.expect(200).transaction()

    def _page(
        self,
        query: SearchQuery,
        ids: List[str],
        page_size: int,
        page: int,
    ) -> Optional[TransactionSearchResult]:
        selected = page_ids(ids, page, page_size)
        if selected is None:
            return None

        page_query = query.shallow_copy()
        page_query.replace_multi_field("ids", selected)
        return TransactionSearchResult(
            total_items=len(ids),
            total_ids=ids,
            current_page_number=page,
            page_size=page_size,
            transactions=self._fetch_transactions(page_query),
            search_query=query,
        )

    def _fetch_ids(self, query: SearchQuery) -> SearchResult:
        response = self.gateway.execute(
            "POST", "transactions/advanced_search_ids", query
        )
        return parse_search_results(response.expect(200).root())

    def _fetch_transactions(self, query: SearchQuery) -> List[Transaction]:
        response = self.gateway.execute("POST", "transactions/advanced_search", query)
        root = response.expect(200).root()
        if root.tag != "credit-card-transactions":
            raise ResponseParseError(
                f"Expected <credit-card-transactions> in response, got <{root.tag}>"
            )
        return [xmlcodec.decode(Transaction, child) for child in root.findall("transaction")]
