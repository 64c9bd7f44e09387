"""
Credit card (payment method) operations.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Dict, List, Optional

from . import xmlcodec
from .models import CreditCard, CreditCardSearchResult, SearchResult
from .pagination import page_ids
from .search import SearchQuery, parse_search_results

if TYPE_CHECKING:  # pragma: no cover
    from .client import BraintreeGateway

__all__ = ["CreditCardGateway", "expiration_params"]


def _month_year(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%m%Y")


def expiration_params(from_date: datetime, to_date: datetime) -> Dict[str, str]:
    """Query string of the expiring endpoints: ``start``/``end`` as ``MMYYYY`` in UTC."""
    return {"start": _month_year(from_date), "end": _month_year(to_date)}


def _token_of(card: CreditCard) -> str:
    if not card.token:
        raise ValueError("The credit card has no token")
    return card.token


class CreditCardGateway:
    def __init__(self, gateway: "BraintreeGateway") -> None:
        self.gateway = gateway

    def create(self, card: CreditCard) -> CreditCard:
        response = self.gateway.execute("POST", "payment_methods", card)
        return response.expect(201).credit_card()

    def update(self, card: CreditCard) -> CreditCard:
        response = self.gateway.execute(
            "PUT", f"payment_methods/{_token_of(card)}", card
        )
        return response.expect(200).credit_card()

    def find(self, token: str) -> CreditCard:
        """Find a credit card by payment method token."""
        response = self.gateway.execute("GET", f"payment_methods/{token}")
        return response.expect(200).credit_card()

    def delete(self, card: CreditCard) -> None:
        response = self.gateway.execute("DELETE", f"payment_methods/{_token_of(card)}")
        response.expect(200)

    def expiring_between_ids(self, from_date: datetime, to_date: datetime) -> SearchResult:
        """
        Find the tokens of cards expiring between two dates.

        Only ids are returned; pass the result to :meth:`expiring_between_page`
        to load the cards one page at a time.
        """
        response = self.gateway.execute(
            "POST",
            "payment_methods/all/expiring_ids",
            params=expiration_params(from_date, to_date),
        )
        return parse_search_results(response.expect(200).root())

    def expiring_between_page(
        self,
        from_date: datetime,
        to_date: datetime,
        search_result: SearchResult,
        page: int,
    ) -> Optional[CreditCardSearchResult]:
        """
        Load page ``page`` (starting at 1) of cards expiring between two dates.

        Returns ``None`` when the page lies past the end of ``search_result``.
        """
        selected = page_ids(search_result.ids, page, search_result.page_size)
        if selected is None:
            return None

        query = SearchQuery()
        query.add_multi_field("ids").items = selected
        return CreditCardSearchResult(
            total_items=search_result.total_items,
            total_ids=search_result.ids,
            current_page_number=page,
            page_size=search_result.page_size,
            credit_cards=self._fetch_expiring_between(query, from_date, to_date),
        )

    def _fetch_expiring_between(
        self,
        query: SearchQuery,
        from_date: datetime,
        to_date: datetime,
    ) -> List[CreditCard]:
        response = self.gateway.execute(
            "POST",
            "payment_methods/all/expiring",
            query,
            params=expiration_params(from_date, to_date),
        )
        root = response.expect(200).root()
        return [xmlcodec.decode(CreditCard, child) for child in root.findall("credit-card")]
