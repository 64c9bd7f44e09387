"""
Request and response objects exchanged with the Braintree gateway.

Field names map to XML tags by replacing ``_`` with ``-``. Request classes
name their root element in ``xml_root``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .search import SearchQuery

__all__ = [
    "CreditCard",
    "CreditCardOptions",
    "CreditCardSearchResult",
    "SearchResult",
    "Transaction",
    "TransactionCloneOptions",
    "TransactionCloneRequest",
    "TransactionOptions",
    "TransactionRequest",
    "TransactionSearchResult",
]


@dataclass
class CreditCardOptions:
    verify_card: Optional[bool] = None
    make_default: Optional[bool] = None
    fail_on_duplicate_payment_method: Optional[bool] = None
    verification_merchant_account_id: Optional[str] = None
    update_existing_token: Optional[str] = None


@dataclass
class CreditCard:
    xml_root = "credit-card"

    token: Optional[str] = None
    customer_id: Optional[str] = None
    number: Optional[str] = None
    cvv: Optional[str] = None
    expiration_date: Optional[str] = None
    expiration_month: Optional[str] = None
    expiration_year: Optional[str] = None
    cardholder_name: Optional[str] = None
    payment_method_nonce: Optional[str] = None
    card_type: Optional[str] = None
    bin: Optional[str] = None
    last_4: Optional[str] = None
    default: Optional[bool] = None
    expired: Optional[bool] = None
    unique_number_identifier: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    options: Optional[CreditCardOptions] = None

    @property
    def masked_number(self) -> Optional[str]:
        if self.bin is None or self.last_4 is None:
            return None
        return f"{self.bin}******{self.last_4}"


@dataclass
class TransactionOptions:
    submit_for_settlement: Optional[bool] = None
    store_in_vault: Optional[bool] = None
    store_in_vault_on_success: Optional[bool] = None
    hold_in_escrow: Optional[bool] = None
    add_billing_address_to_payment_method: Optional[bool] = None


@dataclass
class TransactionRequest:
    xml_root = "transaction"

    type: Optional[str] = None
    amount: Optional[Decimal] = None
    order_id: Optional[str] = None
    merchant_account_id: Optional[str] = None
    payment_method_token: Optional[str] = None
    payment_method_nonce: Optional[str] = None
    customer_id: Optional[str] = None
    channel: Optional[str] = None
    service_fee_amount: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    tax_exempt: Optional[bool] = None
    credit_card: Optional[CreditCard] = None
    options: Optional[TransactionOptions] = None


@dataclass
class TransactionCloneOptions:
    submit_for_settlement: Optional[bool] = None


@dataclass
class TransactionCloneRequest:
    xml_root = "transaction-clone"

    amount: Optional[Decimal] = None
    channel: Optional[str] = None
    options: Optional[TransactionCloneOptions] = None


@dataclass
class Transaction:
    xml_root = "transaction"

    id: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    currency_iso_code: Optional[str] = None
    amount: Optional[Decimal] = None
    order_id: Optional[str] = None
    merchant_account_id: Optional[str] = None
    customer_id: Optional[str] = None
    payment_method_token: Optional[str] = None
    refunded_transaction_id: Optional[str] = None
    refund_ids: Optional[List[str]] = None
    settlement_batch_id: Optional[str] = None
    escrow_status: Optional[str] = None
    processor_response_code: Optional[str] = None
    processor_response_text: Optional[str] = None
    processor_authorization_code: Optional[str] = None
    service_fee_amount: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    tax_exempt: Optional[bool] = None
    credit_card: Optional[CreditCard] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class SearchResult:
    """The full ordered id list of a search, plus the server's page size."""

    page_size: int
    ids: List[str]

    @property
    def total_items(self) -> int:
        return len(self.ids)


@dataclass
class TransactionSearchResult:
    total_items: int
    total_ids: List[str]
    current_page_number: int
    page_size: int
    transactions: List[Transaction] = field(default_factory=list)
    search_query: Optional["SearchQuery"] = field(default=None, repr=False)


@dataclass
class CreditCardSearchResult:
    total_items: int
    total_ids: List[str]
    current_page_number: int
    page_size: int
    credit_cards: List[CreditCard] = field(default_factory=list)
