from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from xml.etree import ElementTree as ET

import pytest

from braintree_client import BraintreeConfig, BraintreeGateway, Environment

MERCHANT_URL = "https://api.sandbox.braintreegateway.com:443/merchants/merchant-123"


@dataclass
class StubResponse:
    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class RecordedRequest:
    method: str
    url: str
    params: Optional[Dict[str, str]]
    data: Optional[bytes]
    headers: Dict[str, str]
    auth: Any
    timeout: Any

    def xml(self) -> ET.Element:
        assert self.data is not None, "request carried no body"
        return ET.fromstring(self.data)


class StubSession:
    """Stands in for ``requests.Session``: replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: List[RecordedRequest] = []
        self._responses: List[StubResponse] = []

    def queue(self, status_code: int, body: str = "") -> None:
        self._responses.append(StubResponse(status_code, body.encode("utf-8")))

    def request(self, method: str, url: str, **kwargs: Any) -> StubResponse:
        self.requests.append(
            RecordedRequest(
                method=method,
                url=url,
                params=kwargs.get("params"),
                data=kwargs.get("data"),
                headers=kwargs.get("headers") or {},
                auth=kwargs.get("auth"),
                timeout=kwargs.get("timeout"),
            )
        )
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        return self._responses.pop(0)


def transaction_xml(transaction_id: str = "txn-1", status: str = "authorized", amount: str = "10.00") -> str:
    return (
        "<transaction>"
        f"<id>{transaction_id}</id>"
        f"<status>{status}</status>"
        "<type>sale</type>"
        "<currency-iso-code>USD</currency-iso-code>"
        f"<amount>{amount}</amount>"
        '<order-id nil="true"/>'
        "</transaction>"
    )


def credit_card_xml(token: str = "card-1", expiration_date: str = "12/2030") -> str:
    return (
        "<credit-card>"
        f"<token>{token}</token>"
        "<card-type>Visa</card-type>"
        "<bin>411111</bin>"
        "<last-4>1111</last-4>"
        f"<expiration-date>{expiration_date}</expiration-date>"
        '<default type="boolean">true</default>'
        "</credit-card>"
    )


def search_results_xml(ids: List[str], page_size: int = 2) -> str:
    items = "".join(f"<item>{item}</item>" for item in ids)
    return (
        "<search-results>"
        f'<page-size type="integer">{page_size}</page-size>'
        f'<ids type="array">{items}</ids>'
        "</search-results>"
    )


def transactions_page_xml(ids: List[str]) -> str:
    body = "".join(transaction_xml(item) for item in ids)
    return f'<credit-card-transactions type="collection">{body}</credit-card-transactions>'


def api_error_xml(message: str) -> str:
    return f"<api-error-response><message>{message}</message><errors/></api-error-response>"


@pytest.fixture
def config() -> BraintreeConfig:
    return BraintreeConfig(
        environment=Environment.SANDBOX,
        merchant_id="merchant-123",
        public_key="public-key",
        private_key="private-key",
        base_url=Environment.SANDBOX.base_url,
    )


@pytest.fixture
def session() -> StubSession:
    return StubSession()


@pytest.fixture
def gateway(config: BraintreeConfig, session: StubSession) -> BraintreeGateway:
    return BraintreeGateway(config, session=session)  # type: ignore[arg-type]
