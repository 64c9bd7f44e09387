"""
HTTP plumbing shared by the per-resource gateways.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from xml.etree import ElementTree as ET

import requests

from . import xmlcodec
from .config import BraintreeConfig, Environment
from .credit_cards import CreditCardGateway
from .errors import InvalidResponseError, ResponseParseError
from .models import CreditCard, Transaction
from .testing import TestingGateway
from .transactions import TransactionGateway

__all__ = [
    "API_VERSION",
    "BraintreeGateway",
    "BraintreeResponse",
    "VERSION",
]

VERSION = "0.1.0"
API_VERSION = "4"


@dataclass(frozen=True)
class BraintreeResponse:
    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict, repr=False)

    def root(self) -> ET.Element:
        return xmlcodec.loads(self.body)

    def _decode_root(self, cls: Any) -> Any:
        root = self.root()
        if root.tag != cls.xml_root:
            raise ResponseParseError(
                f"Expected <{cls.xml_root}> in response, got <{root.tag}>"
            )
        return xmlcodec.decode(cls, root)

    def transaction(self) -> Transaction:
        return self._decode_root(Transaction)

    def credit_card(self) -> CreditCard:
        return self._decode_root(CreditCard)

    def api_error_message(self) -> Optional[str]:
        """Return the ``<message>`` of an ``<api-error-response>`` body, if any."""
        if not self.body or not self.body.strip():
            return None
        try:
            root = self.root()
        except ResponseParseError:
            return None
        if root.tag != "api-error-response":
            return None
        return root.findtext("message")

    def expect(self, *status_codes: int) -> "BraintreeResponse":
        """Return ``self`` when the status is one of ``status_codes``, else raise."""
        if self.status_code in status_codes:
            return self
        error = InvalidResponseError(self)
        logging.warning("Braintree returned an unexpected response: %s", error)
        raise error


class BraintreeGateway:
    """
    Entry point to the Braintree API for one merchant.

    Resource gateways returned by :meth:`transaction`, :meth:`credit_card`
    and :meth:`testing` share this object's session and configuration.
    """

    def __init__(
        self,
        config: BraintreeConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    @property
    def environment(self) -> Environment:
        return self.config.environment

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/xml",
            "Accept-Encoding": "gzip",
            "Content-Type": "application/xml",
            "User-Agent": f"Braintree Python client {VERSION}",
            "X-ApiVersion": API_VERSION,
        }

    def url_for(self, path: str) -> str:
        return f"{self.config.merchant_url}/{path.lstrip('/')}"

    def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: Optional[Mapping[str, str]] = None,
    ) -> BraintreeResponse:
        url = self.url_for(path)
        data = xmlcodec.dumps(body) if body is not None else None

        logging.info("%s %s", method, url)
        response = self.session.request(
            method,
            url,
            params=params,
            data=data,
            headers=self._headers(),
            auth=(self.config.public_key, self.config.private_key),
            timeout=self.config.timeout_seconds,
        )
        logging.debug("%s %s returned %s", method, url, response.status_code)
        return BraintreeResponse(
            status_code=response.status_code,
            body=response.content or b"",
            headers=dict(response.headers or {}),
        )

    def transaction(self) -> TransactionGateway:
        return TransactionGateway(self)

    def credit_card(self) -> CreditCardGateway:
        return CreditCardGateway(self)

    def testing(self) -> TestingGateway:
        return TestingGateway(self)
