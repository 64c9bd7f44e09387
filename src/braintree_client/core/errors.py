"""
Exceptions raised by the Braintree client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .client import BraintreeResponse

__all__ = [
    "BraintreeError",
    "ConfigError",
    "InvalidResponseError",
    "ResponseParseError",
    "TestOperationPerformedInProductionError",
]


class BraintreeError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(BraintreeError):
    """Raised when the supplied configuration is invalid."""


class InvalidResponseError(BraintreeError):
    """
    Raised when the gateway answers with a status the operation does not expect.

    The raw response is kept on :attr:`response`. When the body is a Braintree
    ``<api-error-response>`` its message is available as :attr:`message`.
    """

    def __init__(self, response: "BraintreeResponse") -> None:
        self.response = response
        self.message: Optional[str] = response.api_error_message()
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        if self.message:
            return f"{self.response.status_code} {self.message}"
        return f"Invalid response ({self.response.status_code})"


class ResponseParseError(BraintreeError):
    """Raised when a response body cannot be decoded."""


class TestOperationPerformedInProductionError(BraintreeError):
    """Raised when a sandbox-only operation is attempted in production."""

    __test__ = False

    def __init__(self) -> None:
        super().__init__("Operation not allowed in production environment")
