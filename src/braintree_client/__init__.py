"""
Public facade for the Braintree client package.

The most useful pieces are re-exported here so integrators can
``from braintree_client import ...`` without navigating the package.
"""

from .api import create_gateway
from .core import (
    BraintreeConfig,
    BraintreeError,
    BraintreeGateway,
    BraintreeResponse,
    ConfigError,
    ConfigParameters,
    CreditCard,
    CreditCardGateway,
    CreditCardOptions,
    CreditCardSearchResult,
    Environment,
    InvalidResponseError,
    ResponseParseError,
    SearchQuery,
    SearchResult,
    TestOperationPerformedInProductionError,
    TestingGateway,
    Transaction,
    TransactionCloneOptions,
    TransactionCloneRequest,
    TransactionGateway,
    TransactionOptions,
    TransactionRequest,
    TransactionSearchResult,
    build_environment,
    load_braintree_config,
    load_env_file,
    page_bounds,
)
from .core.client import VERSION as __version__

__all__ = (
    "BraintreeConfig",
    "BraintreeError",
    "BraintreeGateway",
    "BraintreeResponse",
    "ConfigError",
    "ConfigParameters",
    "CreditCard",
    "CreditCardGateway",
    "CreditCardOptions",
    "CreditCardSearchResult",
    "Environment",
    "InvalidResponseError",
    "ResponseParseError",
    "SearchQuery",
    "SearchResult",
    "TestOperationPerformedInProductionError",
    "TestingGateway",
    "Transaction",
    "TransactionCloneOptions",
    "TransactionCloneRequest",
    "TransactionGateway",
    "TransactionOptions",
    "TransactionRequest",
    "TransactionSearchResult",
    "build_environment",
    "create_gateway",
    "load_braintree_config",
    "load_env_file",
    "page_bounds",
)
