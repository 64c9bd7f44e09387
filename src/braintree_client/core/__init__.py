"""
Core primitives that implement the Braintree request/response cycle.
"""

from .client import BraintreeGateway, BraintreeResponse
from .config import (
    BraintreeConfig,
    ConfigParameters,
    Environment,
    load_braintree_config,
)
from .credit_cards import CreditCardGateway
from .env import EnvironmentVariables, build_environment, load_env_file
from .errors import (
    BraintreeError,
    ConfigError,
    InvalidResponseError,
    ResponseParseError,
    TestOperationPerformedInProductionError,
)
from .models import (
    CreditCard,
    CreditCardOptions,
    CreditCardSearchResult,
    SearchResult,
    Transaction,
    TransactionCloneOptions,
    TransactionCloneRequest,
    TransactionOptions,
    TransactionRequest,
    TransactionSearchResult,
)
from .pagination import page_bounds
from .search import MultiField, RangeField, SearchQuery, TextField
from .testing import TestingGateway
from .transactions import TransactionGateway

__all__ = [
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
    "EnvironmentVariables",
    "InvalidResponseError",
    "MultiField",
    "RangeField",
    "ResponseParseError",
    "SearchQuery",
    "SearchResult",
    "TestOperationPerformedInProductionError",
    "TestingGateway",
    "TextField",
    "Transaction",
    "TransactionCloneOptions",
    "TransactionCloneRequest",
    "TransactionGateway",
    "TransactionOptions",
    "TransactionRequest",
    "TransactionSearchResult",
    "build_environment",
    "load_braintree_config",
    "load_env_file",
    "page_bounds",
]
