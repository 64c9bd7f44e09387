"""
Minimal script that uses the public API to charge a vaulted payment method.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal

from braintree_client import (
    BraintreeError,
    ConfigError,
    TransactionOptions,
    TransactionRequest,
    create_gateway,
    load_braintree_config,
)
from braintree_client.cli import _collect_overrides, _configure_logging, _env_override


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Braintree sale using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing BRAINTREE_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--payment-method-token",
        required=True,
        help="Token of the vaulted payment method to charge",
    )
    parser.add_argument(
        "--amount",
        type=Decimal,
        default=Decimal("10.00"),
        help="Amount to charge (default: 10.00)",
    )
    parser.add_argument("--order-id", help="Merchant order id to attach")
    parser.add_argument(
        "--settle",
        action="store_true",
        help="Submit the sale for settlement immediately",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    _configure_logging(args.log_level)

    try:
        config = load_braintree_config(
            env_file=args.env_file,
            overrides=_collect_overrides(args.set or ()),
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    gateway = create_gateway(config=config)
    request = TransactionRequest(
        amount=args.amount,
        payment_method_token=args.payment_method_token,
        order_id=args.order_id,
        options=TransactionOptions(submit_for_settlement=True) if args.settle else None,
    )

    try:
        transaction = gateway.transaction().sale(request)
    except BraintreeError as exc:
        logging.error("Sale failed: %s", exc)
        return 1

    logging.info("Created transaction %s with status %s", transaction.id, transaction.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
