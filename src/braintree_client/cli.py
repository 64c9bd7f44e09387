"""
Command-line interface for exercising the Braintree gateways.
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Iterable, Sequence, Tuple

import requests

from .api import ConfigError, create_gateway, load_braintree_config
from .core import (
    BraintreeError,
    BraintreeGateway,
    CreditCard,
    SearchQuery,
    Transaction,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a decimal amount") from exc
    if not amount.is_finite() or amount <= 0:
        raise argparse.ArgumentTypeError("Amounts must be greater than zero")
    return amount


def _page_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a whole number") from exc
    if count <= 0:
        raise argparse.ArgumentTypeError("Page limits must be greater than zero")
    return count


def _month(value: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m").replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a YYYY-MM month") from exc


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="braintree-client",
        description="Run a single Braintree API operation",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing BRAINTREE_* settings (default: .env)",
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

    commands = parser.add_subparsers(dest="command", required=True)

    find = commands.add_parser("find", help="Find a transaction by id")
    find.add_argument("transaction_id")

    void = commands.add_parser("void", help="Void a transaction")
    void.add_argument("transaction_id")

    refund = commands.add_parser("refund", help="Refund a transaction")
    refund.add_argument("transaction_id")
    refund.add_argument("--amount", type=_amount, help="Partial amount to refund")

    submit = commands.add_parser("submit", help="Submit a transaction for settlement")
    submit.add_argument("transaction_id")
    submit.add_argument("--amount", type=_amount, help="Amount to settle")

    search = commands.add_parser("search", help="Search transactions")
    search.add_argument("--order-id", help="Exact order id to match")
    search.add_argument(
        "--status",
        action="append",
        default=None,
        help="Transaction status to match (repeatable)",
    )
    search.add_argument(
        "--page-limit",
        type=_page_count,
        default=None,
        help="Stop after this many pages",
    )

    card = commands.add_parser("card", help="Find a credit card by token")
    card.add_argument("token")

    expiring = commands.add_parser(
        "expiring", help="List credit cards expiring between two months"
    )
    expiring.add_argument("start", type=_month, help="First month, YYYY-MM")
    expiring.add_argument("end", type=_month, help="Last month, YYYY-MM")

    return parser


def _log_transaction(transaction: Transaction) -> None:
    logging.info(
        "Transaction %s: %s %s %s (%s)",
        transaction.id,
        transaction.type,
        transaction.amount,
        transaction.currency_iso_code,
        transaction.status,
    )


def _log_card(card: CreditCard) -> None:
    logging.info(
        "Credit card %s: %s %s expires %s",
        card.token,
        card.card_type,
        card.masked_number,
        card.expiration_date,
    )


def _find(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    _log_transaction(gateway.transaction().find(args.transaction_id))


def _void(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    _log_transaction(gateway.transaction().void(args.transaction_id))


def _refund(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    _log_transaction(gateway.transaction().refund(args.transaction_id, args.amount))


def _submit(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    _log_transaction(
        gateway.transaction().submit_for_settlement(args.transaction_id, args.amount)
    )


def _search(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    query = SearchQuery()
    if args.order_id:
        query.add_text_field("order_id").is_ = args.order_id
    if args.status:
        query.add_multi_field("status").items = list(args.status)

    transactions = gateway.transaction()
    page = transactions.search(query)
    logging.info("Search matched %s transactions", page.total_items)
    pages_read = 0
    while page is not None:
        for transaction in page.transactions:
            _log_transaction(transaction)
        pages_read += 1
        if args.page_limit is not None and pages_read >= args.page_limit:
            break
        page = transactions.search_next(page)


def _card(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    _log_card(gateway.credit_card().find(args.token))


def _expiring(gateway: BraintreeGateway, args: argparse.Namespace) -> None:
    cards = gateway.credit_card()
    ids = cards.expiring_between_ids(args.start, args.end)
    logging.info("%s credit cards expire in the requested window", ids.total_items)
    page_number = 1
    page = cards.expiring_between_page(args.start, args.end, ids, page_number)
    while page is not None:
        for card in page.credit_cards:
            _log_card(card)
        page_number += 1
        page = cards.expiring_between_page(args.start, args.end, ids, page_number)


_COMMANDS: Dict[str, Callable[[BraintreeGateway, argparse.Namespace], None]] = {
    "find": _find,
    "void": _void,
    "refund": _refund,
    "submit": _submit,
    "search": _search,
    "card": _card,
    "expiring": _expiring,
}


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    session: requests.Session | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_braintree_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    gateway = create_gateway(config=config, session=session or requests.Session())

    try:
        _COMMANDS[args.command](gateway, args)
    except BraintreeError as exc:
        logging.error("Braintree request failed: %s", exc)
        return 1
    except requests.RequestException as exc:
        logging.error("Could not reach Braintree: %s", exc)
        return 1
    return 0
