from datetime import datetime, timedelta, timezone

import pytest

from braintree_client import CreditCard, InvalidResponseError, SearchResult

from conftest import MERCHANT_URL, credit_card_xml, search_results_xml

FROM = datetime(2030, 1, 15, tzinfo=timezone.utc)
TO = datetime(2030, 12, 15, tzinfo=timezone.utc)


def cards_page_xml(tokens):
    body = "".join(credit_card_xml(token) for token in tokens)
    return f'<payment-methods type="collection">{body}</payment-methods>'


def test_create(gateway, session):
    session.queue(201, credit_card_xml("new-card"))

    card = gateway.credit_card().create(
        CreditCard(customer_id="cust", number="4111111111111111", expiration_date="12/2030")
    )

    request = session.requests[0]
    assert (request.method, request.url) == ("POST", f"{MERCHANT_URL}/payment_methods")
    assert request.xml().tag == "credit-card"
    assert request.xml().findtext("customer-id") == "cust"
    assert card.token == "new-card"
    assert card.default is True
    assert card.masked_number == "411111******1111"


def test_update(gateway, session):
    session.queue(200, credit_card_xml("card-1"))

    gateway.credit_card().update(CreditCard(token="card-1", cardholder_name="Jo"))

    request = session.requests[0]
    assert (request.method, request.url) == ("PUT", f"{MERCHANT_URL}/payment_methods/card-1")
    assert request.xml().findtext("cardholder-name") == "Jo"


def test_update_requires_a_token(gateway, session):
    with pytest.raises(ValueError):
        gateway.credit_card().update(CreditCard(cardholder_name="Jo"))
    assert session.requests == []


def test_find(gateway, session):
    session.queue(200, credit_card_xml("card-1"))

    card = gateway.credit_card().find("card-1")

    assert session.requests[0].method == "GET"
    assert card.last_4 == "1111"


def test_find_not_found(gateway, session):
    session.queue(404)
    with pytest.raises(InvalidResponseError):
        gateway.credit_card().find("missing")


def test_delete(gateway, session):
    session.queue(200)

    assert gateway.credit_card().delete(CreditCard(token="card-1")) is None

    request = session.requests[0]
    assert (request.method, request.url) == ("DELETE", f"{MERCHANT_URL}/payment_methods/card-1")


def test_delete_failure(gateway, session):
    session.queue(500)
    with pytest.raises(InvalidResponseError):
        gateway.credit_card().delete(CreditCard(token="card-1"))


def test_expiring_between_ids(gateway, session):
    session.queue(200, search_results_xml(["t1", "t2", "t3"], page_size=2))

    result = gateway.credit_card().expiring_between_ids(FROM, TO)

    request = session.requests[0]
    assert (request.method, request.url) == (
        "POST",
        f"{MERCHANT_URL}/payment_methods/all/expiring_ids",
    )
    assert request.params == {"start": "012030", "end": "122030"}
    assert result == SearchResult(page_size=2, ids=["t1", "t2", "t3"])


def test_expiring_dates_are_formatted_in_utc(gateway, session):
    session.queue(200, search_results_xml([], page_size=2))
    late_evening = datetime(2030, 1, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5)))

    gateway.credit_card().expiring_between_ids(late_evening, TO)

    assert session.requests[0].params["start"] == "022030"


def test_expiring_between_pages(gateway, session):
    ids = SearchResult(page_size=2, ids=["t1", "t2", "t3"])
    session.queue(200, cards_page_xml(["t1", "t2"]))
    session.queue(200, cards_page_xml(["t3"]))

    cards = gateway.credit_card()
    first = cards.expiring_between_page(FROM, TO, ids, 1)
    second = cards.expiring_between_page(FROM, TO, ids, 2)
    third = cards.expiring_between_page(FROM, TO, ids, 3)

    assert [r.url for r in session.requests] == [
        f"{MERCHANT_URL}/payment_methods/all/expiring",
        f"{MERCHANT_URL}/payment_methods/all/expiring",
    ]
    assert [item.text for item in session.requests[1].xml().findall("ids/item")] == ["t3"]
    assert session.requests[0].params == {"start": "012030", "end": "122030"}
    assert [c.token for c in first.credit_cards] == ["t1", "t2"]
    assert (first.total_items, first.current_page_number, first.page_size) == (3, 1, 2)
    assert [c.token for c in second.credit_cards] == ["t3"]
    assert third is None
