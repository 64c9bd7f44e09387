import pytest

from braintree_client import BraintreeResponse, InvalidResponseError, ResponseParseError
from braintree_client.core.client import API_VERSION

from conftest import MERCHANT_URL, api_error_xml, transaction_xml


def test_execute_sends_authenticated_xml(gateway, session):
    session.queue(200, transaction_xml())

    response = gateway.execute("GET", "transactions/txn-1")

    request = session.requests[0]
    assert request.method == "GET"
    assert request.url == f"{MERCHANT_URL}/transactions/txn-1"
    assert request.data is None
    assert request.auth == ("public-key", "private-key")
    assert request.timeout == 60
    assert request.headers["Accept"] == "application/xml"
    assert request.headers["Content-Type"] == "application/xml"
    assert request.headers["X-ApiVersion"] == API_VERSION
    assert response.status_code == 200


def test_leading_slash_is_not_doubled(gateway):
    assert gateway.url_for("/payment_methods/all/expiring_ids") == (
        f"{MERCHANT_URL}/payment_methods/all/expiring_ids"
    )


def test_expect_raises_with_api_error_message():
    response = BraintreeResponse(422, api_error_xml("Amount is required.").encode())

    with pytest.raises(InvalidResponseError) as excinfo:
        response.expect(201)

    assert excinfo.value.response is response
    assert excinfo.value.status_code == 422
    assert excinfo.value.message == "Amount is required."
    assert str(excinfo.value) == "422 Amount is required."


def test_expect_with_unparseable_body():
    response = BraintreeResponse(500, b"Internal Server Error")

    with pytest.raises(InvalidResponseError) as excinfo:
        response.expect(200)

    assert excinfo.value.message is None
    assert "500" in str(excinfo.value)


def test_expect_returns_the_response_on_success():
    response = BraintreeResponse(201, transaction_xml().encode())
    assert response.expect(200, 201) is response


def test_wrong_root_element_is_a_parse_error():
    response = BraintreeResponse(200, b"<credit-card><token>x</token></credit-card>")
    with pytest.raises(ResponseParseError):
        response.transaction()
