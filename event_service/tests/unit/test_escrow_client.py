from __future__ import annotations

import json

import pytest
import requests

from shared.utils.escrow_client import EscrowApiError, EscrowClient, escrow_path


def make_response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode()
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """Records the outgoing request and replays a canned response."""

    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def make_client(session: FakeSession, email="escrow@example.com", api_key="key") -> EscrowClient:
    return EscrowClient("https://escrow.test/2017-09-01/", email, api_key, timeout=5, session=session)


def test_request_sends_basic_auth_and_optional_headers() -> None:
    session = FakeSession(make_response(200, {"id": "tx_1"}))
    client = make_client(session)

    result = client.request("post", "/transaction", data={"amount": 10},
                            as_customer="buyer@example.com", idempotency_key="abc")

    assert result == {"id": "tx_1"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://escrow.test/2017-09-01/transaction"
    assert call["json"] == {"amount": 10}
    assert call["headers"]["As-Customer"] == "buyer@example.com"
    assert call["headers"]["Idempotency-Key"] == "abc"
    assert call["auth"].username == "escrow@example.com"
    assert call["timeout"] == 5


def test_optional_headers_are_omitted_when_not_given() -> None:
    session = FakeSession(make_response(200, {}))
    make_client(session).request("get", "/customer/me")

    headers = session.calls[0]["headers"]
    assert "As-Customer" not in headers
    assert "Idempotency-Key" not in headers


def test_missing_credentials_fail_before_any_call() -> None:
    session = FakeSession(make_response(200, {}))

    with pytest.raises(EscrowApiError) as exc:
        make_client(session, api_key=None).request("get", "/transaction")

    assert exc.value.status_code == 500
    assert "not configured" in exc.value.message
    assert session.calls == []


@pytest.mark.parametrize(
    "status_code,expected",
    [
        (401, "Escrow API authentication failed"),
        (403, "Escrow API access forbidden"),
        (404, "Escrow API resource not found."),
    ],
)
def test_known_gateway_statuses_use_fixed_messages(status_code: int, expected: str) -> None:
    session = FakeSession(make_response(status_code, {"message": "gateway text"}))

    with pytest.raises(EscrowApiError) as exc:
        make_client(session).request("get", "/transaction")

    assert exc.value.status_code == status_code
    assert exc.value.message.startswith(expected)
    assert exc.value.details == {"message": "gateway text"}


def test_validation_error_prefers_gateway_message() -> None:
    session = FakeSession(make_response(422, {"message": "amount is required"}))

    with pytest.raises(EscrowApiError) as exc:
        make_client(session).request("post", "/transaction", data={"x": 1})

    assert exc.value.status_code == 422
    assert exc.value.message == "amount is required"


def test_validation_error_without_message_uses_fallback() -> None:
    session = FakeSession(make_response(422, {}))

    with pytest.raises(EscrowApiError) as exc:
        make_client(session).request("post", "/transaction", data={"x": 1})

    assert exc.value.message == "Escrow API validation error. Please check your request data."


def test_other_errors_use_gateway_error_field() -> None:
    session = FakeSession(make_response(409, {"error": "conflict"}))

    with pytest.raises(EscrowApiError) as exc:
        make_client(session).request("post", "/transaction", data={"x": 1})

    assert exc.value.status_code == 409
    assert exc.value.message == "conflict"


def test_transport_failure_becomes_500() -> None:
    session = FakeSession(error=requests.ConnectionError("connection refused"))

    with pytest.raises(EscrowApiError) as exc:
        make_client(session).request("get", "/transaction")

    assert exc.value.status_code == 500
    assert "connection refused" in exc.value.message


def test_empty_success_body_returns_none() -> None:
    session = FakeSession(make_response(204))

    assert make_client(session).request("post", "/transaction/1/action", data={"a": 1}) is None


def test_path_segments_are_url_encoded() -> None:
    assert escrow_path("transaction", "a/b c", "action") == "/transaction/a%2Fb%20c/action"
