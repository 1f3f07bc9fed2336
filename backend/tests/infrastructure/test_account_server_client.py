"""HTTP Account Server: tests against httpx.MockTransport.

Tests cover:
    - Each operation POSTs the documented path and JSON body
    - Response bodies decode into RemoteOutcome; unknown statuses become undefined_error
    - Timeouts, connection errors and HTTP errors raise AccountServerError
    - Non-JSON or malformed bodies raise MalformedResponseError
"""

import json

import httpx
import pytest

from accountgate.core.domain_types import RemoteStatus
from accountgate.core.errors import AccountServerError, MalformedResponseError
from accountgate.infrastructure.account_server_client import (
    HttpAccountServer, parse_outcome,
)

BASE_URL = "http://account-server.test"


def _server(handler):
    return HttpAccountServer(BASE_URL, transport=httpx.MockTransport(handler))


def _recording(requests, body):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json=body)
    return handler


# ─── Request shape ───────────────────────────────────────────────

async def test_login_posts_name_and_password():
    requests = []
    server = _server(_recording(requests, {"status": "success", "payload": 3}))

    outcome = await server.login("alice", "h4rd")

    assert requests == [("/login", {"name": "alice", "password": "h4rd"})]
    assert outcome.status == RemoteStatus.SUCCESS
    assert outcome.payload == 3
    await server.aclose()


async def test_session_operations_post_expected_bodies():
    requests = []
    server = _server(_recording(requests, {"status": "success", "payload": 10.0}))

    await server.logout(3)
    await server.deposit(3, 25.5)
    await server.withdraw(3, 5.0)
    await server.get_balance(3)

    assert requests == [
        ("/logout", {"session_id": 3}),
        ("/deposit", {"session_id": 3, "amount": 25.5}),
        ("/withdraw", {"session_id": 3, "amount": 5.0}),
        ("/balance", {"session_id": 3}),
    ]
    await server.aclose()


async def test_unknown_status_is_undefined_error():
    server = _server(lambda request: httpx.Response(200, json={"status": "locked"}))
    outcome = await server.get_balance(3)
    assert outcome.status == RemoteStatus.UNDEFINED_ERROR
    assert outcome.payload is None
    await server.aclose()


# ─── Failures ────────────────────────────────────────────────────

async def test_timeout_raises_account_server_error():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    server = _server(handler)
    with pytest.raises(AccountServerError) as exc_info:
        await server.login("alice", "pw")
    assert exc_info.value.failure_type == "timeout"
    assert exc_info.value.context.operation == "login"
    await server.aclose()


async def test_connection_error_raises_account_server_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    server = _server(handler)
    with pytest.raises(AccountServerError) as exc_info:
        await server.logout(3)
    assert exc_info.value.failure_type == "connection_error"
    await server.aclose()


async def test_http_error_status_raises_account_server_error():
    server = _server(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(AccountServerError) as exc_info:
        await server.deposit(3, 1.0)
    assert exc_info.value.failure_type == "http_status"
    assert "503" in exc_info.value.message
    await server.aclose()


async def test_non_json_body_raises_malformed():
    server = _server(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(MalformedResponseError):
        await server.withdraw(3, 1.0)
    await server.aclose()


async def test_missing_status_raises_malformed():
    server = _server(lambda request: httpx.Response(200, json={"payload": 1}))
    with pytest.raises(MalformedResponseError) as exc_info:
        await server.get_balance(3)
    assert exc_info.value.context.operation == "balance"
    await server.aclose()


# ─── parse_outcome ───────────────────────────────────────────────

def test_parse_outcome_without_payload():
    outcome = parse_outcome({"status": "not_logged"})
    assert outcome.status == RemoteStatus.NOT_LOGGED
    assert outcome.payload is None


@pytest.mark.parametrize("body", [
    [], "success", {"status": "success", "payload": "3"},
    {"status": "success", "payload": True},
])
def test_parse_outcome_rejects_bad_bodies(body):
    with pytest.raises(MalformedResponseError):
        parse_outcome(body)
