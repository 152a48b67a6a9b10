"""
Tests for the Lunch Flow API client against a faked API.
"""
import asyncio
import os
import sys

import httpx
import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lunchflow_mcp.client import LunchFlowClient  # noqa: E402
from lunchflow_mcp.contract import NotFound, ServerError, Success, TransportError, Unauthorized  # noqa: E402
from lunchflow_mcp.tools import accounts, transactions  # noqa: E402
from tests.fake_api import (  # noqa: E402
    ACCOUNTS_BODY,
    BALANCE_BODY,
    TEST_API_KEY,
    TRANSACTIONS_BODY,
    UNAUTHORIZED_BODY,
    FakeApi,
    make_config,
)


def test_request_shape() -> None:
    api = FakeApi.returning(200, ACCOUNTS_BODY)
    client = LunchFlowClient(make_config(), transport=api.transport)

    result = asyncio.run(client.list_accounts())

    assert isinstance(result, Success)
    assert len(api.requests) == 1
    request = api.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://lunchflow.test/api/v1/accounts"
    assert request.headers["X-API-Key"] == TEST_API_KEY
    print("✓ request shape")


def test_account_paths() -> None:
    api = FakeApi.returning(200, TRANSACTIONS_BODY)
    client = LunchFlowClient(make_config(), transport=api.transport)
    assert isinstance(asyncio.run(client.get_account_transactions(42)), Success)

    balance_api = FakeApi.returning(200, BALANCE_BODY)
    balance_client = LunchFlowClient(make_config(), transport=balance_api.transport)
    assert isinstance(asyncio.run(balance_client.get_account_balance(42)), Success)

    assert api.paths == ["/api/v1/accounts/42/transactions"]
    assert balance_api.paths == ["/api/v1/accounts/42/balance"]


def test_error_statuses() -> None:
    api = FakeApi.returning(401, UNAUTHORIZED_BODY)
    client = LunchFlowClient(make_config(), transport=api.transport)
    result = asyncio.run(client.get_account_balance(1))
    assert isinstance(result, Unauthorized)
    assert result.body == UNAUTHORIZED_BODY

    not_found = FakeApi.returning(404, {"error": "Not Found", "message": "Account not found."})
    client = LunchFlowClient(make_config(), transport=not_found.transport)
    assert isinstance(asyncio.run(client.get_account_transactions(999)), NotFound)

    html = FakeApi.returning(503, text="Service Unavailable")
    client = LunchFlowClient(make_config(), transport=html.transport)
    result = asyncio.run(client.list_accounts())
    assert isinstance(result, ServerError)
    assert result.status == 503
    assert result.body == "Service Unavailable"


def test_transport_failure_is_returned() -> None:
    api = FakeApi.raising(httpx.ConnectTimeout("Connection timed out"))
    client = LunchFlowClient(make_config(), transport=api.transport)

    result = asyncio.run(client.list_accounts())

    assert isinstance(result, TransportError)
    assert "Connection timed out" in result.message
    print("✓ transport failure returned")


def test_invalid_success_body_is_returned() -> None:
    api = FakeApi.returning(200, {"accounts": [{"id": 1}]})
    client = LunchFlowClient(make_config(), transport=api.transport)
    result = asyncio.run(client.list_accounts())
    assert isinstance(result, TransportError)
    assert "listAccounts" in result.message

    not_json = FakeApi.returning(200, text="not json")
    client = LunchFlowClient(make_config(), transport=not_json.transport)
    result = asyncio.run(client.list_accounts())
    assert isinstance(result, TransportError)
    assert "Invalid JSON" in result.message


def _slow_api(started: list) -> httpx.MockTransport:
    async def handler(request: httpx.Request) -> httpx.Response:
        started.append(request)
        await asyncio.sleep(30)
        return httpx.Response(200, json=ACCOUNTS_BODY)

    return httpx.MockTransport(handler)


def _cancel_midway(make_call, started: list) -> None:
    async def run():
        task = asyncio.create_task(make_call())
        while not started:
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(run())


def test_cancelled_call_is_abandoned() -> None:
    started: list = []
    client = LunchFlowClient(make_config(), transport=_slow_api(started))
    _cancel_midway(lambda: accounts.list_accounts(client), started)
    assert len(started) == 1

    started = []
    client = LunchFlowClient(make_config(), transport=_slow_api(started))
    _cancel_midway(lambda: transactions.get_account_transactions(client, 42), started)
    assert len(started) == 1

    started = []
    client = LunchFlowClient(make_config(), transport=_slow_api(started))
    _cancel_midway(lambda: accounts.get_account_balance(client, 42), started)
    assert len(started) == 1
    print("✓ cancellation propagates")


if __name__ == "__main__":
    test_request_shape()
    test_account_paths()
    test_error_statuses()
    test_transport_failure_is_returned()
    test_invalid_success_body_is_returned()
    test_cancelled_call_is_abandoned()
    print("All client tests passed.")
