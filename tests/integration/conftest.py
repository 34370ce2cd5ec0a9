"""Integration-test fixtures.

The app runs with its real RPC client, token list client and metadata cache.
Only the network is faked: one httpx.MockTransport plays both the Solana
node and the token list host.
"""

import json
from typing import Any

import httpx
import pytest

from config.settings import settings
from src.main import app, wire_services


class FakeUpstream:
    """Scriptable Solana node + token list host."""

    def __init__(self) -> None:
        self.token_list: Any = {"tokens": []}
        self.token_list_status = 200
        self.token_list_raw: str | None = None
        self.token_accounts: list[dict] = []
        self.lamports: int = 0
        self.rpc_down = False
        self.node_error: dict | None = None
        self.token_list_fetches = 0
        self.rpc_calls: list[dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == httpx.URL(settings.TOKEN_LIST_URL).host:
            self.token_list_fetches += 1
            if self.token_list_raw is not None:
                return httpx.Response(self.token_list_status, text=self.token_list_raw)
            return httpx.Response(self.token_list_status, json=self.token_list)

        if request.url.host == httpx.URL(settings.SOLANA_RPC_URL).host:
            if self.rpc_down:
                raise httpx.ConnectError("connection refused", request=request)
            body = json.loads(request.content)
            self.rpc_calls.append(body)
            if self.node_error is not None:
                return httpx.Response(200, json={
                    "jsonrpc": "2.0", "id": body["id"], "error": self.node_error,
                })
            if body["method"] == "getTokenAccountsByOwner":
                result = {"context": {"slot": 1}, "value": self.token_accounts}
            elif body["method"] == "getBalance":
                result = {"context": {"slot": 1}, "value": self.lamports}
            else:
                return httpx.Response(200, json={
                    "jsonrpc": "2.0", "id": body["id"],
                    "error": {"code": -32601, "message": "Method not found"},
                })
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

        return httpx.Response(404)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
async def wired(upstream: FakeUpstream):
    """Wire app.state against the fake upstream, as the lifespan would."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    wire_services(app, http)
    yield app
    await http.aclose()
    del app.state.wallet_service
    del app.state.metadata_cache
