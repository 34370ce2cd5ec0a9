"""Solana JSON-RPC 2.0 client.

One request per call, no retries, no caching. Every call goes through the
shared httpx.AsyncClient so connections to the node are reused.

Failure mapping:
    connection error / timeout / non-2xx  → RpcTransportError
    body not JSON                         → RpcParseError

A JSON-RPC {"error": {...}} reply, or a JSON body that isn't an object, is
logged and treated as a missing result (None); callers degrade to defaults.
"""

import logging
import time
from typing import Any

import httpx

from src.wg_common.errors import RpcParseError, RpcTransportError

logger = logging.getLogger(__name__)


class SolanaRpcClient:
    def __init__(self, http: httpx.AsyncClient, rpc_url: str) -> None:
        self._http = http
        self._rpc_url = rpc_url

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def call(self, method: str, params: list[Any]) -> Any:
        """POST a JSON-RPC request and return its `result` (None if absent)."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }

        start = time.perf_counter()
        try:
            response = await self._http.post(self._rpc_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RpcTransportError(method, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise RpcTransportError(method, f"{type(e).__name__}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise RpcParseError(method, str(e)) from e

        logger.debug(
            "rpc %s → %d (%.0fms)",
            method,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )

        if not isinstance(data, dict):
            logger.warning("rpc %s: expected object, got %s", method, type(data).__name__)
            return None
        if data.get("error") is not None:
            # Surfaced to callers as a missing result, not a failure.
            logger.warning("rpc %s: node error %s", method, data["error"])
        return data.get("result")
