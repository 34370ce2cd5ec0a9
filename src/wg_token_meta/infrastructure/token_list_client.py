"""HTTP implementation of TokenListSourceProtocol."""

from typing import Any

import httpx

from src.wg_common.errors import TokenListParseError, TokenListTransportError


class TokenListClient:
    def __init__(self, http: httpx.AsyncClient, url: str) -> None:
        self._http = http
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    async def fetch_document(self) -> Any:
        try:
            response = await self._http.get(self._url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TokenListTransportError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TokenListTransportError(f"{type(e).__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise TokenListParseError(str(e)) from e
