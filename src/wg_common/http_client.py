"""Shared outbound HTTP client — one connection pool for the RPC node and
the token list host.

Created on first use (normally from the app lifespan), closed on shutdown.
"""

import httpx

from config.settings import settings

_http_client: httpx.AsyncClient | None = None


async def get_http_client() -> httpx.AsyncClient:
    """Get or create the shared AsyncClient."""
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
            headers={"User-Agent": settings.APP_NAME},
            follow_redirects=True,
        )
    return _http_client


async def close_http_client() -> None:
    """Close the shared AsyncClient."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
