"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 3030
      or: wallet-gateway   (HOST/PORT from settings)
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.wg_common.errors import AppError, InternalError, TokenListFetchError
from src.wg_common.http_client import close_http_client, get_http_client
from src.wg_common.response import error_response
from src.wg_gateway.middleware.request_log import RequestLogMiddleware
from src.wg_rpc.client import SolanaRpcClient
from src.wg_token_meta.application.cache import TokenMetadataCache
from src.wg_token_meta.infrastructure.token_list_client import TokenListClient
from src.wg_wallet.api.router import router as wallet_router
from src.wg_wallet.application.service import WalletApplicationService

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def wire_services(app: FastAPI, http: httpx.AsyncClient) -> None:
    """Build the metadata cache and wallet service on top of one HTTP client."""
    rpc = SolanaRpcClient(http, settings.SOLANA_RPC_URL)
    cache = TokenMetadataCache(
        TokenListClient(http, settings.TOKEN_LIST_URL),
        ttl_seconds=settings.TOKEN_LIST_TTL_SECONDS,
    )
    app.state.metadata_cache = cache
    app.state.wallet_service = WalletApplicationService(
        rpc, cache, token_program_id=settings.SPL_TOKEN_PROGRAM_ID
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: shared HTTP client + services, optional cache warmup.
    Shutdown: close the HTTP client."""
    # Startup
    wire_services(app, await get_http_client())
    if settings.TOKEN_LIST_WARMUP:
        try:
            await app.state.metadata_cache.refresh()
        except TokenListFetchError as e:
            logger.warning("Token list warmup failed, will retry on first request: %s", e)
    logger.info("%s running at http://%s:%d", settings.APP_NAME, settings.HOST, settings.PORT)
    yield
    # Shutdown
    await close_http_client()


app = FastAPI(
    title=settings.APP_NAME,
    version=VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(exc.message).model_dump(),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    err = InternalError()
    return JSONResponse(
        status_code=err.http_status,
        content=error_response(err.message).model_dump(),
    )


app.include_router(wallet_router)


@app.get("/health")
async def health(request: Request) -> dict:
    cache: TokenMetadataCache = request.app.state.metadata_cache
    return {
        "status": "ok",
        "version": VERSION,
        "token_metadata": {
            "records": len(cache.snapshot.records),
            "age_seconds": cache.age_seconds(),
            "stale": cache.is_stale(),
        },
    }


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
