"""wg_wallet REST endpoints.

GET /tokens/{wallet}   — SPL token holdings enriched with token list metadata
GET /balance/{wallet}  — native SOL balance

Upstream failures are logged with detail and answered with a generic error
body (HTTP 200, see TokensUnavailableError / BalanceUnavailableError).
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from src.wg_common.errors import (
    BalanceUnavailableError,
    TokensUnavailableError,
    UpstreamError,
)
from src.wg_wallet.application.schemas import BalanceOut, TokenAccountOut
from src.wg_wallet.application.service import WalletApplicationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wallet"])


def get_wallet_service(request: Request) -> WalletApplicationService:
    """FastAPI dependency: the service built in the app lifespan."""
    return request.app.state.wallet_service


@router.get("/tokens/{wallet}")
async def get_tokens(
    wallet: str,
    service: Annotated[WalletApplicationService, Depends(get_wallet_service)],
) -> list[dict[str, Any]]:
    try:
        entries = await service.get_spl_tokens(wallet)
    except UpstreamError as e:
        logger.warning("tokens %s: [%d] %s", wallet, e.code, e.message)
        raise TokensUnavailableError() from e
    return [TokenAccountOut.from_domain(entry).to_json() for entry in entries]


@router.get("/balance/{wallet}")
async def get_balance(
    wallet: str,
    service: Annotated[WalletApplicationService, Depends(get_wallet_service)],
) -> BalanceOut:
    try:
        balance = await service.get_sol_balance(wallet)
    except UpstreamError as e:
        logger.warning("balance %s: [%d] %s", wallet, e.code, e.message)
        raise BalanceUnavailableError() from e
    return BalanceOut.from_domain(balance)
