"""WalletApplicationService — request-time operations.

get_spl_tokens: token accounts (RPC) joined with cached token metadata.
get_sol_balance: native balance (RPC).

Upstream errors (RpcError, TokenListFetchError) propagate unchanged; the
router turns them into the generic user-facing error.
"""

import asyncio
import logging
from collections.abc import Mapping

from src.wg_token_meta.domain.models import TokenMetadataRecord
from src.wg_wallet.domain.models import (
    BalanceResult,
    TokenAccountEntry,
    extract_value_list,
    parse_balance,
    parse_token_account,
)
from src.wg_wallet.domain.ports import RpcClientProtocol, TokenMetadataProviderProtocol

logger = logging.getLogger(__name__)

SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


def enrich(
    entry: TokenAccountEntry, records: Mapping[str, TokenMetadataRecord]
) -> TokenAccountEntry:
    """Copy symbol/name/logo URI from the mint's metadata record, if any."""
    record = records.get(entry.mint)
    if record is not None:
        entry.symbol = record.symbol
        entry.name = record.name
        entry.logo_uri = record.logo_uri
    return entry


class WalletApplicationService:
    def __init__(
        self,
        rpc: RpcClientProtocol,
        metadata: TokenMetadataProviderProtocol,
        token_program_id: str = SPL_TOKEN_PROGRAM_ID,
    ) -> None:
        self._rpc = rpc
        self._metadata = metadata
        self._token_program_id = token_program_id

    async def get_spl_tokens(self, wallet: str) -> list[TokenAccountEntry]:
        # Both sub-calls run to completion so neither outcome is lost.
        rpc_result, records = await asyncio.gather(
            self._rpc.call(
                "getTokenAccountsByOwner",
                [
                    wallet,
                    {"programId": self._token_program_id},
                    {"encoding": "jsonParsed"},
                ],
            ),
            self._metadata.get_snapshot(),
            return_exceptions=True,
        )
        if isinstance(rpc_result, BaseException):
            raise rpc_result
        if isinstance(records, BaseException):
            raise records

        entries: list[TokenAccountEntry] = []
        for account in extract_value_list(rpc_result):
            entry = parse_token_account(account)
            if entry is None:
                continue
            entries.append(enrich(entry, records))

        logger.debug("wallet %s: %d token accounts", wallet, len(entries))
        return entries

    async def get_sol_balance(self, wallet: str) -> BalanceResult:
        result = await self._rpc.call("getBalance", [wallet])
        return parse_balance(result)
