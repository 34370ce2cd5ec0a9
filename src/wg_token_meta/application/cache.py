"""TokenMetadataCache — process-wide mint → metadata table.

The cache owns exactly one TokenMetadataSnapshot. Readers take the current
reference without waiting; a refresh builds a new snapshot off to the side
and swaps the reference in one assignment, so a reader sees either the old
(mapping, timestamp) pair or the new one.

Refreshes are serialized by an asyncio.Lock. A stale reader that gets the
lock re-checks freshness first, so callers queued behind a successful
refresh reuse its result instead of fetching again. A failed refresh leaves
the previous snapshot in place and the error goes to the caller.
"""

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from src.wg_token_meta.domain.models import TokenMetadataRecord, TokenMetadataSnapshot
from src.wg_token_meta.domain.source import TokenListSourceProtocol

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


def parse_token_list(document: Any) -> dict[str, TokenMetadataRecord]:
    """Index a token list document by mint address.

    A document that is not an object, or whose "tokens" is missing or not a
    list, yields an empty mapping. Entries without a string "address" are
    skipped; a repeated address replaces the earlier entry.
    """
    if not isinstance(document, dict):
        return {}
    tokens = document.get("tokens")
    if not isinstance(tokens, list):
        return {}

    records: dict[str, TokenMetadataRecord] = {}
    for entry in tokens:
        record = TokenMetadataRecord.from_entry(entry)
        if record is not None:
            records[record.address] = record
    return records


class TokenMetadataCache:
    def __init__(
        self,
        source: TokenListSourceProtocol,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._snapshot = TokenMetadataSnapshot.empty()
        self._refresh_lock = asyncio.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    @property
    def snapshot(self) -> TokenMetadataSnapshot:
        return self._snapshot

    def age_seconds(self) -> float | None:
        return self._snapshot.age(self._clock())

    def is_stale(self) -> bool:
        return self._snapshot.is_stale(self._clock(), self._ttl_seconds)

    async def get_snapshot(self) -> Mapping[str, TokenMetadataRecord]:
        """Current mapping, refreshed first when older than the TTL."""
        if not self.is_stale():
            return self._snapshot.records

        async with self._refresh_lock:
            # Another caller may have refreshed while we waited.
            if self.is_stale():
                await self._refresh_locked()
        return self._snapshot.records

    async def refresh(self) -> None:
        """Fetch the token list and replace the snapshot.

        Raises TokenListFetchError; the previous snapshot is kept on failure.
        """
        async with self._refresh_lock:
            await self._refresh_locked()

    async def _refresh_locked(self) -> None:
        start = time.perf_counter()
        try:
            document = await self._source.fetch_document()
        except Exception as e:
            logger.warning("Token list refresh failed, keeping previous snapshot: %s", e)
            raise

        records = parse_token_list(document)
        self._snapshot = TokenMetadataSnapshot(
            records=MappingProxyType(records),
            refreshed_at=self._clock(),
        )
        logger.info(
            "Token list refreshed: %d records (%.0fms)",
            len(records),
            (time.perf_counter() - start) * 1000,
        )
