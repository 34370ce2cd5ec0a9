# src/wg_wallet/domain/ports.py
"""Collaborator Protocols for the wallet service.

Unit tests inject mocks that conform to these Protocols.
SolanaRpcClient and TokenMetadataCache are the real implementations.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from src.wg_token_meta.domain.models import TokenMetadataRecord


class RpcClientProtocol(Protocol):
    async def call(self, method: str, params: list[Any]) -> Any: ...


class TokenMetadataProviderProtocol(Protocol):
    async def get_snapshot(self) -> Mapping[str, TokenMetadataRecord]: ...
