"""Domain models for wg_token_meta — immutable value objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, Any] = MappingProxyType({})

# Fields lifted out of a token list entry; everything else lands in `extra`.
_KNOWN_FIELDS = frozenset({"address", "symbol", "name", "logoURI"})


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class TokenMetadataRecord:
    """One token list entry, keyed by mint address."""

    address: str
    symbol: str | None = None
    name: str | None = None
    logo_uri: str | None = None
    extra: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_entry(cls, entry: Any) -> "TokenMetadataRecord | None":
        """Build from a raw token list entry, or None if it has no string address."""
        if not isinstance(entry, dict):
            return None
        address = entry.get("address")
        if not isinstance(address, str):
            return None
        extra = {k: v for k, v in entry.items() if k not in _KNOWN_FIELDS}
        return cls(
            address=address,
            symbol=_str_or_none(entry.get("symbol")),
            name=_str_or_none(entry.get("name")),
            logo_uri=_str_or_none(entry.get("logoURI")),
            extra=MappingProxyType(extra),
        )


@dataclass(frozen=True)
class TokenMetadataSnapshot:
    """Mapping and refresh instant, always replaced together.

    refreshed_at is a time.monotonic() reading; None means never refreshed.
    """

    records: Mapping[str, TokenMetadataRecord]
    refreshed_at: float | None = None

    @classmethod
    def empty(cls) -> "TokenMetadataSnapshot":
        return cls(records=_EMPTY, refreshed_at=None)

    def age(self, now: float) -> float | None:
        if self.refreshed_at is None:
            return None
        return now - self.refreshed_at

    def is_stale(self, now: float, ttl_seconds: float) -> bool:
        age = self.age(now)
        return age is None or age > ttl_seconds
