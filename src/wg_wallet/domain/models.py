"""Domain models for wg_wallet — request-scoped values plus the parsing rules
for the loosely-typed RPC payloads they come from.

Missing or mistyped fields degrade to defaults; they never fail a request.
"""

import math
from dataclasses import dataclass
from typing import Any

LAMPORTS_PER_SOL = 1_000_000_000
U64_MAX = 2**64 - 1


@dataclass
class TokenAccountEntry:
    mint: str
    raw_amount: str
    decimals: int
    amount: float
    symbol: str | None = None
    name: str | None = None
    logo_uri: str | None = None


@dataclass
class BalanceResult:
    lamports: int
    sol: float


def _dig(node: Any, *path: str) -> Any:
    """Walk nested dicts; None as soon as a key is missing or a node isn't a dict."""
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _as_uint(value: Any) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX:
        return value
    return 0


def human_amount(raw_amount: str, decimals: int) -> float:
    """raw / 10^decimals; unparseable or non-finite raw amounts count as 0.0."""
    # float() accepts "1_000" and padded strings; both are malformed here
    if "_" in raw_amount or raw_amount != raw_amount.strip():
        return 0.0
    try:
        raw = float(raw_amount)
    except ValueError:
        return 0.0
    if not math.isfinite(raw):
        return 0.0
    try:
        return raw / 10.0**decimals
    except OverflowError:
        return 0.0


def lamports_to_sol(lamports: int) -> float:
    return lamports / LAMPORTS_PER_SOL


def extract_value_list(result: Any) -> list[Any]:
    """`result.value` as a list; anything else is an empty list."""
    value = _dig(result, "value")
    return value if isinstance(value, list) else []


def parse_token_account(account: Any) -> TokenAccountEntry | None:
    """Parse one jsonParsed token account, or None if it has no mint."""
    info = _dig(account, "account", "data", "parsed", "info")
    mint = _dig(info, "mint")
    if not isinstance(mint, str):
        return None

    raw_amount = _dig(info, "tokenAmount", "amount")
    if not isinstance(raw_amount, str):
        raw_amount = "0"
    decimals = _as_uint(_dig(info, "tokenAmount", "decimals"))

    return TokenAccountEntry(
        mint=mint,
        raw_amount=raw_amount,
        decimals=decimals,
        amount=human_amount(raw_amount, decimals),
    )


def parse_balance(result: Any) -> BalanceResult:
    lamports = _as_uint(_dig(result, "value"))
    return BalanceResult(lamports=lamports, sol=lamports_to_sol(lamports))
