"""Pydantic schemas for wg_wallet API responses.

Token records omit metadata fields the token list doesn't provide, so they
are dumped with exclude_none:
  {"mint": "...", "amount": 15.0, "decimals": 2, "symbol": "USDC", ...}
"""

from pydantic import BaseModel, ConfigDict, Field

from src.wg_wallet.domain.models import BalanceResult, TokenAccountEntry


class TokenAccountOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mint: str
    amount: float
    decimals: int
    symbol: str | None = None
    name: str | None = None
    logo_uri: str | None = Field(default=None, alias="logoURI")

    @classmethod
    def from_domain(cls, entry: TokenAccountEntry) -> "TokenAccountOut":
        return cls(
            mint=entry.mint,
            amount=entry.amount,
            decimals=entry.decimals,
            symbol=entry.symbol,
            name=entry.name,
            logo_uri=entry.logo_uri,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class BalanceOut(BaseModel):
    lamports: int
    sol: float

    @classmethod
    def from_domain(cls, balance: BalanceResult) -> "BalanceOut":
        return cls(lamports=balance.lamports, sol=balance.sol)
