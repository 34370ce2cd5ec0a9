from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Solana Wallet Gateway"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Listen address
    HOST: str = "127.0.0.1"
    PORT: int = Field(default=3030, ge=1, le=65535)

    # Upstreams
    SOLANA_RPC_URL: str = "https://api.mainnet-beta.solana.com"
    TOKEN_LIST_URL: str = (
        "https://raw.githubusercontent.com/solana-labs/token-list/main/"
        "src/tokens/solana.tokenlist.json"
    )
    SPL_TOKEN_PROGRAM_ID: str = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

    # Token metadata cache
    TOKEN_LIST_TTL_SECONDS: float = Field(default=3600.0, gt=0)
    TOKEN_LIST_WARMUP: bool = False

    # Outbound HTTP — timeouts count as transport failures
    HTTP_TIMEOUT_SECONDS: float = Field(default=20.0, gt=0)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return level


settings = Settings()
