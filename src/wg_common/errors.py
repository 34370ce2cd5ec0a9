"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Solana RPC node
  2xxx: Token list (metadata) host
  9xxx: System / user-facing

Upstream errors (1xxx, 2xxx) carry detail for logs only. The HTTP layer
collapses them into a 9xxx user-facing error with a generic message.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class UpstreamError(AppError):
    """A dependency (RPC node or token list host) could not be used."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message, 502)


# --- 1xxx: RPC ---

class RpcError(UpstreamError):
    def __init__(self, code: int, method: str, detail: str) -> None:
        self.method = method
        super().__init__(code, f"RPC {method} failed: {detail}")


class RpcTransportError(RpcError):
    """Connection failure, timeout or non-2xx status."""

    def __init__(self, method: str, detail: str) -> None:
        super().__init__(1001, method, detail)


class RpcParseError(RpcError):
    def __init__(self, method: str, detail: str) -> None:
        super().__init__(1002, method, f"malformed response: {detail}")


# --- 2xxx: Token list ---

class TokenListFetchError(UpstreamError):
    pass


class TokenListTransportError(TokenListFetchError):
    def __init__(self, detail: str) -> None:
        super().__init__(2001, f"Token list fetch failed: {detail}")


class TokenListParseError(TokenListFetchError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Token list is not valid JSON: {detail}")


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


# User-facing failures keep HTTP 200 with an error body (existing contract).

class TokensUnavailableError(AppError):
    def __init__(self) -> None:
        super().__init__(9101, "Failed to fetch tokens", 200)


class BalanceUnavailableError(AppError):
    def __init__(self) -> None:
        super().__init__(9102, "Failed to fetch balance", 200)
