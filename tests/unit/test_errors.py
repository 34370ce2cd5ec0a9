"""Tests for wg_common.errors and wg_common.response."""

from src.wg_common.errors import (
    AppError,
    BalanceUnavailableError,
    InternalError,
    RpcError,
    RpcParseError,
    RpcTransportError,
    TokenListFetchError,
    TokenListParseError,
    TokenListTransportError,
    TokensUnavailableError,
    UpstreamError,
)
from src.wg_common.response import ErrorBody, error_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="Bad gateway", http_status=502)
        assert err.http_status == 502

    def test_is_exception(self) -> None:
        err = AppError(code=1001, message="test")
        assert isinstance(err, Exception)


class TestRpcErrors:
    def test_transport(self) -> None:
        err = RpcTransportError("getBalance", "ConnectError: refused")
        assert err.code == 1001
        assert err.http_status == 502
        assert err.method == "getBalance"
        assert "getBalance" in err.message
        assert "refused" in err.message

    def test_parse(self) -> None:
        err = RpcParseError("getBalance", "Expecting value")
        assert err.code == 1002
        assert "malformed" in err.message

    def test_hierarchy(self) -> None:
        for err in (
            RpcTransportError("m", "x"),
            RpcParseError("m", "x"),
        ):
            assert isinstance(err, RpcError)
            assert isinstance(err, UpstreamError)


class TestTokenListErrors:
    def test_transport(self) -> None:
        err = TokenListTransportError("HTTP 503")
        assert err.code == 2001
        assert err.http_status == 502
        assert isinstance(err, TokenListFetchError)

    def test_parse(self) -> None:
        err = TokenListParseError("Expecting value")
        assert err.code == 2002
        assert isinstance(err, TokenListFetchError)
        assert isinstance(err, UpstreamError)


class TestUserFacingErrors:
    def test_tokens_unavailable_keeps_200(self) -> None:
        err = TokensUnavailableError()
        assert err.code == 9101
        assert err.http_status == 200
        assert err.message == "Failed to fetch tokens"

    def test_balance_unavailable_keeps_200(self) -> None:
        err = BalanceUnavailableError()
        assert err.code == 9102
        assert err.http_status == 200
        assert err.message == "Failed to fetch balance"

    def test_internal(self) -> None:
        err = InternalError()
        assert err.code == 9002
        assert err.http_status == 500

    def test_not_upstream(self) -> None:
        assert not isinstance(TokensUnavailableError(), UpstreamError)


class TestErrorBody:
    def test_error_response(self) -> None:
        body = error_response("Failed to fetch tokens")
        assert isinstance(body, ErrorBody)
        assert body.model_dump() == {"error": "Failed to fetch tokens"}
