# src/wg_token_meta/domain/source.py
"""Token list source Protocol — dependency inversion for testability.

Unit tests inject a fake that conforms to this Protocol.
Infrastructure layer provides the HTTP implementation.
"""

from typing import Any, Protocol


class TokenListSourceProtocol(Protocol):
    async def fetch_document(self) -> Any:
        """Return the decoded JSON document.

        Raises TokenListFetchError when the host is unreachable, answers with
        a non-2xx status, or the body is not JSON.
        """
        ...
