"""Error response body.

Successful responses are the bare payload (token array or balance object).
Failures render as:
{
    "error": "Failed to fetch tokens"
}
"""

from pydantic import BaseModel


class ErrorBody(BaseModel):
    error: str


def error_response(message: str) -> ErrorBody:
    return ErrorBody(error=message)
