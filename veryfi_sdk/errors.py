"""
Veryfi SDK error types.

All errors inherit from VeryfiClientError for easy catch-all handling.

Veryfi API returns error messages with a json body like:

    {"status": "fail", "error": "Human readable error description."}
"""

import json

import httpx


class VeryfiClientError(Exception):
    """Base exception for all Veryfi SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: str | None = None,
        response: httpx.Response | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error = error
        self.response = response
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Build the error matching a non-2xx response."""
        detail = _error_detail(response)
        error_cls = _ERROR_MAP.get(response.status_code, APIError)
        return error_cls(
            f"{response.status_code} {detail}",
            status_code=response.status_code,
            error=detail,
            response=response,
        )


class ConfigurationError(VeryfiClientError):
    """Raised before any network call when the client cannot serve the operation."""


class TransportError(VeryfiClientError):
    """Raised on network failure, DNS failure or timeout. No response is available."""


class APIError(VeryfiClientError):
    """Raised when the API answers with a non-2xx status."""


class BadRequest(APIError):
    pass


class UnauthorizedAccessToken(APIError):
    pass


class NotFound(APIError):
    pass


class UnexpectedHTTPMethod(APIError):
    pass


class AccessLimitReached(APIError):
    pass


class InternalError(APIError):
    pass


_ERROR_MAP = {
    400: BadRequest,
    401: UnauthorizedAccessToken,
    404: NotFound,
    405: UnexpectedHTTPMethod,
    409: AccessLimitReached,
    500: InternalError,
}


def _error_detail(response: httpx.Response) -> str:
    try:
        error_data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(error_data, dict) and error_data.get("error"):
        return str(error_data["error"])
    return json.dumps(error_data)
