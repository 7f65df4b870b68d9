"""PokitDok-specific exceptions for error handling."""
from __future__ import annotations
from typing import Optional


class PokitdokError(Exception):
    """Base exception for all PokitDok client operations."""
    pass


class DataConversionError(PokitdokError):
    """Data could not be converted to or from its wire format."""
    pass


class RequestEncodingError(DataConversionError):
    """Request parameters could not be serialized (JSON body or field value)."""
    pass


class ResponseDecodingError(DataConversionError):
    """Response body is present but is not valid JSON."""
    pass


class FileEncodingError(DataConversionError):
    """File part could not be read for a multipart upload.

    Attributes:
        path: Filesystem path that failed to encode
    """

    def __init__(self, path: str, message: str = "Failed to encode file for http request"):
        self.path = path
        super().__init__(f"{message}: {path}")


class AuthenticationError(PokitdokError):
    """Access token could not be obtained or is no longer accepted."""
    pass


class MissingCredentialsError(AuthenticationError):
    """Token refresh required but client id and/or secret were not supplied."""
    pass


class TokenFetchError(AuthenticationError):
    """Token endpoint rejected the request or returned an unusable payload.

    Attributes:
        status_code: HTTP status code (None when no response was received)
        message: Error message from response
        endpoint: Token endpoint that failed
    """

    def __init__(self, status_code: Optional[int], message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class TokenExpiredError(AuthenticationError):
    """Platform answered 401 on the final attempt of a request."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Access token rejected by {endpoint}")


class PokitdokTransportError(PokitdokError):
    """Network-level failure (DNS, connection refused, timeout).

    The underlying requests exception is chained as ``__cause__``.
    """

    def __init__(self, method: str, endpoint: str, reason: str):
        self.method = method
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"{method} {endpoint} failed: {reason}")
