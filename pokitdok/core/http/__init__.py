"""HTTP layer for PokitDok platform APIs.

Architecture:
- client.py: PokitdokClient with token management and refresh-retry
- request.py: ApiRequest, body encoding (JSON, form, multipart, query string)
- params.py: Parameter value encoding
- files.py: FileData multipart file parts
- transport.py: Blocking requests-based Transport
- response.py: ApiResponse and Outcome classification
- exceptions.py: Typed exceptions for error handling

Usage:
    from pokitdok.core.http import PokitdokClient, FileData

    client = PokitdokClient("<client_id>", "<client_secret>", auto_refresh=True)
    client.request("/claims/convert", "POST", files=[FileData("claims.837", "application/EDI-X12")])
"""
from .client import (
    PokitdokClient,
    create_client,
    create_client_with_token,
    DEFAULT_BASE_URL,
    DEFAULT_API_VERSION,
)
from .exceptions import (
    PokitdokError,
    DataConversionError,
    RequestEncodingError,
    ResponseDecodingError,
    FileEncodingError,
    AuthenticationError,
    MissingCredentialsError,
    TokenFetchError,
    TokenExpiredError,
    PokitdokTransportError,
)
from .files import FileData
from .params import encode_query, stringify
from .request import ApiRequest, JSON_CONTENT_TYPE, FORM_CONTENT_TYPE
from .response import ApiResponse, Outcome, TOKEN_EXPIRED
from .transport import Transport, REQUEST_TIMEOUT

__all__ = [
    # Client
    "PokitdokClient",
    "create_client",
    "create_client_with_token",
    "DEFAULT_BASE_URL",
    "DEFAULT_API_VERSION",

    # Request / response
    "ApiRequest",
    "ApiResponse",
    "FileData",
    "Outcome",
    "Transport",
    "encode_query",
    "stringify",
    "JSON_CONTENT_TYPE",
    "FORM_CONTENT_TYPE",
    "TOKEN_EXPIRED",
    "REQUEST_TIMEOUT",

    # Exceptions
    "PokitdokError",
    "DataConversionError",
    "RequestEncodingError",
    "ResponseDecodingError",
    "FileEncodingError",
    "AuthenticationError",
    "MissingCredentialsError",
    "TokenFetchError",
    "TokenExpiredError",
    "PokitdokTransportError",
]
