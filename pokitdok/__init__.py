"""PokitDok platform client library.

Usage:
    from pokitdok import PokitdokClient, ClaimsService

    client = PokitdokClient("<client_id>", "<client_secret>", auto_refresh=True)
    print(ClaimsService(client).eligibility({"trading_partner_id": "MOCKPAYER"}))
"""
from .config import ClientConfig, load_settings
from .core.http import (
    ApiRequest,
    ApiResponse,
    FileData,
    Outcome,
    PokitdokClient,
    Transport,
    create_client,
    create_client_with_token,
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
from .core.platform import ClaimsService, IdentityService, ReferenceService, SchedulingService

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "load_settings",
    "ApiRequest",
    "ApiResponse",
    "FileData",
    "Outcome",
    "PokitdokClient",
    "Transport",
    "create_client",
    "create_client_with_token",
    "ClaimsService",
    "IdentityService",
    "ReferenceService",
    "SchedulingService",
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
