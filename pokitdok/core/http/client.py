"""PokitDok platform client.

Handles OAuth2 client-credentials authentication, token storage and the
single refresh-and-retry performed when the platform reports an expired token.
"""
from __future__ import annotations
import logging
import threading
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from requests.auth import HTTPBasicAuth

from pokitdok.config.settings import DEFAULT_API_VERSION, DEFAULT_BASE_URL, ClientConfig, load_settings

from .exceptions import (
    MissingCredentialsError,
    PokitdokTransportError,
    ResponseDecodingError,
    TokenExpiredError,
    TokenFetchError,
)
from .files import FileData
from .request import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, ApiRequest
from .response import ApiResponse, Outcome
from .transport import Transport

logger = logging.getLogger(__name__)


class PokitdokClient:
    """HTTP client for PokitDok platform APIs with automatic token management.

    Features:
    - Client-credentials token fetch at construction (unless a token is supplied)
    - One transparent refresh-and-retry on 401 when auto_refresh is enabled
    - Thread-safe token storage; concurrent expiries share a single refresh

    Usage:
        client = PokitdokClient("<client_id>", "<client_secret>", auto_refresh=True)
        payers = client.get("/payers/")
        result = client.post("/eligibility/", {"trading_partner_id": "MOCKPAYER"})
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        version: str = DEFAULT_API_VERSION,
        redirect_uri: Optional[str] = None,
        scope: Optional[str] = None,
        auto_refresh: bool = False,
        token_refresh_callback: Optional[str] = None,
        code: Optional[str] = None,
        token: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        """Initialize the client.

        Args:
            client_id: OAuth client ID for the client-credentials flow
            client_secret: OAuth client secret for the client-credentials flow
            base_url: Platform base URL
            version: API version, appended as /api/<version>
            redirect_uri: Redirect URI for the authorization-code flow (stored only)
            scope: Requested scope for the authorization-code flow (stored only)
            auto_refresh: Re-fetch the access token once when a request gets a 401
            token_refresh_callback: Token callback for the authorization-code flow (stored only)
            code: Authorization code (stored only)
            token: Pre-obtained access token; skips the initial token fetch
            transport: Transport used for every HTTP exchange

        Raises:
            MissingCredentialsError: No token supplied and id/secret missing
            TokenFetchError: Initial token fetch failed
        """
        self.client_id = client_id
        self.client_secret = client_secret
        base_url = base_url.rstrip("/")
        self.url_base = f"{base_url}/api/{version}"
        self.token_url = f"{base_url}/oauth2/token"
        self.authorize_url = f"{base_url}/oauth2/authorize"
        self.redirect_uri = redirect_uri
        self.scope = scope
        self.auto_refresh = auto_refresh
        self.token_refresh_callback = token_refresh_callback
        self.code = code
        self.transport = transport or Transport()

        self._token: Optional[str] = token
        self._token_lock = threading.Lock()
        self._refresh_lock = threading.Lock()

        if self._token is None:
            self.refresh_token()

    @property
    def access_token(self) -> Optional[str]:
        with self._token_lock:
            return self._token

    def _set_token(self, token: str) -> None:
        with self._token_lock:
            self._token = token

    def _bearer(self, token: Optional[str]) -> str:
        return f"Bearer {token or ''}"

    # ─────────────────────────────────────────────────────────────────────
    # Token lifecycle
    # ─────────────────────────────────────────────────────────────────────
    def refresh_token(self) -> str:
        """Fetch a new access token via client credentials and store it.

        The stored token is only replaced on success.

        Returns:
            The new access token

        Raises:
            MissingCredentialsError: If client id or secret is missing (no network call)
            TokenFetchError: On non-2xx, undecodable or incomplete token responses
        """
        if not self.client_id or not self.client_secret:
            raise MissingCredentialsError(
                "client_id and client_secret are required to fetch an access token"
            )

        request = ApiRequest(
            self.token_url,
            "POST",
            headers={"Content-Type": FORM_CONTENT_TYPE},
            params={"grant_type": "client_credentials"},
        )
        HTTPBasicAuth(self.client_id, self.client_secret)(request)

        try:
            response = self.transport.execute(request)
        except ResponseDecodingError as e:
            logger.warning(f"Token endpoint returned malformed JSON: {e}")
            raise TokenFetchError(None, "Malformed token response", self.token_url) from e

        if response.error is not None:
            logger.warning(f"Token fetch failed: {response.error}")
            raise TokenFetchError(None, str(response.error), self.token_url) from response.error

        if not response.succeeded:
            message = response.raw.text if response.raw is not None else "Failed to fetch token"
            logger.warning(f"Token fetch rejected with status {response.status_code}")
            raise TokenFetchError(response.status_code, message, self.token_url)

        token = response.json.get("access_token") if isinstance(response.json, Mapping) else None
        if not isinstance(token, str) or not token:
            raise TokenFetchError(response.status_code, "Response has no access_token", self.token_url)

        self._set_token(token)
        logger.info(f"Obtained access token from {self.token_url}")
        return token

    def _refresh_after_expiry(self, stale_token: Optional[str]) -> str:
        """Refresh once per expiry episode.

        Callers pass the token their request was sent with. If another thread
        already replaced it, that token is reused instead of fetching again.
        """
        with self._refresh_lock:
            current = self.access_token
            if current is not None and current != stale_token:
                logger.debug("Access token already refreshed by a concurrent request")
                return current
            return self.refresh_token()

    # ─────────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────────
    def request(
        self,
        path: str,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
        files: Optional[Sequence[FileData]] = None,
    ) -> Any:
        """Submit an API request.

        Args:
            path: Partial URL; url_base is prepended
            method: HTTP method, defaults to GET
            params: Parameters sent as query string, JSON, or multipart fields
            files: Files uploaded as multipart parts

        Returns:
            Decoded JSON body of the final attempt, or {} when there is none

        Raises:
            DataConversionError: Params, files, or response body failed to convert
            AuthenticationError: Refresh failed, or the token was rejected on the final attempt
            PokitdokTransportError: Network-level failure
        """
        token = self.access_token
        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": self._bearer(token),
        }
        request = ApiRequest(self.url_base + path, method, headers=headers, params=params, files=files)
        response = self.transport.execute(request)

        if self.auto_refresh and response.outcome is Outcome.AUTH_EXPIRED:
            logger.info(f"Access token expired for {request.method} {path}; refreshing")
            token = self._refresh_after_expiry(token)
            request.set_header("Authorization", self._bearer(token))
            response = self.transport.execute(request)

            if response.outcome is Outcome.AUTH_EXPIRED:
                logger.warning(f"{request.method} {request.url} rejected with 401 after token refresh")
                raise TokenExpiredError(request.url)

        return self._handle_result(request, response)

    def _handle_result(self, request: ApiRequest, response: ApiResponse) -> Any:
        """Raise for failures that carry no platform payload; return JSON otherwise."""
        if response.error is not None:
            raise PokitdokTransportError(request.method, request.url, str(response.error)) from response.error

        if not response.succeeded:
            logger.warning(f"{request.method} {request.url} returned status {response.status_code}")

        return response.json if response.json is not None else {}

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Convenience GET."""
        return self.request(path, "GET", params)

    def post(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Convenience POST."""
        return self.request(path, "POST", params)

    def put(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Convenience PUT."""
        return self.request(path, "PUT", params)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Convenience DELETE."""
        return self.request(path, "DELETE", params)


# ─────────────────────────────────────────────────────────────────────────────
# Factory helpers
# ─────────────────────────────────────────────────────────────────────────────
def create_client(config: Optional[ClientConfig] = None, transport: Optional[Transport] = None) -> PokitdokClient:
    """Create a client from a ClientConfig, loading settings from the environment when omitted."""
    if config is None:
        config = load_settings()

    return PokitdokClient(
        client_id=config.client_id or None,
        client_secret=config.client_secret or None,
        base_url=config.base_url,
        version=config.api_version,
        redirect_uri=config.redirect_uri or None,
        scope=config.scope or None,
        auto_refresh=config.auto_refresh,
        token=config.access_token or None,
        transport=transport,
    )


def create_client_with_token(
    token: str,
    base_url: str = DEFAULT_BASE_URL,
    version: str = DEFAULT_API_VERSION,
    transport: Optional[Transport] = None,
) -> PokitdokClient:
    """Create a pre-authenticated client; no token fetch is performed.

    Without credentials the client cannot refresh, so auto_refresh is off.
    """
    return PokitdokClient(base_url=base_url, version=version, token=token, transport=transport)
