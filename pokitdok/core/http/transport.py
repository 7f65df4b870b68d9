"""Blocking HTTP transport for built requests."""
from __future__ import annotations
import json
import logging
from typing import Any, Optional

import requests

from .exceptions import ResponseDecodingError
from .request import ApiRequest
from .response import ApiResponse, Outcome

logger = logging.getLogger(__name__)

# None keeps the requests default (wait until the server answers or the socket fails)
REQUEST_TIMEOUT = None


def decode_json(data: Optional[bytes], endpoint: str) -> Any:
    """Decode a response body, returning None for an absent or blank body.

    Raises:
        ResponseDecodingError: If the body is not valid JSON
    """
    if not data or not data.strip():
        return None
    try:
        return json.loads(data)
    except (ValueError, UnicodeDecodeError) as e:
        raise ResponseDecodingError(f"Failed to parse JSON from {endpoint}: {e}") from e


class Transport:
    """Executes an ApiRequest and classifies the outcome.

    - 2xx: Outcome.SUCCESS
    - 401: Outcome.AUTH_EXPIRED (message "TOKEN_EXPIRED")
    - anything else, or a network failure: Outcome.FAILURE
    """

    def __init__(self, timeout: Optional[float] = REQUEST_TIMEOUT):
        self.timeout = timeout

    def execute(self, request: ApiRequest) -> ApiResponse:
        """Send the request and wait for the response.

        Args:
            request: Fully built request

        Returns:
            ApiResponse for this attempt

        Raises:
            ResponseDecodingError: If a response body is present but not JSON
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            resp = requests.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{request.method} {request.url} transport failure: {e}")
            return ApiResponse(outcome=Outcome.FAILURE, error=e)

        outcome = Outcome.from_status(resp.status_code)
        logger.debug(f"{request.method} {request.url} -> {resp.status_code} ({outcome.value})")
        data = resp.content
        return ApiResponse(
            outcome=outcome,
            status_code=resp.status_code,
            raw=resp,
            data=data,
            json=decode_json(data, request.url),
        )
