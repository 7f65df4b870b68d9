"""Construction of a single outgoing HTTP request.

Selects the body encoding for a logical API call:
- files attached: multipart/form-data
- GET: parameters go to the query string, no body
- Content-Type application/json: JSON object body
- Content-Type application/x-www-form-urlencoded: key=value body
- otherwise: no body
"""
from __future__ import annotations
import json
import logging
import uuid
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from requests.structures import CaseInsensitiveDict

from .exceptions import RequestEncodingError
from .files import FileData
from .params import append_query, encode_query, stringify

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


def _media_type(content_type: Optional[str]) -> str:
    """Strip parameters (charset, boundary) from a Content-Type value."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


class ApiRequest:
    """A single HTTP request to the platform.

    Holds method, URL, headers and body. Each field can be patched on its own
    after construction, which is how the token-refresh retry swaps the
    Authorization header without rebuilding the body.

    Usage:
        req = ApiRequest("https://platform.pokitdok.com/api/v4/eligibility/", "POST",
                         headers={"Content-Type": "application/json"},
                         params={"trading_partner_id": "MOCKPAYER"})
        req.set_header("Authorization", "Bearer abc")
    """

    def __init__(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        files: Optional[Sequence[FileData]] = None,
    ):
        """Build the request.

        Args:
            url: Absolute URL
            method: HTTP method (GET, POST, PUT, DELETE)
            headers: Header name/value pairs, applied in order
            params: Ordered mapping of parameter names to values
            files: Files to upload as multipart parts

        Raises:
            RequestEncodingError: If params cannot be serialized
            FileEncodingError: If a file cannot be read
            ValueError: If the method is not supported
        """
        self._url = url
        self._method = "GET"
        self._headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self._body: Optional[bytes] = None

        self.method = method
        for key, value in (headers or {}).items():
            self.set_header(key, value)
        self._build_body(params, files)

    # ─────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────
    def get_header(self, key: str) -> Optional[str]:
        """Return the header value for ``key`` (case-insensitive) or None."""
        return self._headers.get(key)

    def set_header(self, key: str, value: str) -> None:
        self._headers[key] = value

    @property
    def headers(self) -> CaseInsensitiveDict:
        """Live header map; writes go straight to the request."""
        return self._headers

    @property
    def method(self) -> str:
        return self._method

    @method.setter
    def method(self, method: str) -> None:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        self._method = method

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, url: str) -> None:
        self._url = url

    @property
    def body(self) -> Optional[bytes]:
        return self._body

    @body.setter
    def body(self, data: Optional[bytes]) -> None:
        self._body = data

    # ─────────────────────────────────────────────────────────────────────
    # Body encoding
    # ─────────────────────────────────────────────────────────────────────
    def _build_body(
        self,
        params: Optional[Mapping[str, Any]],
        files: Optional[Sequence[FileData]],
    ) -> None:
        if files:
            self._body = self._build_multipart(params, files)
            return

        if not params:
            self._body = None
            return

        if self._method == "GET":
            self._url = append_query(self._url, params)
            self._body = None
            return

        content_type = _media_type(self.get_header("Content-Type"))
        if content_type == JSON_CONTENT_TYPE:
            self._body = self._build_json(params)
        elif content_type == FORM_CONTENT_TYPE:
            self._body = encode_query(params).encode("utf-8")
        else:
            logger.debug(f"No body encoding for Content-Type '{content_type}'; params dropped")
            self._body = None

    @staticmethod
    def _build_json(params: Mapping[str, Any]) -> bytes:
        try:
            return json.dumps(params, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestEncodingError(f"Failed to convert params to JSON: {e}") from e

    def _build_multipart(
        self,
        params: Optional[Mapping[str, Any]],
        files: Sequence[FileData],
    ) -> bytes:
        boundary = f"Boundary-{uuid.uuid4().hex.upper()}"
        delimiter = f"--{boundary}\r\n".encode("utf-8")
        self.set_header("Content-Type", f"multipart/form-data; boundary={boundary}")

        parts = []
        for key, value in (params or {}).items():
            parts.append(delimiter)
            parts.append(
                f'Content-Disposition: form-data; name="{key}"\r\n\r\n{stringify(value, key)}\r\n'.encode("utf-8")
            )
        for file in files:
            parts.append(delimiter)
            parts.append(file.encode())
        parts.append(f"--{boundary}--\r\n".encode("utf-8"))
        return b"".join(parts)

    def __repr__(self) -> str:
        size = len(self._body) if self._body is not None else 0
        return f"<ApiRequest {self._method} {self._url} body={size}B>"
