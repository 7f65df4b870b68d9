"""Parameter value encoding for query strings, form bodies and multipart fields.

Supported values:
- str: used as-is
- bool: "true" / "false"
- int / float: str()
- None: empty string
- list / tuple: items encoded recursively and joined with ","
- mapping: flattened to "key=value" pairs joined with "&"

Anything else raises RequestEncodingError.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote

from .exceptions import RequestEncodingError

# Left unescaped on top of RFC 3986 unreserved characters. "&", "=", "+", "#", "%"
# and space are always escaped.
QUERY_SAFE_CHARS = ",:/@!$'()*"


def stringify(value: Any, key: str = "") -> str:
    """Render a parameter value as plain text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item, key) for item in value)
    if isinstance(value, Mapping):
        return "&".join(f"{k}={stringify(v, str(k))}" for k, v in value.items())
    raise RequestEncodingError(
        f"Unsupported value type {type(value).__name__} for parameter '{key}'"
    )


def encode_query(params: Optional[Mapping[str, Any]]) -> str:
    """Build a URL-safe parameter string, e.g. ``key=val&key2=val2``.

    Args:
        params: Ordered mapping of parameter names to values

    Returns:
        Percent-encoded query string (no leading "?")
    """
    if not params:
        return ""
    pairs = []
    for key, value in params.items():
        escaped_key = quote(str(key), safe=QUERY_SAFE_CHARS)
        escaped_value = quote(stringify(value, str(key)), safe=QUERY_SAFE_CHARS)
        pairs.append(f"{escaped_key}={escaped_value}")
    return "&".join(pairs)


def append_query(url: str, params: Optional[Mapping[str, Any]]) -> str:
    """Append encoded params to a URL, keeping any query it already carries."""
    query = encode_query(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
