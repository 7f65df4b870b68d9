"""Result of one transport execution."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

TOKEN_EXPIRED = "TOKEN_EXPIRED"


class Outcome(str, Enum):
    """Classification of an HTTP exchange."""
    SUCCESS = "success"
    AUTH_EXPIRED = "auth_expired"
    FAILURE = "failure"

    @classmethod
    def from_status(cls, status_code: int) -> "Outcome":
        if 200 <= status_code <= 299:
            return cls.SUCCESS
        if status_code == 401:
            return cls.AUTH_EXPIRED
        return cls.FAILURE


@dataclass(frozen=True)
class ApiResponse:
    """Response information for a single attempt.

    A retry produces a new ApiResponse; instances are never mutated.

    Attributes:
        outcome: SUCCESS, AUTH_EXPIRED or FAILURE
        status_code: HTTP status (None on transport failure)
        raw: Underlying requests.Response, if any
        data: Raw body bytes, if any
        json: Decoded JSON body, if any
        error: Transport exception on network failure
    """
    outcome: Outcome = Outcome.FAILURE
    status_code: Optional[int] = None
    raw: Optional[requests.Response] = None
    data: Optional[bytes] = None
    json: Any = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def message(self) -> Optional[str]:
        """Expiry marker for 401 responses, None otherwise."""
        return TOKEN_EXPIRED if self.outcome is Outcome.AUTH_EXPIRED else None
