"""Pytest shared fixtures for PokitDok client tests."""
import json
import pathlib
import sys
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from pokitdok.core.http import ApiRequest, ApiResponse, Outcome


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch):
    """Fail loudly if a unit test reaches the real network."""

    def _stub_request(method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests, "request", _stub_request)


@pytest.fixture(autouse=True)
def _clear_pokitdok_env(monkeypatch):
    for var in (
        "POKITDOK_CLIENT_ID",
        "POKITDOK_CLIENT_SECRET",
        "POKITDOK_BASE_URL",
        "POKITDOK_API_VERSION",
        "POKITDOK_REDIRECT_URI",
        "POKITDOK_SCOPE",
        "POKITDOK_AUTO_REFRESH",
        "POKITDOK_ACCESS_TOKEN",
    ):
        monkeypatch.delenv(var, raising=False)


# ─────────────────────────────────────────────────────────────────────────────
# Stub Transport
# ─────────────────────────────────────────────────────────────────────────────
def make_response(status_code: Optional[int] = 200, payload=None, error: Optional[BaseException] = None) -> ApiResponse:
    """Build an ApiResponse as Transport.execute would."""
    if error is not None:
        return ApiResponse(outcome=Outcome.FAILURE, error=error)
    data = json.dumps(payload).encode("utf-8") if payload is not None else None
    return ApiResponse(
        outcome=Outcome.from_status(status_code),
        status_code=status_code,
        data=data,
        json=payload,
    )


class StubTransport:
    """Transport double that records requests and replays scripted responses.

    Token endpoint calls are answered from ``token_responses`` and API calls
    from ``responses``; the last scripted response repeats once exhausted.
    """

    def __init__(self, responses=None, token_responses=None):
        self.responses = list(responses or [make_response(200, {})])
        self.token_responses = list(token_responses or [make_response(200, {"access_token": "fresh-token"})])
        self.calls = []
        self.token_calls = []
        self.authorization_headers = []

    def _next(self, queue):
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]

    def execute(self, request: ApiRequest) -> ApiResponse:
        if request.url.endswith("/oauth2/token"):
            self.token_calls.append(request)
            return self._next(self.token_responses)
        self.calls.append(request)
        self.authorization_headers.append(request.get_header("Authorization"))
        return self._next(self.responses)


@pytest.fixture()
def stub_transport():
    return StubTransport()


@pytest.fixture()
def response_factory():
    return make_response


@pytest.fixture()
def transport_factory():
    return StubTransport
