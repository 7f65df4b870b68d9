"""Endpoint services for PokitDok platform APIs.

Each service wraps an authenticated PokitdokClient and maps one method to one
API path. Results are the decoded JSON returned by the platform.

Usage:
    from pokitdok.core.http import PokitdokClient
    from pokitdok.core.platform import ClaimsService

    client = PokitdokClient("<client_id>", "<client_secret>", auto_refresh=True)
    claims = ClaimsService(client)
    result = claims.eligibility({"trading_partner_id": "MOCKPAYER", "member": {...}})
"""
from .claims import ClaimsService, X12_CONTENT_TYPE
from .identity import IdentityService
from .reference import ReferenceService
from .scheduling import SchedulingService

__all__ = [
    "ClaimsService",
    "IdentityService",
    "ReferenceService",
    "SchedulingService",
    "X12_CONTENT_TYPE",
]
