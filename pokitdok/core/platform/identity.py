"""Identity management endpoints."""
from __future__ import annotations
from typing import Any, Dict, Optional

from pokitdok.core.http import PokitdokClient


class IdentityService:
    """Service for creating, updating and matching identities."""

    def __init__(self, client: PokitdokClient):
        self.client = client

    def create_identity(self, identity_request: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request("/identity/", "POST", identity_request)

    def update_identity(self, identity_uuid: str, identity_request: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(f"/identity/{identity_uuid}", "PUT", identity_request)

    def identity(
        self,
        identity_uuid: Optional[str] = None,
        identity_request: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Fetch an identity by UUID, or search identities by query parameters."""
        return self.client.request(f"/identity/{identity_uuid or ''}", "GET", identity_request)

    def identity_history(self, identity_uuid: str, historical_version: Optional[str] = None) -> Dict[str, Any]:
        """List the change history of an identity, or fetch one historical version."""
        return self.client.request(f"/identity/{identity_uuid}/history/{historical_version or ''}", "GET")

    def identity_match(self, identity_match_data: Dict[str, Any]) -> Dict[str, Any]:
        """Start an identity match job."""
        return self.client.request("/identity/match", "POST", identity_match_data)
