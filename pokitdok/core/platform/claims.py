"""Claims, eligibility, authorization, referral and enrollment endpoints."""
from __future__ import annotations
from typing import Any, Dict, Optional

from pokitdok.core.http import FileData, PokitdokClient

X12_CONTENT_TYPE = "application/EDI-X12"


class ClaimsService:
    """Service for submitting claims and related X12 transactions."""

    def __init__(self, client: PokitdokClient):
        """Initialize claims service.

        Args:
            client: Authenticated PokitDok client
        """
        self.client = client

    def claims(self, claims_request: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a claims request."""
        return self.client.request("/claims/", "POST", claims_request)

    def claims_status(self, claims_status_request: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a claims status request."""
        return self.client.request("/claims/status", "POST", claims_status_request)

    def claims_convert(self, x12_claims_file_path: str) -> Dict[str, Any]:
        """Convert a raw X12 837 file to a claims request, mapping ICD-9 codes to ICD-10.

        Args:
            x12_claims_file_path: Path to the X12 claims file

        Returns:
            Converted claims payload
        """
        file = FileData(x12_claims_file_path, X12_CONTENT_TYPE)
        return self.client.request("/claims/convert", "POST", files=[file])

    def eligibility(self, eligibility_request: Dict[str, Any]) -> Dict[str, Any]:
        """Submit an eligibility request."""
        return self.client.request("/eligibility/", "POST", eligibility_request)

    def authorizations(self, authorizations_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Submit an authorization request."""
        return self.client.request("/authorizations/", "POST", authorizations_request)

    def referrals(self, referral_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Submit a referral request."""
        return self.client.request("/referrals/", "POST", referral_request)

    def ccd(self, ccd_request: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a continuity of care document (CCD) request."""
        return self.client.request("/ccd/", "POST", ccd_request)

    def enrollment(self, enrollment_request: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a benefits enrollment/maintenance request."""
        return self.client.request("/enrollment", "POST", enrollment_request)

    def enrollment_snapshot(self, trading_partner_id: str, x12_file_path: str) -> Dict[str, Any]:
        """Upload an X12 834 file as the current enrollment snapshot for a trading partner.

        Args:
            trading_partner_id: Trading partner the snapshot belongs to
            x12_file_path: Path to the X12 enrollment file

        Returns:
            Snapshot representation
        """
        params = {"trading_partner_id": trading_partner_id}
        file = FileData(x12_file_path, X12_CONTENT_TYPE)
        return self.client.request("/enrollment/snapshot", "POST", params, files=[file])

    def enrollment_snapshots(
        self,
        snapshot_id: Optional[str] = None,
        snapshots_request: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """List stored enrollment snapshots, or fetch one by ID."""
        return self.client.request(f"/enrollment/snapshot/{snapshot_id or ''}", "GET", snapshots_request)

    def enrollment_snapshot_data(self, snapshot_id: str) -> Dict[str, Any]:
        """List the enrollment requests that make up a snapshot."""
        return self.client.request(f"/enrollment/snapshot/{snapshot_id}/data", "GET")
