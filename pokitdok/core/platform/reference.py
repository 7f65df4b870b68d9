"""Reference data endpoints: activities, pricing, code lookups, payers, providers, pharmacy."""
from __future__ import annotations
from typing import Any, Dict, Optional

from pokitdok.core.http import PokitdokClient


class ReferenceService:
    """Service for read-mostly platform lookups."""

    def __init__(self, client: PokitdokClient):
        """Initialize reference service.

        Args:
            client: Authenticated PokitDok client
        """
        self.client = client

    def activities(
        self,
        activity_id: Optional[str] = None,
        activities_request: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Fetch platform activity information."""
        return self.client.request(f"/activities/{activity_id or ''}", "GET", activities_request)

    # ─────────────────────────────────────────────────────────────────────
    # Pricing
    # ─────────────────────────────────────────────────────────────────────
    def cash_prices(self, cpt_code: str, zip_code: str) -> Dict[str, Any]:
        """Fetch cash prices for a procedure in a zip code area.

        Args:
            cpt_code: CPT code of the procedure
            zip_code: Zip code area to search

        Returns:
            Cash price data
        """
        return self.client.request("/prices/cash", "GET", {"cpt_code": cpt_code, "zip_code": zip_code})

    def insurance_prices(self, cpt_code: str, zip_code: str) -> Dict[str, Any]:
        """Fetch insurance prices for a procedure in a zip code area."""
        return self.client.request("/prices/insurance", "GET", {"cpt_code": cpt_code, "zip_code": zip_code})

    def oop_load_price(self, oop_load_price_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Load pricing data to the out-of-pocket estimate endpoint."""
        return self.client.request("/oop/insurance-load-price", "POST", oop_load_price_request)

    def oop_estimate(self, oop_estimate_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fetch an out-of-pocket estimate."""
        return self.client.request("/oop/insurance-estimate", "POST", oop_estimate_request)

    # ─────────────────────────────────────────────────────────────────────
    # Code lookups
    # ─────────────────────────────────────────────────────────────────────
    def icd_convert(self, code: str) -> Dict[str, Any]:
        """Locate the ICD-10 mapping for an ICD-9 code."""
        return self.client.request(f"/icd/convert/{code}", "GET")

    def mpc(
        self,
        code: Optional[str] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Look up medical procedure information by code, name or description."""
        mpc_request: Dict[str, str] = {}
        if name is not None:
            mpc_request["name"] = name
        if description is not None:
            mpc_request["description"] = description
        return self.client.request(f"/mpc/{code or ''}", "GET", mpc_request)

    # ─────────────────────────────────────────────────────────────────────
    # Directory
    # ─────────────────────────────────────────────────────────────────────
    def payers(self, payers_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fetch payer information for supported trading partners."""
        return self.client.request("/payers/", "GET", payers_request)

    def plans(self, plans_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fetch insurance plan information."""
        return self.client.request("/plans", "GET", plans_request)

    def providers(
        self,
        npi: Optional[str] = None,
        providers_request: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Search the provider directory, or fetch one provider by NPI."""
        return self.client.request(f"/providers/{npi or ''}", "GET", providers_request)

    def trading_partners(self, trading_partner_id: Optional[str] = None) -> Dict[str, Any]:
        """List trading partners, or fetch one by ID."""
        return self.client.request(f"/tradingpartners/{trading_partner_id or ''}", "GET")

    # ─────────────────────────────────────────────────────────────────────
    # Pharmacy
    # ─────────────────────────────────────────────────────────────────────
    def pharmacy_plans(self, pharmacy_plans_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Search drug plans by trading partner and plan identifiers."""
        return self.client.request("/pharmacy/plans", "GET", pharmacy_plans_request)

    def pharmacy_formulary(self, pharmacy_formulary_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Check whether a drug is covered by a drug plan's formulary."""
        return self.client.request("/pharmacy/formulary", "GET", pharmacy_formulary_request)

    def pharmacy_network(
        self,
        npi: Optional[str] = None,
        pharmacy_network_request: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Search in-network pharmacies, or check one pharmacy by NPI."""
        return self.client.request(f"/pharmacy/network/{npi or ''}", "GET", pharmacy_network_request)
