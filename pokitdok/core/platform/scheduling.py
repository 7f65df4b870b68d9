"""Scheduling endpoints (schedulers, appointment types, slots, appointments)."""
from __future__ import annotations
from typing import Any, Dict, Optional

from pokitdok.core.http import PokitdokClient


class SchedulingService:
    """Service for the platform scheduling API."""

    def __init__(self, client: PokitdokClient):
        """Initialize scheduling service.

        Args:
            client: Authenticated PokitDok client
        """
        self.client = client

    def schedulers(self, scheduler_uuid: Optional[str] = None) -> Dict[str, Any]:
        """List schedulers, or fetch one by UUID."""
        return self.client.request(f"/schedule/schedulers/{scheduler_uuid or ''}", "GET")

    def appointment_types(self, appointment_type_uuid: Optional[str] = None) -> Dict[str, Any]:
        """List appointment types, or fetch one by UUID."""
        return self.client.request(f"/schedule/appointmenttypes/{appointment_type_uuid or ''}", "GET")

    def schedule_slots(self, slots_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Create an open slot on a provider's schedule."""
        return self.client.request("/schedule/slots/", "POST", slots_request)

    def appointments(
        self,
        appointment_uuid: Optional[str] = None,
        appointments_request: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Query appointments, or fetch one by UUID.

        Args:
            appointment_uuid: Appointment to fetch (all matching appointments when omitted)
            appointments_request: Query parameters (e.g. appointment_type, start_date)

        Returns:
            Appointment data
        """
        return self.client.request(f"/schedule/appointments/{appointment_uuid or ''}", "GET", appointments_request)

    def book_appointment(self, appointment_uuid: str, appointment_request: Dict[str, Any]) -> Dict[str, Any]:
        """Book an open appointment slot for a patient."""
        return self.client.request(f"/schedule/appointments/{appointment_uuid}", "PUT", appointment_request)

    def update_appointment(self, appointment_uuid: str, appointment_request: Dict[str, Any]) -> Dict[str, Any]:
        """Update attributes of a booked appointment."""
        return self.client.request(f"/schedule/appointments/{appointment_uuid}", "PUT", appointment_request)

    def cancel_appointment(self, appointment_uuid: str) -> Dict[str, Any]:
        """Cancel a booked appointment."""
        return self.client.request(f"/schedule/appointments/{appointment_uuid}", "DELETE")
