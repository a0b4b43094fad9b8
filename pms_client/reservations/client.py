"""Reservations API client."""

from pms_client.base import BaseClient


class ReservationsClient(BaseClient):
    """Client for reservation endpoints."""

    async def reservations(self, params: dict) -> list[dict]:
        """GET /reservations - reservations for one listing."""
        if not params.get("listingId"):
            raise ValueError("listingId is required")

        query = {k: v for k, v in params.items() if v is not None}
        query.setdefault("limit", 1000000)
        payload = await self._get("reservations", params=query)
        return payload.get("result", []) if isinstance(payload, dict) else payload
