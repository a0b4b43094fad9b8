"""Reservations API - client and schemas."""

from pms_client.reservations.client import ReservationsClient
from pms_client.reservations.schemas import ReservationSchema

__all__ = [
    "ReservationsClient",
    "ReservationSchema",
]
