"""Property-management API client package."""

from pms_client.base import BaseClient, safe_request
from pms_client.finance import FinanceClient
from pms_client.reservations import ReservationsClient

__all__ = [
    # Base
    "BaseClient",
    "safe_request",
    # Clients
    "FinanceClient",
    "ReservationsClient",
]
