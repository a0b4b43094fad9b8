"""Base entity class for cache and revenue entities."""

from dataclasses import asdict
from typing import Any


class BaseEntity:
    """Base class for all entities; subclasses are dataclasses, frozen or not."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a JSON-ready dictionary."""
        return asdict(self)
