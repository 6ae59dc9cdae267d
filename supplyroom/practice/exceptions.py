"""Exceptions for practice and location management."""

from typing import TYPE_CHECKING

from ..core.exceptions import BusinessRuleViolationError

if TYPE_CHECKING:
    from .models import Location


class LocationInUse(BusinessRuleViolationError):
    """Raised when deleting a location that other records still reference."""

    def __init__(self, location: "Location", usage_summary: list[str]):
        self.location = location
        self.usage_summary = usage_summary
        summary = ", ".join(usage_summary)
        super().__init__(
            f"Cannot delete location: it has {summary}. Move its inventory and "
            f"sub-locations and make sure no receipts reference it first.",
            field="location_id",
        )
