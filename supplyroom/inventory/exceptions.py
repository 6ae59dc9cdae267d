"""Exceptions for inventory ledger operations."""

from typing import TYPE_CHECKING

from ..core.exceptions import BusinessRuleViolationError, ValidationError

if TYPE_CHECKING:
    from .models import LocationInventory


class NegativeStockError(ValidationError):
    """Raised when a delta would take a stock level below zero."""

    def __init__(self, current: int, delta: int):
        self.current = current
        self.delta = delta
        self.result = current + delta
        super().__init__(
            f"Adjustment would result in negative quantity "
            f"({current} + {delta} = {self.result})",
            field="quantity",
        )


class InsufficientStockForTransfer(BusinessRuleViolationError):
    def __init__(self, inventory: "LocationInventory | None", required: int):
        self.inventory = inventory
        self.available = inventory.quantity if inventory else 0
        self.required = required
        super().__init__(
            f"Insufficient stock at source location "
            f"(available: {self.available}, required: {required})",
            field="quantity",
        )
