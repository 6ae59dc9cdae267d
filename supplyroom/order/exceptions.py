"""Exceptions for purchase order operations."""

from typing import TYPE_CHECKING

from ..core.exceptions import InvalidStateError, ValidationError

if TYPE_CHECKING:
    from .models import Order


class OrderNotDraft(InvalidStateError):
    """Raised when trying to edit an order that already left DRAFT."""

    def __init__(self, order: "Order"):
        self.order = order
        self.status = order.status
        super().__init__(
            f"Cannot edit order {order.id}: it has been sent or received "
            f"(status: {self.status}). Only draft orders can be modified."
        )


class InvalidOrderStatus(InvalidStateError):
    """Raised when an order operation needs a different status."""

    def __init__(self, order: "Order", expected_statuses: list[str]):
        self.order = order
        self.expected_statuses = expected_statuses
        self.actual_status = order.status
        expected = ", ".join(f"'{status}'" for status in expected_statuses)
        super().__init__(
            f"Cannot perform operation: order {order.id} is in status "
            f"'{self.actual_status}', expected one of {expected}"
        )


class OrderHasConfirmedReceipts(InvalidStateError):
    def __init__(self, order: "Order", receipt_count: int, action: str = "cancel"):
        self.order = order
        self.receipt_count = receipt_count
        super().__init__(
            f"Cannot {action} order {order.id}: {receipt_count} confirmed goods "
            f"receipt(s) already reference it."
        )


class DuplicateOrderItem(ValidationError):
    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item {item_id} is already in the order", field="item_id")
