"""Order status derivation from receipt history."""

from collections.abc import Mapping

from . import OrderStatus


def derive_order_status(
    current_status: str, ordered: Mapping, received: Mapping
) -> str:
    """Return the status an order should have given what was received.

    ``ordered`` maps item id to ordered quantity and ``received`` maps item id
    to the cumulative quantity across all confirmed receipts. Receiving more
    than ordered counts as covered. Orders outside ``OrderStatus.RECEIVABLE``
    and orders without items keep their status.
    """
    if current_status not in OrderStatus.RECEIVABLE or not ordered:
        return current_status

    all_covered = True
    any_received = False
    for item_id, quantity in ordered.items():
        received_quantity = received.get(item_id, 0)
        if received_quantity > 0:
            any_received = True
        if received_quantity < quantity:
            all_covered = False

    if all_covered:
        return OrderStatus.RECEIVED
    if any_received:
        return OrderStatus.PARTIALLY_RECEIVED
    return current_status
