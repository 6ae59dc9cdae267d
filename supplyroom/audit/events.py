"""Audit trail entries for procurement and stock operations."""

from typing import TYPE_CHECKING

from . import AuditAction, AuditEntityType
from .models import AuditLog

if TYPE_CHECKING:
    from ..inventory.models import InventoryTransfer, LocationInventory, StockAdjustment
    from ..order.models import Order
    from ..receiving.models import GoodsReceipt, GoodsReceiptLine


def goods_receipt_confirmed_event(
    *,
    receipt: "GoodsReceipt",
    lines: list["GoodsReceiptLine"],
    user=None,
) -> AuditLog:
    """Log goods receipt confirmation.

    Records what was booked into stock, line by line, so the confirmation
    can be traced without joining back to the receipt.
    """
    return AuditLog.objects.create(
        practice_id=receipt.practice_id,
        actor=user,
        entity_type=AuditEntityType.GOODS_RECEIPT,
        entity_id=str(receipt.id),
        action=AuditAction.CONFIRMED,
        changes={
            "line_count": len(lines),
            "total_quantity": sum(line.quantity for line in lines),
            "items": [
                {
                    "item_id": line.item_id,
                    "item_name": line.item.name,
                    "quantity": line.quantity,
                    "batch_number": line.batch_number,
                    "expiry_date": line.expiry_date,
                }
                for line in lines
            ],
        },
        metadata={
            "location_id": receipt.location_id,
            "order_id": receipt.order_id,
            "supplier_id": receipt.supplier_id,
        },
    )


def goods_receipt_cancelled_event(*, receipt: "GoodsReceipt", user=None) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=receipt.practice_id,
        actor=user,
        entity_type=AuditEntityType.GOODS_RECEIPT,
        entity_id=str(receipt.id),
        action=AuditAction.CANCELLED,
        metadata={"location_id": receipt.location_id, "order_id": receipt.order_id},
    )


def goods_receipt_deleted_event(
    *, practice_id, receipt_id, user=None
) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=practice_id,
        actor=user,
        entity_type=AuditEntityType.GOODS_RECEIPT,
        entity_id=str(receipt_id),
        action=AuditAction.DELETED,
    )


def stock_adjusted_event(*, adjustment: "StockAdjustment", user=None) -> AuditLog:
    """Log a manual stock adjustment."""
    return AuditLog.objects.create(
        practice_id=adjustment.practice_id,
        actor=user,
        entity_type=AuditEntityType.STOCK_ADJUSTMENT,
        entity_id=str(adjustment.id),
        action=AuditAction.CREATED,
        changes={
            "item_id": adjustment.item_id,
            "item_name": adjustment.item.name,
            "location_id": adjustment.location_id,
            "location_name": adjustment.location.name,
            "quantity": adjustment.quantity,
            "reason": adjustment.reason,
        },
    )


def inventory_transferred_event(
    *, transfer: "InventoryTransfer", user=None
) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=transfer.practice_id,
        actor=user,
        entity_type=AuditEntityType.INVENTORY_TRANSFER,
        entity_id=str(transfer.id),
        action=AuditAction.CREATED,
        changes={
            "item_id": transfer.item_id,
            "from_location_id": transfer.from_location_id,
            "to_location_id": transfer.to_location_id,
            "quantity": transfer.quantity,
        },
    )


def reorder_settings_updated_event(
    *, inventory: "LocationInventory", practice_id, user=None
) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=practice_id,
        actor=user,
        entity_type=AuditEntityType.LOCATION_INVENTORY,
        entity_id=str(inventory.id),
        action=AuditAction.UPDATED,
        changes={
            "reorder_point": inventory.reorder_point,
            "reorder_quantity": inventory.reorder_quantity,
        },
    )


def location_deleted_event(*, practice_id, location_id, name: str, user=None):
    return AuditLog.objects.create(
        practice_id=practice_id,
        actor=user,
        entity_type=AuditEntityType.LOCATION,
        entity_id=str(location_id),
        action=AuditAction.DELETED,
        changes={"name": name},
    )


def order_created_event(*, order: "Order", user=None) -> AuditLog:
    """Log order creation with its supplier and size."""
    return AuditLog.objects.create(
        practice_id=order.practice_id,
        actor=user,
        entity_type=AuditEntityType.ORDER,
        entity_id=str(order.id),
        action=AuditAction.CREATED,
        changes={
            "supplier_id": order.supplier_id,
            "supplier_name": order.supplier.name,
            "item_count": order.items.count(),
            "total_amount": order.total.amount,
            "currency": order.currency,
        },
    )


def order_sent_event(*, order: "Order", user=None) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=order.practice_id,
        actor=user,
        entity_type=AuditEntityType.ORDER,
        entity_id=str(order.id),
        action=AuditAction.SENT,
        changes={
            "supplier_name": order.supplier.name,
            "item_count": order.items.count(),
            "total_amount": order.total.amount,
        },
    )


def order_cancelled_event(*, order: "Order", user=None) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=order.practice_id,
        actor=user,
        entity_type=AuditEntityType.ORDER,
        entity_id=str(order.id),
        action=AuditAction.CANCELLED,
    )


def order_closed_event(*, order: "Order", user=None) -> AuditLog:
    """Log an order manually closed while still partially received."""
    return AuditLog.objects.create(
        practice_id=order.practice_id,
        actor=user,
        entity_type=AuditEntityType.ORDER,
        entity_id=str(order.id),
        action=AuditAction.CLOSED,
    )


def order_status_changed_event(
    *, order: "Order", previous_status: str, receipt=None, user=None
) -> AuditLog:
    metadata = {}
    if receipt is not None:
        metadata["receipt_id"] = receipt.id
    return AuditLog.objects.create(
        practice_id=order.practice_id,
        actor=user,
        entity_type=AuditEntityType.ORDER,
        entity_id=str(order.id),
        action=AuditAction.STATUS_CHANGED,
        changes={"from": previous_status, "to": order.status},
        metadata=metadata,
    )


def order_deleted_event(*, practice_id, order_id, user=None) -> AuditLog:
    return AuditLog.objects.create(
        practice_id=practice_id,
        actor=user,
        entity_type=AuditEntityType.ORDER,
        entity_id=str(order_id),
        action=AuditAction.DELETED,
    )
