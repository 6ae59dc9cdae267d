"""Goods receipt confirmation.

Confirming a receipt is the only place stock enters a location from a
delivery. Everything below runs in one transaction; if any step raises,
no inventory row, stock adjustment, order status, audit entry or
notification from the attempt survives.
"""

import logging
from collections import defaultdict

import attrs
from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from ..audit.events import goods_receipt_confirmed_event, order_status_changed_event
from ..core.context import RequestContext, require_role
from ..core.tenancy import get_for_practice
from ..inventory import StockAdjustmentReason
from ..inventory.ledger import record_stock_adjustment, upsert_location_inventory
from ..notification.low_stock import check_and_create_low_stock_notification
from ..order.models import Order
from ..order.queries import find_order_by_id
from ..order.status import derive_order_status
from ..practice import MembershipRole
from . import GoodsReceiptStatus
from .exceptions import EmptyReceipt, NonPositiveReceiptLine, ReceiptNotDraft
from .models import GoodsReceipt, GoodsReceiptLine

logger = logging.getLogger(__name__)


@attrs.frozen
class ConfirmGoodsReceiptResult:
    receipt_id: object
    lines_processed: int
    inventory_updated: bool
    low_stock_notifications: list[str]
    order_id: object = None
    order_status: str | None = None


def adjustment_note(receipt: GoodsReceipt, line: GoodsReceiptLine) -> str:
    note = f"Receipt #{str(receipt.id)[:8]}"
    if line.batch_number:
        note += f" - Batch: {line.batch_number}"
    return note


def received_quantities(order: Order, pending_lines=()) -> dict:
    """Cumulative received quantity per item across the order's confirmed receipts.

    ``pending_lines`` are added on top; used for the receipt being confirmed,
    which is still a draft while the order status is recomputed.
    """
    totals = defaultdict(int)
    confirmed = (
        GoodsReceiptLine.objects.filter(
            receipt__order=order,
            receipt__status=GoodsReceiptStatus.CONFIRMED,
        )
        .values("item_id")
        .annotate(total=Sum("quantity"))
    )
    for row in confirmed:
        totals[row["item_id"]] += row["total"]
    for line in pending_lines:
        totals[line.item_id] += line.quantity
    return dict(totals)


def update_order_status_after_receiving(
    receipt: GoodsReceipt, lines: list[GoodsReceiptLine], user=None
) -> Order:
    """Re-derive the linked order's status from its full receipt history."""
    order = find_order_by_id(
        receipt.order_id, practice_id=receipt.practice_id, lock=True
    )
    ordered = {row.item_id: row.quantity for row in order.items.all()}
    received = received_quantities(order, pending_lines=lines)
    new_status = derive_order_status(order.status, ordered, received)
    if new_status == order.status:
        return order

    previous_status = order.status
    order.status = new_status
    order.received_at = timezone.now()
    order.save(update_fields=["status", "received_at", "updated_at"])
    order_status_changed_event(
        order=order, previous_status=previous_status, receipt=receipt, user=user
    )
    logger.info(
        "Order %s moved from %s to %s by receipt %s",
        order.id,
        previous_status,
        new_status,
        receipt.id,
    )
    return order


def validate_receipt_lines(receipt: GoodsReceipt, lines: list[GoodsReceiptLine]):
    """Raise unless every line can be booked into stock."""
    if not lines:
        raise EmptyReceipt(receipt)
    invalid_lines = [line.id for line in lines if line.quantity <= 0]
    if invalid_lines:
        raise NonPositiveReceiptLine(receipt, invalid_lines)


@transaction.atomic
def confirm_goods_receipt(
    context: RequestContext, receipt_id
) -> ConfirmGoodsReceiptResult:
    """Confirm a draft receipt and book its lines into stock.

    The function:
    1. Adds every line's quantity to the location inventory (never capped)
    2. Writes one stock adjustment per line
    3. Runs the low stock check for every line
    4. Re-derives the linked order's status from all confirmed receipts
    5. Writes the audit entry
    6. Marks the receipt CONFIRMED

    Raises:
        NotFoundError: Receipt is missing or belongs to another practice.
        ReceiptNotDraft: Receipt was already confirmed or cancelled.
        EmptyReceipt: Receipt has no lines.
        NonPositiveReceiptLine: A line has a quantity of zero or less.

    """
    require_role(context, MembershipRole.STAFF)
    receipt = get_for_practice(
        GoodsReceipt.objects.select_for_update(),
        receipt_id,
        practice_id=context.practice_id,
        entity="GoodsReceipt",
        field="receipt_id",
    )
    if receipt.status != GoodsReceiptStatus.DRAFT:
        raise ReceiptNotDraft(receipt)

    lines = list(receipt.lines.select_related("item").order_by("created_at", "id"))
    validate_receipt_lines(receipt, lines)

    low_stock_items = []
    for line in lines:
        movement = upsert_location_inventory(
            receipt.location_id,
            line.item_id,
            line.quantity,
            practice_id=receipt.practice_id,
        )
        record_stock_adjustment(
            practice_id=receipt.practice_id,
            location=receipt.location,
            item=line.item,
            quantity=line.quantity,
            reason=StockAdjustmentReason.GOODS_RECEIPT,
            note=adjustment_note(receipt, line),
            user=context.user,
        )
        if (
            movement.reorder_point is not None
            and movement.new_quantity < movement.reorder_point
        ):
            low_stock_items.append(line.item.name)
        check_and_create_low_stock_notification(
            practice_id=receipt.practice_id,
            item_id=line.item_id,
            location_id=receipt.location_id,
            new_quantity=movement.new_quantity,
            reorder_point=movement.reorder_point,
        )

    order_status = None
    if receipt.order_id:
        order = update_order_status_after_receiving(receipt, lines, user=context.user)
        order_status = order.status

    goods_receipt_confirmed_event(receipt=receipt, lines=lines, user=context.user)

    receipt.status = GoodsReceiptStatus.CONFIRMED
    receipt.received_at = timezone.now()
    receipt.save(update_fields=["status", "received_at", "updated_at"])

    logger.info(
        "Confirmed goods receipt %s: %d lines, %d units",
        receipt.id,
        len(lines),
        sum(line.quantity for line in lines),
    )
    return ConfirmGoodsReceiptResult(
        receipt_id=receipt.id,
        lines_processed=len(lines),
        inventory_updated=True,
        low_stock_notifications=low_stock_items,
        order_id=receipt.order_id,
        order_status=order_status,
    )
