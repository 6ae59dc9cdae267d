"""Purchase order lifecycle operations.

Every operation takes the caller's ``RequestContext`` first; the practice id
used for all scoping comes from it.
"""

import logging
from decimal import Decimal

import attrs
from django.db import transaction
from django.utils import timezone

from ..audit.events import (
    order_cancelled_event,
    order_closed_event,
    order_created_event,
    order_deleted_event,
    order_sent_event,
)
from ..catalog.models import Item, Supplier
from ..core.context import RequestContext, require_role
from ..core.exceptions import ValidationError
from ..core.tenancy import ensure_owned, get_for_practice
from ..practice import MembershipRole
from ..receiving import GoodsReceiptStatus
from . import OrderStatus
from .exceptions import (
    DuplicateOrderItem,
    InvalidOrderStatus,
    OrderHasConfirmedReceipts,
    OrderNotDraft,
)
from .models import Order, OrderItem
from .queries import find_order_by_id

logger = logging.getLogger(__name__)


@attrs.frozen
class OrderItemInput:
    item_id: object
    quantity: int
    unit_price_amount: Decimal = Decimal(0)
    notes: str = ""


def _validate_order_item(quantity: int, unit_price_amount) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError("Quantity must be a whole number", field="quantity")
    if quantity <= 0:
        raise ValidationError("Quantity must be greater than zero", field="quantity")
    if unit_price_amount is not None and Decimal(unit_price_amount) < 0:
        raise ValidationError("Unit price cannot be negative", field="unit_price")


def _ensure_draft(order: Order) -> None:
    if order.status != OrderStatus.DRAFT:
        raise OrderNotDraft(order)


@transaction.atomic
def create_order(
    context: RequestContext,
    *,
    supplier_id,
    items: list[OrderItemInput],
    reference: str = "",
    notes: str = "",
    currency: str | None = None,
) -> Order:
    """Create a DRAFT order with its items.

    The supplier and every item must belong to the caller's practice and an
    item may appear only once.
    """
    require_role(context, MembershipRole.STAFF)
    if not items:
        raise ValidationError("Order must have at least one item", field="items")

    supplier = ensure_owned(
        Supplier.objects.all(),
        supplier_id,
        practice_id=context.practice_id,
        entity="Supplier",
        field="supplier_id",
    )
    seen = set()
    for line in items:
        _validate_order_item(line.quantity, line.unit_price_amount)
        if str(line.item_id) in seen:
            raise DuplicateOrderItem(line.item_id)
        seen.add(str(line.item_id))

    order_kwargs = {}
    if currency:
        order_kwargs["currency"] = currency
    order = Order.objects.create(
        practice_id=context.practice_id,
        supplier=supplier,
        reference=reference,
        notes=notes,
        created_by=context.user,
        **order_kwargs,
    )
    for line in items:
        item = ensure_owned(
            Item.objects.all(),
            line.item_id,
            practice_id=context.practice_id,
            entity="Item",
            field="item_id",
        )
        OrderItem.objects.create(
            order=order,
            item=item,
            quantity=line.quantity,
            unit_price_amount=line.unit_price_amount or Decimal(0),
            notes=line.notes,
        )

    order_created_event(order=order, user=context.user)
    logger.info("Created order %s with %d items", order.id, len(items))
    return order


@transaction.atomic
def add_order_item(
    context: RequestContext,
    order_id,
    *,
    item_id,
    quantity: int,
    unit_price_amount=Decimal(0),
    notes: str = "",
) -> OrderItem:
    require_role(context, MembershipRole.STAFF)
    order = find_order_by_id(order_id, practice_id=context.practice_id, lock=True)
    _ensure_draft(order)
    _validate_order_item(quantity, unit_price_amount)
    item = ensure_owned(
        Item.objects.all(),
        item_id,
        practice_id=context.practice_id,
        entity="Item",
        field="item_id",
    )
    if order.items.filter(item=item).exists():
        raise DuplicateOrderItem(item_id)
    return OrderItem.objects.create(
        order=order,
        item=item,
        quantity=quantity,
        unit_price_amount=unit_price_amount or Decimal(0),
        notes=notes,
    )


def _get_order_item(order_item_id, practice_id) -> OrderItem:
    return get_for_practice(
        OrderItem.objects.select_related("order", "item"),
        order_item_id,
        practice_id=practice_id,
        entity="OrderItem",
        practice_field="order__practice_id",
        field="order_item_id",
    )


@transaction.atomic
def update_order_item(
    context: RequestContext,
    order_item_id,
    *,
    quantity: int | None = None,
    unit_price_amount=None,
    notes: str | None = None,
) -> OrderItem:
    require_role(context, MembershipRole.STAFF)
    order_item = _get_order_item(order_item_id, context.practice_id)
    _ensure_draft(order_item.order)

    update_fields = []
    if quantity is not None:
        _validate_order_item(quantity, None)
        order_item.quantity = quantity
        update_fields.append("quantity")
    if unit_price_amount is not None:
        _validate_order_item(order_item.quantity, unit_price_amount)
        order_item.unit_price_amount = Decimal(unit_price_amount)
        update_fields.append("unit_price_amount")
    if notes is not None:
        order_item.notes = notes
        update_fields.append("notes")
    if update_fields:
        order_item.save(update_fields=update_fields)
    return order_item


@transaction.atomic
def remove_order_item(context: RequestContext, order_item_id) -> None:
    require_role(context, MembershipRole.STAFF)
    order_item = _get_order_item(order_item_id, context.practice_id)
    _ensure_draft(order_item.order)
    order_item.delete()


@transaction.atomic
def send_order(context: RequestContext, order_id) -> Order:
    """Mark a DRAFT order as sent to its supplier."""
    require_role(context, MembershipRole.STAFF)
    order = find_order_by_id(order_id, practice_id=context.practice_id, lock=True)
    if order.status != OrderStatus.DRAFT:
        raise InvalidOrderStatus(order, [OrderStatus.DRAFT])
    if not order.items.exists():
        raise ValidationError("Order must have at least one item", field="order_id")

    order.status = OrderStatus.SENT
    order.sent_at = timezone.now()
    order.save(update_fields=["status", "sent_at", "updated_at"])
    order_sent_event(order=order, user=context.user)
    logger.info("Order %s sent to supplier %s", order.id, order.supplier_id)
    return order


def _ensure_no_confirmed_receipts(order: Order, action: str):
    confirmed_receipts = order.goods_receipts.filter(
        status=GoodsReceiptStatus.CONFIRMED
    ).count()
    if confirmed_receipts:
        raise OrderHasConfirmedReceipts(order, confirmed_receipts, action)


@transaction.atomic
def cancel_order(context: RequestContext, order_id) -> Order:
    require_role(context, MembershipRole.STAFF)
    order = find_order_by_id(order_id, practice_id=context.practice_id, lock=True)
    allowed = [OrderStatus.DRAFT, OrderStatus.SENT]
    if order.status not in allowed:
        raise InvalidOrderStatus(order, allowed)
    _ensure_no_confirmed_receipts(order, "cancel")

    order.status = OrderStatus.CANCELLED
    order.save(update_fields=["status", "updated_at"])
    order_cancelled_event(order=order, user=context.user)
    return order


@transaction.atomic
def close_order(context: RequestContext, order_id) -> Order:
    """Accept a partially received order as complete.

    Used when the supplier will not deliver the remainder.
    """
    require_role(context, MembershipRole.STAFF)
    order = find_order_by_id(order_id, practice_id=context.practice_id, lock=True)
    if order.status != OrderStatus.PARTIALLY_RECEIVED:
        raise InvalidOrderStatus(order, [OrderStatus.PARTIALLY_RECEIVED])

    order.status = OrderStatus.RECEIVED
    order.received_at = timezone.now()
    order.save(update_fields=["status", "received_at", "updated_at"])
    order_closed_event(order=order, user=context.user)
    return order


@transaction.atomic
def delete_order(context: RequestContext, order_id) -> None:
    require_role(context, MembershipRole.STAFF)
    order = find_order_by_id(order_id, practice_id=context.practice_id, lock=True)
    if order.status != OrderStatus.DRAFT:
        raise InvalidOrderStatus(order, [OrderStatus.DRAFT])
    _ensure_no_confirmed_receipts(order, "delete")

    order_pk = order.pk
    order.delete()
    order_deleted_event(
        practice_id=context.practice_id, order_id=order_pk, user=context.user
    )
