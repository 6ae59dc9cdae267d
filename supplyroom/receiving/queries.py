import attrs
from django.db.models import Count, Prefetch, Sum

from ..core.tenancy import get_for_practice, scoped
from ..order import OrderStatus
from ..order.models import Order
from . import GoodsReceiptStatus
from .models import GoodsReceipt


@attrs.frozen
class GoodsReceiptSummary:
    id: object
    status: str
    location_name: str
    supplier_name: str | None
    order_id: object
    line_count: int
    total_quantity: int
    received_at: object
    created_at: object


@attrs.frozen
class MismatchedItem:
    item_id: object
    name: str
    unit: str
    ordered: int
    received: int


@attrs.frozen
class ReceivingMismatch:
    order_id: object
    reference: str
    supplier_name: str
    status: str
    updated_at: object
    items: tuple[MismatchedItem, ...]


def get_goods_receipt(receipt_id, *, practice_id) -> GoodsReceipt:
    return get_for_practice(
        GoodsReceipt.objects.select_related("location", "order", "supplier"),
        receipt_id,
        practice_id=practice_id,
        entity="GoodsReceipt",
        field="receipt_id",
    )


def find_goods_receipts(
    *,
    practice_id,
    location_id=None,
    order_id=None,
    supplier_id=None,
    status=None,
    received_from=None,
    received_to=None,
):
    receipts = scoped(
        GoodsReceipt.objects.select_related("location", "order", "supplier"),
        practice_id=practice_id,
    )
    if location_id is not None:
        receipts = receipts.filter(location_id=location_id)
    if order_id is not None:
        receipts = receipts.filter(order_id=order_id)
    if supplier_id is not None:
        receipts = receipts.filter(supplier_id=supplier_id)
    if status:
        receipts = receipts.filter(status=status)
    if received_from is not None:
        receipts = receipts.filter(received_at__gte=received_from)
    if received_to is not None:
        receipts = receipts.filter(received_at__lte=received_to)
    return receipts.order_by("-created_at")


def get_goods_receipt_summaries(*, practice_id, **filters) -> list[GoodsReceiptSummary]:
    """Receipt list rows with line counts and totals computed in one query."""
    receipts = find_goods_receipts(practice_id=practice_id, **filters).annotate(
        line_count=Count("lines"),
        total_quantity=Sum("lines__quantity"),
    )
    return [
        GoodsReceiptSummary(
            id=receipt.id,
            status=receipt.status,
            location_name=receipt.location.name,
            supplier_name=receipt.supplier.name if receipt.supplier else None,
            order_id=receipt.order_id,
            line_count=receipt.line_count,
            total_quantity=receipt.total_quantity or 0,
            received_at=receipt.received_at,
            created_at=receipt.created_at,
        )
        for receipt in receipts
    ]


def get_receiving_mismatches(
    *, practice_id, limit: int = 50
) -> list[ReceivingMismatch]:
    """Orders where what arrived differs from what was ordered.

    Partially received orders are always listed. Received orders are listed
    only when some item's cumulative received quantity differs from the
    ordered quantity (over-deliveries included).
    """
    confirmed_receipts = GoodsReceipt.objects.filter(
        status=GoodsReceiptStatus.CONFIRMED
    ).prefetch_related("lines")
    orders = (
        scoped(Order.objects.select_related("supplier"), practice_id=practice_id)
        .filter(status__in=[OrderStatus.PARTIALLY_RECEIVED, OrderStatus.RECEIVED])
        .prefetch_related(
            "items__item",
            Prefetch(
                "goods_receipts",
                queryset=confirmed_receipts,
                to_attr="confirmed_receipts",
            ),
        )
        .order_by("-updated_at")[:limit]
    )

    mismatches = []
    for order in orders:
        received = {}
        for receipt in order.confirmed_receipts:
            for line in receipt.lines.all():
                received[line.item_id] = received.get(line.item_id, 0) + line.quantity

        items = tuple(
            MismatchedItem(
                item_id=order_item.item_id,
                name=order_item.item.name,
                unit=order_item.item.unit,
                ordered=order_item.quantity,
                received=received.get(order_item.item_id, 0),
            )
            for order_item in order.items.all()
            if received.get(order_item.item_id, 0) != order_item.quantity
        )
        if order.status == OrderStatus.PARTIALLY_RECEIVED or items:
            mismatches.append(
                ReceivingMismatch(
                    order_id=order.id,
                    reference=order.reference,
                    supplier_name=order.supplier.name,
                    status=order.status,
                    updated_at=order.updated_at,
                    items=items,
                )
            )
    return mismatches
