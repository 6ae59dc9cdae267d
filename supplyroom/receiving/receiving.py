"""Goods receipt lifecycle: create, cancel and delete.

Adding lines lives in ``lines.py`` and confirmation in ``reconciliation.py``.
"""

import logging

from django.db import transaction

from ..audit.events import goods_receipt_cancelled_event, goods_receipt_deleted_event
from ..catalog.models import Supplier
from ..core.context import RequestContext, require_role
from ..core.tenancy import ensure_owned, get_for_practice
from ..order.models import Order
from ..practice import MembershipRole
from ..practice.models import Location
from . import GoodsReceiptStatus
from .exceptions import ConfirmedReceiptDeletion, ReceiptNotDraft
from .models import GoodsReceipt

logger = logging.getLogger(__name__)


@transaction.atomic
def create_goods_receipt(
    context: RequestContext,
    *,
    location_id,
    order_id=None,
    supplier_id=None,
    notes: str | None = None,
) -> GoodsReceipt:
    """Start a draft receipt at a location, optionally against an order.

    When an order is given without a supplier the order's supplier is used.
    """
    require_role(context, MembershipRole.STAFF)
    practice_id = context.practice_id
    location = ensure_owned(
        Location.objects.all(),
        location_id,
        practice_id=practice_id,
        entity="Location",
        field="location_id",
    )
    order = None
    if order_id is not None:
        order = ensure_owned(
            Order.objects.all(),
            order_id,
            practice_id=practice_id,
            entity="Order",
            field="order_id",
        )
    supplier = None
    if supplier_id is not None:
        supplier = ensure_owned(
            Supplier.objects.all(),
            supplier_id,
            practice_id=practice_id,
            entity="Supplier",
            field="supplier_id",
        )
    elif order is not None:
        supplier = order.supplier

    receipt = GoodsReceipt.objects.create(
        practice_id=practice_id,
        location=location,
        order=order,
        supplier=supplier,
        notes=notes,
        created_by=context.user,
    )
    logger.debug("Started goods receipt %s at %s", receipt.id, location.name)
    return receipt


@transaction.atomic
def cancel_goods_receipt(context: RequestContext, receipt_id) -> GoodsReceipt:
    require_role(context, MembershipRole.STAFF)
    receipt = get_for_practice(
        GoodsReceipt.objects.select_for_update(),
        receipt_id,
        practice_id=context.practice_id,
        entity="GoodsReceipt",
        field="receipt_id",
    )
    if not receipt.is_draft:
        raise ReceiptNotDraft(receipt)

    receipt.status = GoodsReceiptStatus.CANCELLED
    receipt.save(update_fields=["status", "updated_at"])
    goods_receipt_cancelled_event(receipt=receipt, user=context.user)
    return receipt


@transaction.atomic
def delete_goods_receipt(context: RequestContext, receipt_id) -> None:
    """Delete a draft or cancelled receipt together with its lines."""
    require_role(context, MembershipRole.ADMIN)
    receipt = get_for_practice(
        GoodsReceipt.objects.select_for_update(),
        receipt_id,
        practice_id=context.practice_id,
        entity="GoodsReceipt",
        field="receipt_id",
    )
    if receipt.status == GoodsReceiptStatus.CONFIRMED:
        raise ConfirmedReceiptDeletion(receipt)

    receipt_pk = receipt.pk
    receipt.delete()
    goods_receipt_deleted_event(
        practice_id=context.practice_id, receipt_id=receipt_pk, user=context.user
    )
