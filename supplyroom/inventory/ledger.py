"""Location inventory ledger.

Every stock level change goes through ``apply_delta``: the row is locked,
the new quantity is computed as current + delta and checked, then written
with an ``F()`` expression so concurrent writers can't lose updates.
"""

import logging

import attrs
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from ..catalog.models import Item
from ..core.tenancy import ensure_owned
from ..practice.models import Location
from .exceptions import NegativeStockError
from .models import LocationInventory, StockAdjustment

logger = logging.getLogger(__name__)


@attrs.frozen
class StockMovement:
    inventory: LocationInventory
    previous_quantity: int
    new_quantity: int
    # reorder point as it was before the movement was applied
    reorder_point: int | None


@attrs.frozen
class LowStockItem:
    item_id: object
    item_name: str
    location_id: object
    location_name: str
    current_quantity: int
    reorder_point: int
    reorder_quantity: int | None
    suggested_order_quantity: int


@transaction.atomic
def apply_delta(*, location: Location, item: Item, delta: int) -> StockMovement:
    """Apply ``delta`` to the stock of ``item`` at ``location``.

    A missing row is created at quantity 0 first. Callers are responsible
    for tenant verification of ``location`` and ``item``.

    Raises:
        NegativeStockError: If the resulting quantity would be below zero.

    """
    inventory, _ = LocationInventory.objects.select_for_update().get_or_create(
        location=location,
        item=item,
        defaults={"quantity": 0},
    )
    previous_quantity = inventory.quantity
    new_quantity = previous_quantity + delta
    if new_quantity < 0:
        raise NegativeStockError(previous_quantity, delta)

    if delta:
        LocationInventory.objects.filter(pk=inventory.pk).update(
            quantity=F("quantity") + delta, updated_at=timezone.now()
        )
        inventory.refresh_from_db(fields=["quantity", "updated_at"])

    return StockMovement(
        inventory=inventory,
        previous_quantity=previous_quantity,
        new_quantity=inventory.quantity,
        reorder_point=inventory.reorder_point,
    )


def get_location_inventory(item_id, location_id, *, practice_id):
    """Return the stock row for item at location, or None.

    Rows whose location or item belongs to another practice are reported as
    missing.
    """
    try:
        return (
            LocationInventory.objects.select_related("item", "location")
            .filter(
                item_id=item_id,
                location_id=location_id,
                item__practice_id=practice_id,
                location__practice_id=practice_id,
            )
            .first()
        )
    except (ValueError, DjangoValidationError):
        return None


@transaction.atomic
def upsert_location_inventory(
    location_id, item_id, delta: int, *, practice_id
) -> StockMovement:
    """Verify both references belong to the practice, then apply ``delta``."""
    location = ensure_owned(
        Location.objects.all(),
        location_id,
        practice_id=practice_id,
        entity="Location",
        field="location_id",
    )
    item = ensure_owned(
        Item.objects.all(),
        item_id,
        practice_id=practice_id,
        entity="Item",
        field="item_id",
    )
    return apply_delta(location=location, item=item, delta=delta)


def record_stock_adjustment(
    *,
    practice_id,
    location: Location,
    item: Item,
    quantity: int,
    reason: str = "",
    note: str = "",
    user=None,
) -> StockAdjustment:
    return StockAdjustment.objects.create(
        practice_id=practice_id,
        location=location,
        item=item,
        quantity=quantity,
        reason=reason or "",
        note=note or "",
        created_by=user,
    )


def find_low_stock_items(*, practice_id) -> list[LowStockItem]:
    """List stock rows below their reorder point with a suggested order size."""
    rows = (
        LocationInventory.objects.select_related("item", "location")
        .filter(
            item__practice_id=practice_id,
            location__practice_id=practice_id,
            reorder_point__isnull=False,
            quantity__lt=F("reorder_point"),
        )
        .order_by("item__name", "location__name")
    )
    return [
        LowStockItem(
            item_id=row.item_id,
            item_name=row.item.name,
            location_id=row.location_id,
            location_name=row.location.name,
            current_quantity=row.quantity,
            reorder_point=row.reorder_point,
            reorder_quantity=row.reorder_quantity,
            suggested_order_quantity=row.reorder_quantity or row.reorder_point,
        )
        for row in rows
    ]


def list_stock_adjustments(
    *, practice_id, item_id=None, location_id=None, limit: int | None = None
):
    adjustments = StockAdjustment.objects.select_related(
        "item", "location", "created_by"
    ).filter(practice_id=practice_id)
    if item_id is not None:
        adjustments = adjustments.filter(item_id=item_id)
    if location_id is not None:
        adjustments = adjustments.filter(location_id=location_id)
    if limit is None:
        limit = settings.STOCK_ADJUSTMENT_HISTORY_LIMIT
    return list(adjustments.order_by("-created_at")[:limit])
