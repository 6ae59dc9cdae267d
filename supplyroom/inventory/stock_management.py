"""Manual stock operations outside of receiving."""

import logging

import attrs
from django.db import transaction

from ..audit.events import (
    inventory_transferred_event,
    reorder_settings_updated_event,
    stock_adjusted_event,
)
from ..catalog.models import Item
from ..core.context import RequestContext, require_role
from ..core.exceptions import ValidationError
from ..core.tenancy import ensure_owned
from ..notification.low_stock import check_and_create_low_stock_notification
from ..practice import MembershipRole
from ..practice.models import Location
from . import StockAdjustmentReason
from .exceptions import InsufficientStockForTransfer
from .ledger import (
    apply_delta,
    record_stock_adjustment,
    upsert_location_inventory,
)
from .models import InventoryTransfer, LocationInventory, StockAdjustment

logger = logging.getLogger(__name__)


@attrs.frozen
class StockAdjustmentResult:
    adjustment: StockAdjustment
    inventory: LocationInventory
    previous_quantity: int
    new_quantity: int
    reorder_point: int | None


@transaction.atomic
def adjust_stock(
    context: RequestContext,
    location_id,
    item_id,
    delta: int,
    *,
    reason: str | None = None,
    note: str | None = None,
) -> StockAdjustmentResult:
    """Correct the stock of an item at a location by a signed ``delta``.

    The function:
    1. Verifies the location and the item belong to the caller's practice
    2. Applies the delta, refusing to go below zero
    3. Records the stock adjustment and its audit entry
    4. Runs the low stock check

    Raises:
        CrossPracticeReference: Location or item belongs to another practice.
        NegativeStockError: The result would be below zero.
        ValidationError: ``delta`` is zero.

    """
    require_role(context, MembershipRole.STAFF)
    if not isinstance(delta, int) or isinstance(delta, bool):
        raise ValidationError("Quantity must be a whole number", field="quantity")
    if delta == 0:
        raise ValidationError("Adjustment quantity cannot be zero", field="quantity")

    movement = upsert_location_inventory(
        location_id, item_id, delta, practice_id=context.practice_id
    )
    inventory = movement.inventory
    adjustment = record_stock_adjustment(
        practice_id=context.practice_id,
        location=inventory.location,
        item=inventory.item,
        quantity=delta,
        reason=reason or StockAdjustmentReason.MANUAL,
        note=note or "",
        user=context.user,
    )
    stock_adjusted_event(adjustment=adjustment, user=context.user)
    check_and_create_low_stock_notification(
        practice_id=context.practice_id,
        item_id=inventory.item_id,
        location_id=inventory.location_id,
        new_quantity=movement.new_quantity,
        reorder_point=movement.reorder_point,
    )
    logger.info(
        "Adjusted %s at %s by %+d (%d -> %d)",
        inventory.item_id,
        inventory.location_id,
        delta,
        movement.previous_quantity,
        movement.new_quantity,
    )
    return StockAdjustmentResult(
        adjustment=adjustment,
        inventory=inventory,
        previous_quantity=movement.previous_quantity,
        new_quantity=movement.new_quantity,
        reorder_point=movement.reorder_point,
    )


@transaction.atomic
def transfer_inventory(
    context: RequestContext,
    *,
    item_id,
    from_location_id,
    to_location_id,
    quantity: int,
    note: str | None = None,
) -> InventoryTransfer:
    """Move stock of one item between two locations of the practice."""
    require_role(context, MembershipRole.STAFF)
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise ValidationError("Quantity must be greater than zero", field="quantity")
    if str(from_location_id) == str(to_location_id):
        raise ValidationError(
            "Cannot transfer to the same location", field="to_location_id"
        )

    practice_id = context.practice_id
    item = ensure_owned(
        Item.objects.all(),
        item_id,
        practice_id=practice_id,
        entity="Item",
        field="item_id",
    )
    from_location = ensure_owned(
        Location.objects.all(),
        from_location_id,
        practice_id=practice_id,
        entity="Location",
        field="from_location_id",
    )
    to_location = ensure_owned(
        Location.objects.all(),
        to_location_id,
        practice_id=practice_id,
        entity="Location",
        field="to_location_id",
    )

    source = (
        LocationInventory.objects.select_for_update()
        .filter(location=from_location, item=item)
        .first()
    )
    if source is None or source.quantity < quantity:
        raise InsufficientStockForTransfer(source, quantity)

    outgoing = apply_delta(location=from_location, item=item, delta=-quantity)
    apply_delta(location=to_location, item=item, delta=quantity)

    transfer = InventoryTransfer.objects.create(
        practice_id=practice_id,
        item=item,
        from_location=from_location,
        to_location=to_location,
        quantity=quantity,
        note=note or "",
        created_by=context.user,
    )
    inventory_transferred_event(transfer=transfer, user=context.user)
    check_and_create_low_stock_notification(
        practice_id=practice_id,
        item_id=item.pk,
        location_id=from_location.pk,
        new_quantity=outgoing.new_quantity,
        reorder_point=outgoing.reorder_point,
    )
    return transfer


@transaction.atomic
def update_reorder_settings(
    context: RequestContext,
    *,
    item_id,
    location_id,
    reorder_point: int | None,
    reorder_quantity: int | None,
) -> LocationInventory:
    """Set or clear the reorder thresholds. Never changes the quantity."""
    require_role(context, MembershipRole.STAFF)
    if reorder_point is not None and reorder_point < 0:
        raise ValidationError(
            "Reorder point cannot be negative", field="reorder_point"
        )
    if reorder_quantity is not None and reorder_quantity <= 0:
        raise ValidationError(
            "Reorder quantity must be positive", field="reorder_quantity"
        )

    movement = upsert_location_inventory(
        location_id, item_id, 0, practice_id=context.practice_id
    )
    inventory = movement.inventory
    inventory.reorder_point = reorder_point
    inventory.reorder_quantity = reorder_quantity
    inventory.save(update_fields=["reorder_point", "reorder_quantity", "updated_at"])
    reorder_settings_updated_event(
        inventory=inventory, practice_id=context.practice_id, user=context.user
    )
    return inventory
