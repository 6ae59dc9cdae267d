import pytest

from ...audit import AuditAction, AuditEntityType
from ...audit.models import AuditLog
from ...core.exceptions import CrossPracticeReference, ForbiddenError, ValidationError
from ...notification.models import Notification
from .. import StockAdjustmentReason
from ..exceptions import InsufficientStockForTransfer, NegativeStockError
from ..models import InventoryTransfer, LocationInventory, StockAdjustment
from ..stock_management import (
    adjust_stock,
    transfer_inventory,
    update_reorder_settings,
)


def test_adjust_stock_records_adjustment_and_audit(
    staff_context, location, item, inventory_factory, staff_user
):
    # given
    inventory_factory(location, item, quantity=10)

    # when
    result = adjust_stock(
        staff_context, location.id, item.id, -4, reason=StockAdjustmentReason.DAMAGE
    )

    # then
    assert result.previous_quantity == 10
    assert result.new_quantity == 6
    assert result.inventory.quantity == 6
    adjustment = StockAdjustment.objects.get()
    assert adjustment.quantity == -4
    assert adjustment.reason == "Damaged"
    assert adjustment.created_by == staff_user
    log = AuditLog.objects.get(entity_type=AuditEntityType.STOCK_ADJUSTMENT)
    assert log.action == AuditAction.CREATED
    assert log.changes["quantity"] == -4
    assert log.changes["location_name"] == "Main Storage"


def test_adjust_stock_defaults_to_manual_reason(staff_context, location, item):
    # when
    result = adjust_stock(staff_context, location.id, item.id, 3)

    # then
    assert result.adjustment.reason == StockAdjustmentReason.MANUAL
    assert result.previous_quantity == 0


@pytest.mark.parametrize("delta", [0, 1.5, True])
def test_adjust_stock_rejects_invalid_delta(staff_context, location, item, delta):
    with pytest.raises(ValidationError) as error:
        adjust_stock(staff_context, location.id, item.id, delta)

    assert error.value.field == "quantity"
    assert not StockAdjustment.objects.exists()


def test_adjust_stock_below_zero_changes_nothing(
    staff_context, location, item, inventory_factory
):
    # given
    inventory = inventory_factory(location, item, quantity=1)

    # when
    with pytest.raises(NegativeStockError):
        adjust_stock(staff_context, location.id, item.id, -2)

    # then
    inventory.refresh_from_db()
    assert inventory.quantity == 1
    assert not StockAdjustment.objects.exists()
    assert not AuditLog.objects.exists()


def test_adjust_stock_requires_staff(viewer_context, location, item):
    with pytest.raises(ForbiddenError):
        adjust_stock(viewer_context, location.id, item.id, 1)


def test_adjust_stock_rejects_foreign_item(staff_context, location, other_item):
    with pytest.raises(CrossPracticeReference):
        adjust_stock(staff_context, location.id, other_item.id, 1)


def test_adjust_stock_below_reorder_point_notifies_members(
    staff_context,
    location,
    item,
    inventory_factory,
    staff_user,
    practice_admin_user,
    viewer_user,
):
    # given
    inventory_factory(location, item, quantity=6, reorder_point=5)

    # when
    adjust_stock(staff_context, location.id, item.id, -3)

    # then
    notified = set(Notification.objects.values_list("user_id", flat=True))
    assert notified == {staff_user.id, practice_admin_user.id}


def test_transfer_inventory_moves_stock(
    staff_context, location, second_location, item, inventory_factory
):
    # given
    inventory_factory(location, item, quantity=8)

    # when
    transfer = transfer_inventory(
        staff_context,
        item_id=item.id,
        from_location_id=location.id,
        to_location_id=second_location.id,
        quantity=5,
        note="Restock surgery",
    )

    # then
    assert transfer.quantity == 5
    assert LocationInventory.objects.get(location=location, item=item).quantity == 3
    assert (
        LocationInventory.objects.get(location=second_location, item=item).quantity == 5
    )
    assert AuditLog.objects.filter(
        entity_type=AuditEntityType.INVENTORY_TRANSFER, entity_id=str(transfer.id)
    ).exists()


def test_transfer_inventory_insufficient_stock(
    staff_context, location, second_location, item, inventory_factory
):
    # given
    inventory_factory(location, item, quantity=2)

    # when
    with pytest.raises(InsufficientStockForTransfer) as error:
        transfer_inventory(
            staff_context,
            item_id=item.id,
            from_location_id=location.id,
            to_location_id=second_location.id,
            quantity=3,
        )

    # then
    assert error.value.message == (
        "Insufficient stock at source location (available: 2, required: 3)"
    )
    assert not InventoryTransfer.objects.exists()


def test_transfer_inventory_to_same_location(staff_context, location, item):
    with pytest.raises(ValidationError) as error:
        transfer_inventory(
            staff_context,
            item_id=item.id,
            from_location_id=location.id,
            to_location_id=location.id,
            quantity=1,
        )

    assert error.value.field == "to_location_id"


def test_update_reorder_settings_keeps_quantity(
    staff_context, location, item, inventory_factory
):
    # given
    inventory_factory(location, item, quantity=4)

    # when
    inventory = update_reorder_settings(
        staff_context,
        item_id=item.id,
        location_id=location.id,
        reorder_point=10,
        reorder_quantity=25,
    )

    # then
    inventory.refresh_from_db()
    assert inventory.quantity == 4
    assert inventory.reorder_point == 10
    assert inventory.reorder_quantity == 25
    assert AuditLog.objects.filter(
        entity_type=AuditEntityType.LOCATION_INVENTORY, action=AuditAction.UPDATED
    ).exists()


@pytest.mark.parametrize(
    ("reorder_point", "reorder_quantity", "field"),
    [(-1, None, "reorder_point"), (None, 0, "reorder_quantity")],
)
def test_update_reorder_settings_validation(
    staff_context, location, item, reorder_point, reorder_quantity, field
):
    with pytest.raises(ValidationError) as error:
        update_reorder_settings(
            staff_context,
            item_id=item.id,
            location_id=location.id,
            reorder_point=reorder_point,
            reorder_quantity=reorder_quantity,
        )

    assert error.value.field == field
