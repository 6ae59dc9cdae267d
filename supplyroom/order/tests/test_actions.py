from decimal import Decimal

import pytest
from freezegun import freeze_time
from prices import Money

from ...audit import AuditAction, AuditEntityType
from ...audit.models import AuditLog
from ...core.exceptions import CrossPracticeReference, ForbiddenError, ValidationError
from ...receiving import GoodsReceiptStatus
from ...receiving.reconciliation import confirm_goods_receipt
from .. import OrderStatus
from ..actions import (
    OrderItemInput,
    add_order_item,
    cancel_order,
    close_order,
    create_order,
    delete_order,
    remove_order_item,
    send_order,
    update_order_item,
)
from ..exceptions import (
    DuplicateOrderItem,
    InvalidOrderStatus,
    OrderHasConfirmedReceipts,
    OrderNotDraft,
)
from ..models import Order
from ..queries import list_orders


def test_create_order(staff_context, supplier, item, second_item, staff_user):
    # when
    order = create_order(
        staff_context,
        supplier_id=supplier.id,
        items=[
            OrderItemInput(
                item_id=item.id, quantity=2, unit_price_amount=Decimal("4.50")
            ),
            OrderItemInput(item_id=second_item.id, quantity=10),
        ],
        reference="PO-1",
    )

    # then
    assert order.status == OrderStatus.DRAFT
    assert order.created_by == staff_user
    assert order.items.count() == 2
    assert order.total == Money(Decimal("9.00"), "EUR")
    log = AuditLog.objects.get(entity_type=AuditEntityType.ORDER)
    assert log.action == AuditAction.CREATED
    assert log.changes["item_count"] == 2
    assert log.changes["supplier_name"] == "VetSupply BV"


def test_create_order_requires_items(staff_context, supplier):
    with pytest.raises(ValidationError) as error:
        create_order(staff_context, supplier_id=supplier.id, items=[])

    assert error.value.field == "items"


def test_create_order_rejects_duplicate_items(staff_context, supplier, item):
    with pytest.raises(DuplicateOrderItem):
        create_order(
            staff_context,
            supplier_id=supplier.id,
            items=[
                OrderItemInput(item_id=item.id, quantity=1),
                OrderItemInput(item_id=item.id, quantity=2),
            ],
        )

    assert not Order.objects.exists()


def test_create_order_rejects_foreign_item(staff_context, supplier, other_item):
    with pytest.raises(CrossPracticeReference):
        create_order(
            staff_context,
            supplier_id=supplier.id,
            items=[OrderItemInput(item_id=other_item.id, quantity=1)],
        )

    assert not Order.objects.exists()


def test_create_order_rejects_foreign_supplier(staff_context, other_supplier, item):
    with pytest.raises(CrossPracticeReference) as error:
        create_order(
            staff_context,
            supplier_id=other_supplier.id,
            items=[OrderItemInput(item_id=item.id, quantity=1)],
        )

    assert error.value.field == "supplier_id"


def test_create_order_requires_staff(viewer_context, supplier, item):
    with pytest.raises(ForbiddenError):
        create_order(
            viewer_context,
            supplier_id=supplier.id,
            items=[OrderItemInput(item_id=item.id, quantity=1)],
        )


def test_edit_draft_order_items(staff_context, draft_order, second_item):
    # given
    order_item = add_order_item(
        staff_context, draft_order.id, item_id=second_item.id, quantity=4
    )

    # when
    update_order_item(
        staff_context, order_item.id, quantity=6, unit_price_amount="1.25"
    )

    # then
    order_item.refresh_from_db()
    assert order_item.quantity == 6
    assert order_item.unit_price_amount == Decimal("1.25")

    # when
    remove_order_item(staff_context, order_item.id)

    # then
    assert draft_order.items.count() == 1


def test_add_duplicate_item_to_draft(staff_context, draft_order, item):
    with pytest.raises(DuplicateOrderItem):
        add_order_item(staff_context, draft_order.id, item_id=item.id, quantity=1)


def test_sent_order_items_are_frozen(staff_context, sent_order):
    # given
    order_item = sent_order.items.first()

    # when / then
    with pytest.raises(OrderNotDraft):
        update_order_item(staff_context, order_item.id, quantity=1)
    with pytest.raises(OrderNotDraft):
        remove_order_item(staff_context, order_item.id)


@freeze_time("2024-03-01 09:30:00")
def test_send_order(staff_context, draft_order):
    # when
    order = send_order(staff_context, draft_order.id)

    # then
    order.refresh_from_db()
    assert order.status == OrderStatus.SENT
    assert order.sent_at.isoformat() == "2024-03-01T09:30:00+00:00"
    assert AuditLog.objects.filter(
        entity_id=str(order.id), action=AuditAction.SENT
    ).exists()


def test_send_order_twice(staff_context, sent_order):
    with pytest.raises(InvalidOrderStatus) as error:
        send_order(staff_context, sent_order.id)

    assert "expected one of 'draft'" in error.value.message


def test_send_empty_draft(staff_context, order_factory):
    # given
    order = order_factory(status=OrderStatus.DRAFT)

    # when / then
    with pytest.raises(ValidationError):
        send_order(staff_context, order.id)


def test_cancel_sent_order(staff_context, sent_order):
    # when
    order = cancel_order(staff_context, sent_order.id)

    # then
    assert order.status == OrderStatus.CANCELLED
    assert AuditLog.objects.filter(
        entity_id=str(order.id), action=AuditAction.CANCELLED
    ).exists()


def test_cancel_order_with_confirmed_receipt(
    staff_context, sent_order, receipt_factory, item
):
    # given
    receipt_factory(
        order=sent_order, lines=[(item, 1)], status=GoodsReceiptStatus.CONFIRMED
    )

    # when
    with pytest.raises(OrderHasConfirmedReceipts):
        cancel_order(staff_context, sent_order.id)

    # then
    sent_order.refresh_from_db()
    assert sent_order.status == OrderStatus.SENT


def test_close_partially_received_order(staff_context, order_factory, item):
    # given
    order = order_factory(items=[(item, 5)], status=OrderStatus.PARTIALLY_RECEIVED)

    # when
    close_order(staff_context, order.id)

    # then
    order.refresh_from_db()
    assert order.status == OrderStatus.RECEIVED
    assert AuditLog.objects.filter(
        entity_id=str(order.id), action=AuditAction.CLOSED
    ).exists()


def test_close_sent_order_rejected(staff_context, sent_order):
    with pytest.raises(InvalidOrderStatus):
        close_order(staff_context, sent_order.id)


def test_delete_draft_order_unlinks_receipts(
    staff_context, draft_order, receipt_factory
):
    # given
    receipt = receipt_factory(order=draft_order)

    # when
    delete_order(staff_context, draft_order.id)

    # then
    assert not Order.objects.filter(id=draft_order.id).exists()
    receipt.refresh_from_db()
    assert receipt.order is None
    assert AuditLog.objects.filter(
        entity_id=str(draft_order.id), action=AuditAction.DELETED
    ).exists()


def test_delete_draft_order_with_confirmed_receipt(
    staff_context, draft_order, receipt_factory, item
):
    # given
    receipt = receipt_factory(order=draft_order, lines=[(item, 5)])
    confirm_goods_receipt(staff_context, receipt.id)

    # when
    with pytest.raises(OrderHasConfirmedReceipts) as error:
        delete_order(staff_context, draft_order.id)

    # then
    assert error.value.message == (
        f"Cannot delete order {draft_order.id}: 1 confirmed goods receipt(s) "
        "already reference it."
    )
    assert Order.objects.filter(id=draft_order.id).exists()
    receipt.refresh_from_db()
    assert receipt.order_id == draft_order.id


def test_delete_sent_order_rejected(staff_context, sent_order):
    with pytest.raises(InvalidOrderStatus):
        delete_order(staff_context, sent_order.id)


def test_list_orders_filters(order_factory, item, practice, other_practice, supplier):
    # given
    sent = order_factory(items=[(item, 1)])
    draft = order_factory(items=[(item, 1)], status=OrderStatus.DRAFT)

    # when / then
    assert list(list_orders(practice_id=practice.id, status=OrderStatus.SENT)) == [sent]
    assert set(
        list_orders(
            practice_id=practice.id, status=[OrderStatus.SENT, OrderStatus.DRAFT]
        )
    ) == {sent, draft}
    assert not list_orders(practice_id=other_practice.id).exists()
