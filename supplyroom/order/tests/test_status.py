import pytest

from .. import OrderStatus
from ..status import derive_order_status


@pytest.mark.parametrize(
    ("received", "expected"),
    [
        ({}, OrderStatus.SENT),
        ({"a": 4}, OrderStatus.PARTIALLY_RECEIVED),
        ({"a": 10}, OrderStatus.PARTIALLY_RECEIVED),
        ({"a": 10, "b": 5}, OrderStatus.RECEIVED),
        ({"a": 12, "b": 5}, OrderStatus.RECEIVED),
        ({"c": 3}, OrderStatus.SENT),
    ],
)
def test_derive_status_of_sent_order(received, expected):
    ordered = {"a": 10, "b": 5}
    assert derive_order_status(OrderStatus.SENT, ordered, received) == expected


def test_partially_received_order_becomes_received():
    assert (
        derive_order_status(
            OrderStatus.PARTIALLY_RECEIVED, {"a": 2, "b": 2}, {"a": 2, "b": 3}
        )
        == OrderStatus.RECEIVED
    )


@pytest.mark.parametrize(
    "status", [OrderStatus.DRAFT, OrderStatus.RECEIVED, OrderStatus.CANCELLED]
)
def test_status_outside_receivable_is_kept(status):
    assert derive_order_status(status, {"a": 1}, {"a": 1}) == status


def test_order_without_items_is_kept():
    assert derive_order_status(OrderStatus.SENT, {}, {"a": 1}) == OrderStatus.SENT
