"""Shared pytest fixtures for supplyroom tests."""

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from ..catalog.models import Item, Product, Supplier
from ..core.context import RequestContext
from ..inventory.models import LocationInventory
from ..order import OrderStatus
from ..order.models import Order, OrderItem
from ..practice import MembershipRole
from ..practice.models import Location, Membership, Practice
from ..receiving import GoodsReceiptStatus
from ..receiving.models import GoodsReceipt, GoodsReceiptLine

User = get_user_model()


def _create_member(practice, username, role, is_active=True):
    user = User.objects.create_user(
        username=username, email=f"{username}@example.com", password="password"
    )
    Membership.objects.create(
        practice=practice, user=user, role=role, is_active=is_active
    )
    return user


@pytest.fixture
def practice(db):
    return Practice.objects.create(
        name="Happy Paws Veterinary", slug="happy-paws", country="NL"
    )


@pytest.fixture
def other_practice(db):
    return Practice.objects.create(
        name="Bright Smile Dental", slug="bright-smile", country="BE"
    )


@pytest.fixture
def staff_user(practice):
    return _create_member(practice, "staff", MembershipRole.STAFF)


@pytest.fixture
def practice_admin_user(practice):
    return _create_member(practice, "practice-admin", MembershipRole.ADMIN)


@pytest.fixture
def viewer_user(practice):
    return _create_member(practice, "viewer", MembershipRole.VIEWER)


@pytest.fixture
def other_practice_user(other_practice):
    return _create_member(other_practice, "other-staff", MembershipRole.STAFF)


@pytest.fixture
def staff_context(practice, staff_user):
    return RequestContext(
        user=staff_user, practice_id=practice.id, role=MembershipRole.STAFF
    )


@pytest.fixture
def admin_context(practice, practice_admin_user):
    return RequestContext(
        user=practice_admin_user, practice_id=practice.id, role=MembershipRole.ADMIN
    )


@pytest.fixture
def viewer_context(practice, viewer_user):
    return RequestContext(
        user=viewer_user, practice_id=practice.id, role=MembershipRole.VIEWER
    )


@pytest.fixture
def other_practice_context(other_practice, other_practice_user):
    return RequestContext(
        user=other_practice_user,
        practice_id=other_practice.id,
        role=MembershipRole.STAFF,
    )


@pytest.fixture
def location_factory(practice):
    """Create locations, by default in ``practice``."""

    def create_location(name="Storage", **kwargs):
        kwargs.setdefault("practice", practice)
        return Location.objects.create(name=name, **kwargs)

    return create_location


@pytest.fixture
def location(location_factory):
    return location_factory(name="Main Storage")


@pytest.fixture
def second_location(location_factory):
    return location_factory(name="Surgery Cabinet")


@pytest.fixture
def other_location(location_factory, other_practice):
    return location_factory(name="Foreign Storage", practice=other_practice)


@pytest.fixture
def supplier(practice):
    return Supplier.objects.create(
        practice=practice,
        name="VetSupply BV",
        email="orders@vetsupply.example.com",
        account_number="HP-0042",
    )


@pytest.fixture
def other_supplier(other_practice):
    return Supplier.objects.create(practice=other_practice, name="DentalDirect")


@pytest.fixture
def product_factory(db):
    def create_product(name="Product", gtin=None, **kwargs):
        return Product.objects.create(name=name, gtin=gtin, **kwargs)

    return create_product


@pytest.fixture
def item_factory(practice, product_factory):
    """Create practice items, each with its own catalog product."""

    def create_item(name="Item", unit="box", gtin=None, **kwargs):
        kwargs.setdefault("practice", practice)
        product = kwargs.pop("product", None) or product_factory(name=name, gtin=gtin)
        return Item.objects.create(name=name, unit=unit, product=product, **kwargs)

    return create_item


@pytest.fixture
def item(item_factory, supplier):
    return item_factory(
        name="Amoxicillin 250mg",
        gtin="4006381333931",
        sku="AMX-250",
        default_supplier=supplier,
    )


@pytest.fixture
def second_item(item_factory):
    return item_factory(name="Sterile Gauze 10x10", unit="pack")


@pytest.fixture
def other_item(item_factory, other_practice):
    return item_factory(name="Composite Resin", practice=other_practice)


@pytest.fixture
def inventory_factory(db):
    def create_inventory(location, item, quantity=0, **kwargs):
        return LocationInventory.objects.create(
            location=location, item=item, quantity=quantity, **kwargs
        )

    return create_inventory


@pytest.fixture
def order_factory(practice, supplier, staff_user):
    """Create orders with ``items`` given as ``(item, quantity)`` pairs."""

    def create_order(items=(), status=OrderStatus.SENT, **kwargs):
        kwargs.setdefault("practice", practice)
        kwargs.setdefault("supplier", supplier)
        kwargs.setdefault("created_by", staff_user)
        if status != OrderStatus.DRAFT:
            kwargs.setdefault("sent_at", timezone.now())
        if status in (OrderStatus.PARTIALLY_RECEIVED, OrderStatus.RECEIVED):
            kwargs.setdefault("received_at", timezone.now())
        order = Order.objects.create(status=status, **kwargs)
        for ordered_item, quantity in items:
            OrderItem.objects.create(order=order, item=ordered_item, quantity=quantity)
        return order

    return create_order


@pytest.fixture
def sent_order(order_factory, item, second_item):
    return order_factory(
        items=[(item, 10), (second_item, 5)], reference="PO-2024-001"
    )


@pytest.fixture
def draft_order(order_factory, item):
    return order_factory(items=[(item, 3)], status=OrderStatus.DRAFT)


@pytest.fixture
def receipt_factory(practice, location, staff_user):
    """Create receipts with ``lines`` given as ``(item, quantity)`` pairs."""

    def create_receipt(lines=(), status=GoodsReceiptStatus.DRAFT, **kwargs):
        kwargs.setdefault("practice", practice)
        kwargs.setdefault("location", location)
        kwargs.setdefault("created_by", staff_user)
        if status == GoodsReceiptStatus.CONFIRMED:
            kwargs.setdefault("received_at", timezone.now())
        receipt = GoodsReceipt.objects.create(status=status, **kwargs)
        for received_item, quantity in lines:
            GoodsReceiptLine.objects.create(
                receipt=receipt, item=received_item, quantity=quantity
            )
        return receipt

    return create_receipt


@pytest.fixture
def draft_receipt(receipt_factory):
    return receipt_factory()
