import graphene

from ...order import models
from ..catalog.types import Item, Supplier
from ..core import ResolveInfo
from ..core.types import Money, NonNullList
from .enums import OrderStatusEnum


class OrderItem(graphene.ObjectType):
    id = graphene.ID(required=True)
    item = graphene.Field(Item, required=True)
    quantity = graphene.Int(required=True, description="Quantity ordered.")
    unit_price = graphene.Field(Money, required=True, description="Unit cost.")
    total_price = graphene.Field(
        Money, required=True, description="Unit cost times quantity."
    )
    notes = graphene.String(required=True)

    class Meta:
        description = "Represents a line of a purchase order."

    @staticmethod
    def resolve_unit_price(root: models.OrderItem, info: ResolveInfo):
        return root.unit_price

    @staticmethod
    def resolve_total_price(root: models.OrderItem, info: ResolveInfo):
        return root.total_price


class Order(graphene.ObjectType):
    id = graphene.ID(required=True)
    status = OrderStatusEnum(required=True, description="Current order status.")
    reference = graphene.String(required=True)
    notes = graphene.String(required=True)
    supplier = graphene.Field(Supplier, required=True)
    items = NonNullList(OrderItem, required=True)
    total = graphene.Field(Money, required=True)
    sent_at = graphene.DateTime()
    received_at = graphene.DateTime(
        description="When goods first arrived, refreshed when fully received."
    )
    created_at = graphene.DateTime(required=True)
    updated_at = graphene.DateTime(required=True)

    class Meta:
        description = "Represents a purchase order placed with a supplier."

    @staticmethod
    def resolve_items(root: models.Order, info: ResolveInfo):
        return root.items.all()

    @staticmethod
    def resolve_total(root: models.Order, info: ResolveInfo):
        return root.total
