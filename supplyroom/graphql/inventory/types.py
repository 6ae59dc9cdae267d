import graphene

from ..catalog.types import Item
from ..practice.types import Location


class LocationInventory(graphene.ObjectType):
    id = graphene.ID(required=True)
    location = graphene.Field(Location, required=True)
    item = graphene.Field(Item, required=True)
    quantity = graphene.Int(required=True, description="Quantity on hand.")
    reorder_point = graphene.Int(
        description="Notify when the quantity drops below this level."
    )
    reorder_quantity = graphene.Int(
        description="Suggested quantity to order when below the reorder point."
    )
    is_below_reorder_point = graphene.Boolean(required=True)
    updated_at = graphene.DateTime(required=True)

    class Meta:
        description = "Stock level of one item at one location."


class StockAdjustment(graphene.ObjectType):
    id = graphene.ID(required=True)
    location = graphene.Field(Location, required=True)
    item = graphene.Field(Item, required=True)
    quantity = graphene.Int(
        required=True, description="Signed change in quantity."
    )
    reason = graphene.String(required=True)
    note = graphene.String(required=True)
    created_at = graphene.DateTime(required=True)

    class Meta:
        description = "A recorded change of the stock of an item at a location."


class InventoryTransfer(graphene.ObjectType):
    id = graphene.ID(required=True)
    item = graphene.Field(Item, required=True)
    from_location = graphene.Field(Location, required=True)
    to_location = graphene.Field(Location, required=True)
    quantity = graphene.Int(required=True)
    note = graphene.String(required=True)
    created_at = graphene.DateTime(required=True)


class LowStockItem(graphene.ObjectType):
    item_id = graphene.ID(required=True)
    item_name = graphene.String(required=True)
    location_id = graphene.ID(required=True)
    location_name = graphene.String(required=True)
    current_quantity = graphene.Int(required=True)
    reorder_point = graphene.Int(required=True)
    reorder_quantity = graphene.Int()
    suggested_order_quantity = graphene.Int(required=True)

    class Meta:
        description = "A stock level below its reorder point."
