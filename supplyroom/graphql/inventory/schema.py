import graphene

from ..core import ResolveInfo
from ..core.types import NonNullList
from .mutations import ReorderSettingsUpdate, StockAdjust, StockTransfer
from .resolvers import (
    resolve_location_inventory,
    resolve_low_stock_items,
    resolve_stock_adjustments,
)
from .types import LocationInventory, LowStockItem, StockAdjustment


class InventoryQueries(graphene.ObjectType):
    location_inventory = graphene.Field(
        LocationInventory,
        location_id=graphene.Argument(graphene.ID, required=True),
        item_id=graphene.Argument(graphene.ID, required=True),
        description="Stock level of an item at a location.",
    )
    low_stock_items = NonNullList(
        LowStockItem,
        required=True,
        description="Stock levels below their reorder point.",
    )
    stock_adjustments = NonNullList(
        StockAdjustment,
        item_id=graphene.Argument(graphene.ID),
        location_id=graphene.Argument(graphene.ID),
        limit=graphene.Argument(graphene.Int),
        required=True,
        description="Most recent stock adjustments, newest first.",
    )

    @staticmethod
    def resolve_location_inventory(_root, info: ResolveInfo, *, location_id, item_id):
        return resolve_location_inventory(info, location_id, item_id)

    @staticmethod
    def resolve_low_stock_items(_root, info: ResolveInfo):
        return resolve_low_stock_items(info)

    @staticmethod
    def resolve_stock_adjustments(_root, info: ResolveInfo, **kwargs):
        return resolve_stock_adjustments(info, **kwargs)


class InventoryMutations(graphene.ObjectType):
    stock_adjust = StockAdjust.Field()
    stock_transfer = StockTransfer.Field()
    reorder_settings_update = ReorderSettingsUpdate.Field()
