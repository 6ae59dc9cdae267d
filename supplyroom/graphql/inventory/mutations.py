import graphene

from ...inventory.exceptions import NegativeStockError
from ...inventory.stock_management import (
    adjust_stock,
    transfer_inventory,
    update_reorder_settings,
)
from ..core import ResolveInfo
from ..core.mutations import BaseMutation
from ..core.types import StockError
from .types import InventoryTransfer, LocationInventory, StockAdjustment


class StockAdjustInput(graphene.InputObjectType):
    location_id = graphene.ID(required=True)
    item_id = graphene.ID(required=True)
    quantity = graphene.Int(
        required=True,
        description="Signed change in quantity; negative values remove stock.",
    )
    reason = graphene.String()
    note = graphene.String()


class StockTransferInput(graphene.InputObjectType):
    item_id = graphene.ID(required=True)
    from_location_id = graphene.ID(required=True)
    to_location_id = graphene.ID(required=True)
    quantity = graphene.Int(required=True)
    note = graphene.String()


class ReorderSettingsInput(graphene.InputObjectType):
    location_id = graphene.ID(required=True)
    item_id = graphene.ID(required=True)
    reorder_point = graphene.Int(description="Leave empty to clear.")
    reorder_quantity = graphene.Int(description="Leave empty to clear.")


class StockAdjust(BaseMutation):
    stock_adjustment = graphene.Field(StockAdjustment)
    location_inventory = graphene.Field(LocationInventory)

    class Arguments:
        input = StockAdjustInput(required=True)

    class Meta:
        description = "Correct the stock of an item at a location."
        error_type_class = StockError
        error_type_field = "stock_errors"
        exception_codes = {NegativeStockError: "NEGATIVE_STOCK"}

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        data = data["input"]
        result = adjust_stock(
            context,
            data["location_id"],
            data["item_id"],
            data["quantity"],
            reason=data.get("reason"),
            note=data.get("note"),
        )
        return StockAdjust(
            stock_adjustment=result.adjustment,
            location_inventory=result.inventory,
        )


class StockTransfer(BaseMutation):
    inventory_transfer = graphene.Field(InventoryTransfer)

    class Arguments:
        input = StockTransferInput(required=True)

    class Meta:
        description = "Move stock of an item between two locations."
        error_type_class = StockError
        error_type_field = "stock_errors"
        exception_codes = {NegativeStockError: "NEGATIVE_STOCK"}

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        data = data["input"]
        transfer = transfer_inventory(
            context,
            item_id=data["item_id"],
            from_location_id=data["from_location_id"],
            to_location_id=data["to_location_id"],
            quantity=data["quantity"],
            note=data.get("note"),
        )
        return StockTransfer(inventory_transfer=transfer)


class ReorderSettingsUpdate(BaseMutation):
    location_inventory = graphene.Field(LocationInventory)

    class Arguments:
        input = ReorderSettingsInput(required=True)

    class Meta:
        description = "Set or clear the reorder thresholds of an item at a location."
        error_type_class = StockError
        error_type_field = "stock_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        data = data["input"]
        inventory = update_reorder_settings(
            context,
            item_id=data["item_id"],
            location_id=data["location_id"],
            reorder_point=data.get("reorder_point"),
            reorder_quantity=data.get("reorder_quantity"),
        )
        return ReorderSettingsUpdate(location_inventory=inventory)
