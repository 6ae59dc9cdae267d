import graphene

from ...receiving import models
from ..catalog.types import Item, Supplier
from ..core import ResolveInfo
from ..core.types import NonNullList
from ..order.enums import OrderStatusEnum
from ..order.types import Order
from ..practice.types import Location
from .enums import GoodsReceiptStatusEnum


class GoodsReceiptLine(graphene.ObjectType):
    id = graphene.ID(required=True)
    item = graphene.Field(Item, required=True)
    quantity = graphene.Int(required=True)
    batch_number = graphene.String()
    expiry_date = graphene.Date()
    scanned_gtin = graphene.String(
        description="Barcode scanned when the line was added."
    )
    notes = graphene.String()
    created_at = graphene.DateTime(required=True)

    class Meta:
        description = "Quantity of one item on a goods receipt."


class GoodsReceipt(graphene.ObjectType):
    id = graphene.ID(required=True)
    status = GoodsReceiptStatusEnum(required=True)
    location = graphene.Field(Location, required=True)
    order = graphene.Field(Order, description="Order the delivery belongs to.")
    supplier = graphene.Field(Supplier)
    notes = graphene.String()
    lines = NonNullList(GoodsReceiptLine, required=True)
    total_quantity = graphene.Int(
        required=True, description="Sum of the quantities of all lines."
    )
    received_at = graphene.DateTime(description="When the receipt was confirmed.")
    created_at = graphene.DateTime(required=True)
    updated_at = graphene.DateTime(required=True)

    class Meta:
        description = "A delivery being booked into one location."

    @staticmethod
    def resolve_lines(root: models.GoodsReceipt, info: ResolveInfo):
        return root.lines.select_related("item")

    @staticmethod
    def resolve_total_quantity(root: models.GoodsReceipt, info: ResolveInfo):
        return sum(line.quantity for line in root.lines.all())


class ConfirmGoodsReceiptResult(graphene.ObjectType):
    receipt_id = graphene.ID(required=True)
    lines_processed = graphene.Int(required=True)
    inventory_updated = graphene.Boolean(required=True)
    low_stock_notifications = NonNullList(
        graphene.String,
        required=True,
        description="Names of the received items still below their reorder point.",
    )
    order_id = graphene.ID()
    order_status = OrderStatusEnum(
        description="Status of the linked order after confirmation."
    )

    class Meta:
        description = "Outcome of a goods receipt confirmation."


class MismatchedItem(graphene.ObjectType):
    item_id = graphene.ID(required=True)
    name = graphene.String(required=True)
    unit = graphene.String(required=True)
    ordered = graphene.Int(required=True)
    received = graphene.Int(required=True)


class ReceivingMismatch(graphene.ObjectType):
    order_id = graphene.ID(required=True)
    reference = graphene.String(required=True)
    supplier_name = graphene.String(required=True)
    status = OrderStatusEnum(required=True)
    updated_at = graphene.DateTime(required=True)
    items = NonNullList(MismatchedItem, required=True)

    class Meta:
        description = "An order whose received quantities differ from the ordered ones."
