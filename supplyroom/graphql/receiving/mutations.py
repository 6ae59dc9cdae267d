import graphene

from ...receiving.lines import (
    ReceiptLineInput,
    add_receipt_line,
    remove_receipt_line,
    update_receipt_line,
)
from ...receiving.queries import get_goods_receipt
from ...receiving.receiving import (
    cancel_goods_receipt,
    create_goods_receipt,
    delete_goods_receipt,
)
from ...receiving.reconciliation import confirm_goods_receipt
from ..core import ResolveInfo
from ..core.mutations import BaseMutation
from ..core.types import GoodsReceiptError
from .types import ConfirmGoodsReceiptResult, GoodsReceipt, GoodsReceiptLine


class GoodsReceiptCreateInput(graphene.InputObjectType):
    location_id = graphene.ID(
        required=True, description="Location the goods are booked into."
    )
    order_id = graphene.ID(description="Order the delivery belongs to.")
    supplier_id = graphene.ID(
        description="Supplier of the delivery. Defaults to the order's supplier."
    )
    notes = graphene.String()


class GoodsReceiptLineInput(graphene.InputObjectType):
    item_id = graphene.ID(required=True, description="ID of the received item.")
    quantity = graphene.Int(required=True, description="Quantity received.")
    batch_number = graphene.String()
    expiry_date = graphene.Date()
    scanned_gtin = graphene.String(description="Barcode scanned for the item.")
    notes = graphene.String()


class GoodsReceiptLineUpdateInput(graphene.InputObjectType):
    quantity = graphene.Int()
    batch_number = graphene.String()
    expiry_date = graphene.Date()
    notes = graphene.String()


class GoodsReceiptCreate(BaseMutation):
    goods_receipt = graphene.Field(GoodsReceipt, description="The draft receipt.")

    class Arguments:
        input = GoodsReceiptCreateInput(
            required=True, description="Fields of the receipt."
        )

    class Meta:
        description = "Start a draft goods receipt at a location."
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        data = data["input"]
        receipt = create_goods_receipt(
            context,
            location_id=data["location_id"],
            order_id=data.get("order_id"),
            supplier_id=data.get("supplier_id"),
            notes=data.get("notes"),
        )
        return GoodsReceiptCreate(goods_receipt=receipt)


class GoodsReceiptLineAdd(BaseMutation):
    goods_receipt_line = graphene.Field(
        GoodsReceiptLine,
        description="The created line, or the existing line the item was merged into.",
    )

    class Arguments:
        receipt_id = graphene.ID(required=True, description="ID of a draft receipt.")
        input = GoodsReceiptLineInput(required=True, description="Received item.")

    class Meta:
        description = (
            "Add an item to a draft receipt. Adding an item already on the "
            "receipt increases the quantity of its line."
        )
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        line_data = data["input"]
        line = add_receipt_line(
            context,
            data["receipt_id"],
            ReceiptLineInput(
                item_id=line_data["item_id"],
                quantity=line_data["quantity"],
                batch_number=line_data.get("batch_number"),
                expiry_date=line_data.get("expiry_date"),
                scanned_gtin=line_data.get("scanned_gtin"),
                notes=line_data.get("notes"),
            ),
        )
        return GoodsReceiptLineAdd(goods_receipt_line=line)


class GoodsReceiptLineUpdate(BaseMutation):
    goods_receipt_line = graphene.Field(GoodsReceiptLine)

    class Arguments:
        id = graphene.ID(required=True, description="ID of the line to update.")
        input = GoodsReceiptLineUpdateInput(
            required=True, description="Fields to overwrite."
        )

    class Meta:
        description = "Update a line of a draft receipt."
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        line_data = data["input"]
        line = update_receipt_line(
            context,
            data["id"],
            quantity=line_data.get("quantity"),
            batch_number=line_data.get("batch_number"),
            expiry_date=line_data.get("expiry_date"),
            notes=line_data.get("notes"),
        )
        return GoodsReceiptLineUpdate(goods_receipt_line=line)


class GoodsReceiptLineRemove(BaseMutation):
    goods_receipt = graphene.Field(
        GoodsReceipt, description="The receipt the line was removed from."
    )

    class Arguments:
        id = graphene.ID(required=True, description="ID of the line to remove.")

    class Meta:
        description = "Remove a line from a draft receipt."
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        receipt = remove_receipt_line(context, data["id"])
        return GoodsReceiptLineRemove(goods_receipt=receipt)


class GoodsReceiptConfirm(BaseMutation):
    goods_receipt = graphene.Field(GoodsReceipt, description="The confirmed receipt.")
    result = graphene.Field(ConfirmGoodsReceiptResult)

    class Arguments:
        id = graphene.ID(required=True, description="ID of the receipt to confirm.")

    class Meta:
        description = (
            "Confirm a draft receipt: add its quantities to the location "
            "inventory and update the status of the linked order."
        )
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        result = confirm_goods_receipt(context, data["id"])
        receipt = get_goods_receipt(result.receipt_id, practice_id=context.practice_id)
        return GoodsReceiptConfirm(goods_receipt=receipt, result=result)


class GoodsReceiptCancel(BaseMutation):
    goods_receipt = graphene.Field(GoodsReceipt, description="The cancelled receipt.")

    class Arguments:
        id = graphene.ID(required=True, description="ID of the receipt to cancel.")

    class Meta:
        description = "Cancel a draft receipt without touching stock."
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        receipt = cancel_goods_receipt(context, data["id"])
        return GoodsReceiptCancel(goods_receipt=receipt)


class GoodsReceiptDelete(BaseMutation):
    goods_receipt_id = graphene.ID(description="ID of the deleted receipt.")

    class Arguments:
        id = graphene.ID(required=True, description="ID of the receipt to delete.")

    class Meta:
        description = "Delete a draft or cancelled receipt. Requires the ADMIN role."
        error_type_class = GoodsReceiptError
        error_type_field = "goods_receipt_errors"

    @classmethod
    def perform_mutation(cls, root, info: ResolveInfo, context, /, **data):
        delete_goods_receipt(context, data["id"])
        return GoodsReceiptDelete(goods_receipt_id=data["id"])
