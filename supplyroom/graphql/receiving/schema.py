import graphene

from ..core import ResolveInfo
from ..core.types import NonNullList
from .enums import GoodsReceiptStatusEnum
from .mutations import (
    GoodsReceiptCancel,
    GoodsReceiptConfirm,
    GoodsReceiptCreate,
    GoodsReceiptDelete,
    GoodsReceiptLineAdd,
    GoodsReceiptLineRemove,
    GoodsReceiptLineUpdate,
)
from .resolvers import (
    resolve_goods_receipt,
    resolve_goods_receipts,
    resolve_receiving_mismatches,
)
from .types import GoodsReceipt, ReceivingMismatch


class ReceivingQueries(graphene.ObjectType):
    goods_receipt = graphene.Field(
        GoodsReceipt,
        id=graphene.Argument(
            graphene.ID, required=True, description="ID of the goods receipt."
        ),
        description="Look up a goods receipt of the practice by ID.",
    )
    goods_receipts = NonNullList(
        GoodsReceipt,
        status=graphene.Argument(GoodsReceiptStatusEnum),
        location_id=graphene.Argument(graphene.ID),
        order_id=graphene.Argument(graphene.ID),
        supplier_id=graphene.Argument(graphene.ID),
        received_from=graphene.Argument(graphene.DateTime),
        received_to=graphene.Argument(graphene.DateTime),
        required=True,
        description="Goods receipts of the practice, newest first.",
    )
    receiving_mismatches = NonNullList(
        ReceivingMismatch,
        limit=graphene.Argument(graphene.Int, default_value=50),
        required=True,
        description=(
            "Orders where the received quantities differ from the ordered ones."
        ),
    )

    @staticmethod
    def resolve_goods_receipt(_root, info: ResolveInfo, *, id):
        return resolve_goods_receipt(info, id)

    @staticmethod
    def resolve_goods_receipts(_root, info: ResolveInfo, *, status=None, **filters):
        if status is not None:
            status = status.value
        return resolve_goods_receipts(info, status=status, **filters)

    @staticmethod
    def resolve_receiving_mismatches(_root, info: ResolveInfo, *, limit):
        return resolve_receiving_mismatches(info, limit)


class ReceivingMutations(graphene.ObjectType):
    goods_receipt_create = GoodsReceiptCreate.Field()
    goods_receipt_line_add = GoodsReceiptLineAdd.Field()
    goods_receipt_line_update = GoodsReceiptLineUpdate.Field()
    goods_receipt_line_remove = GoodsReceiptLineRemove.Field()
    goods_receipt_confirm = GoodsReceiptConfirm.Field()
    goods_receipt_cancel = GoodsReceiptCancel.Field()
    goods_receipt_delete = GoodsReceiptDelete.Field()
