from ...core.tenancy import find_for_practice
from ...receiving.models import GoodsReceipt
from ...receiving.queries import find_goods_receipts, get_receiving_mismatches
from ..core.utils import get_reader_context


def resolve_goods_receipt(info, id):
    context = get_reader_context(info)
    return find_for_practice(
        GoodsReceipt.objects.select_related("location", "order", "supplier"),
        id,
        practice_id=context.practice_id,
    )


def resolve_goods_receipts(info, **filters):
    context = get_reader_context(info)
    return find_goods_receipts(practice_id=context.practice_id, **filters)


def resolve_receiving_mismatches(info, limit):
    context = get_reader_context(info)
    return get_receiving_mismatches(practice_id=context.practice_id, limit=limit)
