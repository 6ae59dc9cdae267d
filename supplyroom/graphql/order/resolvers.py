from ...core.tenancy import find_for_practice
from ...order.models import Order
from ...order.queries import list_orders
from ..core.utils import get_reader_context


def resolve_order(info, id):
    context = get_reader_context(info)
    return find_for_practice(
        Order.objects.select_related("supplier"), id, practice_id=context.practice_id
    )


def resolve_orders(info, status=None, supplier_id=None):
    context = get_reader_context(info)
    return list_orders(
        practice_id=context.practice_id, status=status, supplier_id=supplier_id
    )
