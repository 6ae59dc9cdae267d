from ..core.tenancy import get_for_practice, scoped
from .models import Order


def find_order_by_id(order_id, *, practice_id, lock: bool = False) -> Order:
    """Return the practice's order or raise NotFoundError."""
    queryset = Order.objects.select_related("supplier")
    if lock:
        queryset = queryset.select_for_update(of=("self",))
    return get_for_practice(
        queryset, order_id, practice_id=practice_id, entity="Order", field="order_id"
    )


def list_orders(*, practice_id, status=None, supplier_id=None):
    """Orders of the practice, newest first.

    ``status`` may be a single status or a list of statuses.
    """
    orders = scoped(
        Order.objects.select_related("supplier").prefetch_related("items__item"),
        practice_id=practice_id,
    )
    if status:
        if isinstance(status, str):
            orders = orders.filter(status=status)
        else:
            orders = orders.filter(status__in=list(status))
    if supplier_id is not None:
        orders = orders.filter(supplier_id=supplier_id)
    return orders.order_by("-created_at")
