from ...inventory.ledger import (
    find_low_stock_items,
    get_location_inventory,
    list_stock_adjustments,
)
from ..core.utils import get_reader_context


def resolve_location_inventory(info, location_id, item_id):
    context = get_reader_context(info)
    return get_location_inventory(
        item_id, location_id, practice_id=context.practice_id
    )


def resolve_low_stock_items(info):
    context = get_reader_context(info)
    return find_low_stock_items(practice_id=context.practice_id)


def resolve_stock_adjustments(info, item_id=None, location_id=None, limit=None):
    context = get_reader_context(info)
    return list_stock_adjustments(
        practice_id=context.practice_id,
        item_id=item_id,
        location_id=location_id,
        limit=limit,
    )
