from ..core.tenancy import find_for_practice, scoped
from .gtin import validate_gtin
from .models import Item, Supplier


def find_item(item_id, *, practice_id) -> Item | None:
    return find_for_practice(
        Item.objects.select_related("product"), item_id, practice_id=practice_id
    )


def find_supplier(supplier_id, *, practice_id) -> Supplier | None:
    return find_for_practice(
        Supplier.objects.all(), supplier_id, practice_id=practice_id
    )


def find_item_by_gtin(gtin: str, *, practice_id) -> Item | None:
    """Look up the practice's item for a scanned barcode.

    Raises ValidationError when the barcode is not a well-formed GTIN.
    """
    gtin = validate_gtin(gtin)
    return (
        scoped(Item.objects.select_related("product"), practice_id=practice_id)
        .filter(product__gtin=gtin)
        .order_by("created_at")
        .first()
    )
