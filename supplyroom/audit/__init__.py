class AuditEntityType:
    GOODS_RECEIPT = "GoodsReceipt"
    ORDER = "Order"
    STOCK_ADJUSTMENT = "StockAdjustment"
    INVENTORY_TRANSFER = "InventoryTransfer"
    LOCATION_INVENTORY = "LocationInventory"
    LOCATION = "Location"

    CHOICES = [
        (GOODS_RECEIPT, "Goods receipt"),
        (ORDER, "Order"),
        (STOCK_ADJUSTMENT, "Stock adjustment"),
        (INVENTORY_TRANSFER, "Inventory transfer"),
        (LOCATION_INVENTORY, "Location inventory"),
        (LOCATION, "Location"),
    ]


class AuditAction:
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
    SENT = "SENT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    CLOSED = "CLOSED"
    STATUS_CHANGED = "STATUS_CHANGED"

    CHOICES = [
        (CREATED, "Created"),
        (UPDATED, "Updated"),
        (DELETED, "Deleted"),
        (SENT, "Sent"),
        (CONFIRMED, "Confirmed"),
        (CANCELLED, "Cancelled"),
        (CLOSED, "Closed"),
        (STATUS_CHANGED, "Status changed"),
    ]
