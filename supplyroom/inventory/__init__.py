class StockAdjustmentReason:
    """Well-known reasons written on stock adjustments.

    Manual adjustments may carry any free-text reason.
    """

    GOODS_RECEIPT = "Goods Receipt"
    MANUAL = "Manual Adjustment"
    STOCK_COUNT = "Stock Count"
    DAMAGE = "Damaged"
    EXPIRED = "Expired"
    USAGE = "Used in treatment"
