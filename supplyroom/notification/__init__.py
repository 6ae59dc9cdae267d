class NotificationType:
    LOW_STOCK = "low_stock"
    ORDER_RECEIVED = "order_received"

    CHOICES = [
        (LOW_STOCK, "Low stock"),
        (ORDER_RECEIVED, "Order received"),
    ]
