class OrderStatus:
    """Status of a purchase order sent to a supplier."""

    DRAFT = "draft"  # Being built, items can still change
    SENT = "sent"  # Sent to the supplier, waiting for goods
    PARTIALLY_RECEIVED = "partially_received"  # Some goods arrived, not all
    RECEIVED = "received"  # Every item received in full (or closed manually)
    CANCELLED = "cancelled"

    CHOICES = [
        (DRAFT, "Draft"),
        (SENT, "Sent"),
        (PARTIALLY_RECEIVED, "Partially Received"),
        (RECEIVED, "Received"),
        (CANCELLED, "Cancelled"),
    ]

    # Confirmed goods receipts may move orders out of these statuses
    RECEIVABLE = [SENT, PARTIALLY_RECEIVED]
