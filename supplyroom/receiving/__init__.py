class GoodsReceiptStatus:
    """Status of a goods receipt."""

    DRAFT = "draft"  # Lines can be added, edited and removed; no stock moved
    CONFIRMED = "confirmed"  # Stock applied to the location; immutable
    CANCELLED = "cancelled"  # Abandoned before confirmation

    CHOICES = [
        (DRAFT, "Draft"),
        (CONFIRMED, "Confirmed"),
        (CANCELLED, "Cancelled"),
    ]
