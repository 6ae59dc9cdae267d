from uuid import uuid4

from django.conf import settings
from django.db import models
from django.db.models import Q

from ..catalog.models import Item, Supplier
from ..order.models import Order
from ..practice.models import Location, Practice
from . import GoodsReceiptStatus


class GoodsReceipt(models.Model):
    """A delivery being booked into one location.

    Creating and editing a receipt never touches stock. Only confirmation
    (``reconciliation.confirm_goods_receipt``) applies the lines to the
    location inventory, after which the receipt is immutable.
    """

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="goods_receipts"
    )
    location = models.ForeignKey(
        Location, on_delete=models.PROTECT, related_name="goods_receipts"
    )
    order = models.ForeignKey(
        Order,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="goods_receipts",
    )
    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="goods_receipts",
    )
    status = models.CharField(
        max_length=32,
        choices=GoodsReceiptStatus.CHOICES,
        default=GoodsReceiptStatus.DRAFT,
    )
    notes = models.TextField(null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    received_at = models.DateTimeField(
        null=True, blank=True, help_text="When the receipt was confirmed"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at",)
        indexes = [
            models.Index(
                fields=["practice", "status"], name="receipt_practice_status_idx"
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~Q(status=GoodsReceiptStatus.CONFIRMED)
                | Q(received_at__isnull=False),
                name="goodsreceipt_confirmed_requires_received_at",
            ),
        ]

    def __str__(self):
        return f"Receipt #{str(self.id)[:8]}"

    @property
    def is_draft(self) -> bool:
        return self.status == GoodsReceiptStatus.DRAFT


class GoodsReceiptLine(models.Model):
    """Quantity of one item on a receipt. One line per item per receipt."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    receipt = models.ForeignKey(
        GoodsReceipt, on_delete=models.CASCADE, related_name="lines"
    )
    item = models.ForeignKey(
        Item, on_delete=models.PROTECT, related_name="receipt_lines"
    )
    quantity = models.IntegerField()
    batch_number = models.CharField(max_length=128, null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    scanned_gtin = models.CharField(
        max_length=14,
        null=True,
        blank=True,
        help_text="Barcode scanned when the line was added, if any",
    )
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("created_at",)
        constraints = [
            models.UniqueConstraint(
                fields=["receipt", "item"], name="unique_receipt_item_line"
            ),
            models.CheckConstraint(
                condition=Q(quantity__gt=0), name="goodsreceiptline_quantity_positive"
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.item}"
