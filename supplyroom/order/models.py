from decimal import Decimal
from uuid import uuid4

from django.conf import settings
from django.db import models
from django.db.models import Q
from prices import Money

from ..catalog.models import Item, Supplier
from ..practice.models import Practice
from . import OrderStatus


class Order(models.Model):
    """A purchase order placed by a practice with one supplier.

    The status after SENT is never set by hand: it is derived from the
    confirmed goods receipts linked to the order (see ``status.py``).
    """

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="orders"
    )
    supplier = models.ForeignKey(
        Supplier, on_delete=models.PROTECT, related_name="orders"
    )
    status = models.CharField(
        max_length=32, choices=OrderStatus.CHOICES, default=OrderStatus.DRAFT
    )
    reference = models.CharField(max_length=255, blank=True, default="")
    notes = models.TextField(blank=True, default="")
    currency = models.CharField(
        max_length=settings.DEFAULT_CURRENCY_CODE_LENGTH,
        default=settings.DEFAULT_CURRENCY,
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    sent_at = models.DateTimeField(null=True, blank=True)
    received_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Set when goods first arrive, refreshed when fully received",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at",)
        indexes = [
            models.Index(
                fields=["practice", "status"], name="order_practice_status_idx"
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~Q(status=OrderStatus.SENT) | Q(sent_at__isnull=False),
                name="order_sent_requires_sent_at",
            ),
            models.CheckConstraint(
                condition=~Q(
                    status__in=[OrderStatus.PARTIALLY_RECEIVED, OrderStatus.RECEIVED]
                )
                | Q(received_at__isnull=False),
                name="order_received_requires_received_at",
            ),
        ]

    def __str__(self):
        return self.reference or str(self.id)

    @property
    def total(self) -> Money:
        amount = sum(
            (line.unit_price_amount * line.quantity for line in self.items.all()),
            Decimal(0),
        )
        return Money(amount, self.currency)


class OrderItem(models.Model):
    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name="order_items")
    quantity = models.IntegerField()
    unit_price_amount = models.DecimalField(
        max_digits=settings.DEFAULT_MAX_DIGITS,
        decimal_places=settings.DEFAULT_DECIMAL_PLACES,
        default=Decimal(0),
    )
    notes = models.TextField(blank=True, default="")

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["order", "item"], name="unique_order_item"
            ),
            models.CheckConstraint(
                condition=Q(quantity__gt=0), name="orderitem_quantity_positive"
            ),
            models.CheckConstraint(
                condition=Q(unit_price_amount__gte=0),
                name="orderitem_unit_price_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.item}"

    @property
    def unit_price(self) -> Money:
        """Unit price as Money object."""
        return Money(self.unit_price_amount, self.order.currency)

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity
