from uuid import uuid4

from django.conf import settings
from django.db import models
from django.db.models import F, Q

from ..catalog.models import Item
from ..practice.models import Location, Practice


class LocationInventory(models.Model):
    """Stock level of one item at one location.

    ``quantity`` is only ever written as "current + delta" through
    ``ledger.apply_delta``; the check constraints below keep the table valid
    even if a caller bypasses it.
    """

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    location = models.ForeignKey(
        Location, on_delete=models.PROTECT, related_name="inventory"
    )
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name="inventory")
    quantity = models.IntegerField(default=0)
    reorder_point = models.IntegerField(
        null=True,
        blank=True,
        help_text="Notify when quantity drops below this level",
    )
    reorder_quantity = models.IntegerField(
        null=True,
        blank=True,
        help_text="Suggested quantity to order when below the reorder point",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["location", "item"], name="unique_location_item_inventory"
            ),
            models.CheckConstraint(
                condition=Q(quantity__gte=0),
                name="locationinventory_quantity_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(reorder_point__isnull=True) | Q(reorder_point__gte=0),
                name="locationinventory_reorder_point_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(reorder_quantity__isnull=True) | Q(reorder_quantity__gt=0),
                name="locationinventory_reorder_quantity_positive",
            ),
        ]

    def __str__(self):
        return f"{self.item} @ {self.location}: {self.quantity}"

    @property
    def is_below_reorder_point(self) -> bool:
        return self.reorder_point is not None and self.quantity < self.reorder_point


class StockAdjustment(models.Model):
    """Immutable fact: the quantity of an item at a location changed by ``quantity``."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="stock_adjustments"
    )
    location = models.ForeignKey(
        Location, on_delete=models.PROTECT, related_name="stock_adjustments"
    )
    item = models.ForeignKey(
        Item, on_delete=models.PROTECT, related_name="stock_adjustments"
    )
    quantity = models.IntegerField(
        help_text="Signed change in quantity (negative for removals)"
    )
    reason = models.CharField(max_length=255, blank=True, default="")
    note = models.TextField(blank=True, default="")
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.CheckConstraint(
                condition=~Q(quantity=0), name="stockadjustment_quantity_non_zero"
            ),
        ]

    def __str__(self):
        return f"{self.quantity:+d} {self.item} @ {self.location}"


class InventoryTransfer(models.Model):
    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="inventory_transfers"
    )
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name="transfers")
    from_location = models.ForeignKey(
        Location, on_delete=models.PROTECT, related_name="outgoing_transfers"
    )
    to_location = models.ForeignKey(
        Location, on_delete=models.PROTECT, related_name="incoming_transfers"
    )
    quantity = models.IntegerField()
    note = models.TextField(blank=True, default="")
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gt=0), name="inventorytransfer_quantity_positive"
            ),
            models.CheckConstraint(
                condition=~Q(from_location=F("to_location")),
                name="inventorytransfer_distinct_locations",
            ),
        ]
