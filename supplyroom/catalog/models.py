from uuid import uuid4

from django.db import models

from ..practice.models import Practice


class Product(models.Model):
    """Shared catalog entry. Not owned by any practice."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    name = models.CharField(max_length=255)
    brand = models.CharField(max_length=255, blank=True, default="")
    gtin = models.CharField(
        max_length=14,
        unique=True,
        null=True,
        blank=True,
        help_text="GS1 barcode number (GTIN-8, 12, 13 or 14)",
    )
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name


class Supplier(models.Model):
    """A supplier a practice orders from."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="suppliers"
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True, default="")
    phone = models.CharField(max_length=64, blank=True, default="")
    account_number = models.CharField(max_length=64, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name


class Item(models.Model):
    """A product as stocked by one practice."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="items"
    )
    product = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="practice_items"
    )
    default_supplier = models.ForeignKey(
        Supplier,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="default_items",
    )
    name = models.CharField(max_length=255)
    sku = models.CharField(max_length=64, blank=True, default="")
    unit = models.CharField(
        max_length=32, blank=True, default="", help_text="e.g. box, vial, piece"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("name",)
        indexes = [
            models.Index(fields=["practice", "name"], name="item_practice_name_idx")
        ]

    def __str__(self):
        return self.name
