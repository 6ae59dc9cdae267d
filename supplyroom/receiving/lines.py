"""Editing goods receipt lines while the receipt is a draft.

A receipt holds at most one line per item. Adding an item that is already on
the receipt merges into the existing line: quantities are summed and every
non-null detail of the new scan replaces the stored one. Re-scanning during a
receiving session therefore accumulates instead of failing.
"""

import datetime

import attrs
from django.db import transaction
from django.utils import timezone

from ..catalog.gtin import validate_gtin
from ..catalog.models import Item
from ..core.context import RequestContext, require_role
from ..core.exceptions import ValidationError
from ..core.tenancy import ensure_owned, get_for_practice
from ..practice import MembershipRole
from .exceptions import ReceiptLineNotDraft, ReceiptNotDraft
from .models import GoodsReceipt, GoodsReceiptLine

# Fields where a non-null value from a repeated scan replaces the stored one
MERGEABLE_FIELDS = ("batch_number", "expiry_date", "scanned_gtin", "notes")


@attrs.frozen
class ReceiptLineInput:
    item_id: object
    quantity: int
    batch_number: str | None = None
    expiry_date: datetime.date | None = None
    scanned_gtin: str | None = None
    notes: str | None = None


@attrs.frozen
class MergeIntoExisting:
    line: GoodsReceiptLine


@attrs.frozen
class InsertNew:
    pass


def validate_positive_quantity(quantity, field: str = "quantity") -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError("Quantity must be a whole number", field=field)
    if quantity <= 0:
        raise ValidationError("Quantity must be greater than zero", field=field)


def _shift_years(day: datetime.date, years: int) -> datetime.date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year + years, day=28)


def validate_expiry_date(expiry_date: datetime.date | None) -> None:
    """Reject expiry dates more than a year past or ten years ahead."""
    if expiry_date is None:
        return
    today = timezone.localdate()
    if expiry_date < _shift_years(today, -1):
        raise ValidationError(
            "Expiry date is too far in the past", field="expiry_date"
        )
    if expiry_date > _shift_years(today, 10):
        raise ValidationError(
            "Expiry date is too far in the future", field="expiry_date"
        )


def decide_line_placement(
    receipt: GoodsReceipt, item_id
) -> MergeIntoExisting | InsertNew:
    existing = (
        receipt.lines.select_for_update().filter(item_id=item_id).first()
    )
    if existing is None:
        return InsertNew()
    return MergeIntoExisting(line=existing)


def merged_line_values(line: GoodsReceiptLine, line_input: ReceiptLineInput) -> dict:
    """Return the field values of ``line`` after merging ``line_input`` into it."""
    values = {"quantity": line.quantity + line_input.quantity}
    for field in MERGEABLE_FIELDS:
        new_value = getattr(line_input, field)
        values[field] = new_value if new_value is not None else getattr(line, field)
    return values


def _get_draft_receipt(receipt_id, practice_id) -> GoodsReceipt:
    receipt = get_for_practice(
        GoodsReceipt.objects.select_for_update(),
        receipt_id,
        practice_id=practice_id,
        entity="GoodsReceipt",
        field="receipt_id",
    )
    if not receipt.is_draft:
        raise ReceiptNotDraft(receipt)
    return receipt


def _get_draft_line(line_id, practice_id) -> GoodsReceiptLine:
    line = get_for_practice(
        GoodsReceiptLine.objects.select_related("receipt", "item"),
        line_id,
        practice_id=practice_id,
        entity="GoodsReceiptLine",
        practice_field="receipt__practice_id",
        field="line_id",
    )
    if not line.receipt.is_draft:
        raise ReceiptLineNotDraft(line)
    return line


@transaction.atomic
def add_receipt_line(
    context: RequestContext, receipt_id, line_input: ReceiptLineInput
) -> GoodsReceiptLine:
    """Add an item to a draft receipt, merging with an existing line for it.

    Raises:
        NotFoundError: Receipt is missing or belongs to another practice.
        ReceiptNotDraft: Receipt is confirmed or cancelled.
        ValidationError: Bad quantity, expiry date, barcode or foreign item.

    """
    require_role(context, MembershipRole.STAFF)
    receipt = _get_draft_receipt(receipt_id, context.practice_id)
    validate_positive_quantity(line_input.quantity)
    validate_expiry_date(line_input.expiry_date)
    if line_input.scanned_gtin:
        line_input = attrs.evolve(
            line_input,
            scanned_gtin=validate_gtin(line_input.scanned_gtin, field="scanned_gtin"),
        )
    item = ensure_owned(
        Item.objects.all(),
        line_input.item_id,
        practice_id=context.practice_id,
        entity="Item",
        field="item_id",
    )

    placement = decide_line_placement(receipt, item.pk)
    if isinstance(placement, MergeIntoExisting):
        line = placement.line
        values = merged_line_values(line, line_input)
        for field, value in values.items():
            setattr(line, field, value)
        line.save(update_fields=[*values.keys(), "updated_at"])
        return line

    return GoodsReceiptLine.objects.create(
        receipt=receipt,
        item=item,
        quantity=line_input.quantity,
        batch_number=line_input.batch_number,
        expiry_date=line_input.expiry_date,
        scanned_gtin=line_input.scanned_gtin,
        notes=line_input.notes,
    )


@transaction.atomic
def update_receipt_line(
    context: RequestContext,
    line_id,
    *,
    quantity: int | None = None,
    batch_number: str | None = None,
    expiry_date: datetime.date | None = None,
    notes: str | None = None,
) -> GoodsReceiptLine:
    """Overwrite details of a draft line. ``None`` leaves a field unchanged."""
    require_role(context, MembershipRole.STAFF)
    line = _get_draft_line(line_id, context.practice_id)

    update_fields = []
    if quantity is not None:
        validate_positive_quantity(quantity)
        line.quantity = quantity
        update_fields.append("quantity")
    if batch_number is not None:
        line.batch_number = batch_number
        update_fields.append("batch_number")
    if expiry_date is not None:
        validate_expiry_date(expiry_date)
        line.expiry_date = expiry_date
        update_fields.append("expiry_date")
    if notes is not None:
        line.notes = notes
        update_fields.append("notes")
    if update_fields:
        line.save(update_fields=[*update_fields, "updated_at"])
    return line


@transaction.atomic
def remove_receipt_line(context: RequestContext, line_id) -> GoodsReceipt:
    """Remove a line from a draft receipt and return the receipt."""
    require_role(context, MembershipRole.STAFF)
    line = _get_draft_line(line_id, context.practice_id)
    receipt = line.receipt
    line.delete()
    return receipt
