"""Location tree management for a practice."""

import logging

import attrs
from django.db import transaction

from ..audit.events import location_deleted_event
from ..core.context import RequestContext, require_role
from ..core.exceptions import ValidationError
from ..core.tenancy import ensure_owned, get_for_practice
from . import MembershipRole
from .exceptions import LocationInUse
from .models import Location

logger = logging.getLogger(__name__)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


@attrs.frozen
class LocationUsage:
    inventory_count: int
    child_location_count: int
    stock_adjustment_count: int
    outgoing_transfer_count: int
    incoming_transfer_count: int
    goods_receipt_count: int

    @property
    def transfer_count(self) -> int:
        return self.outgoing_transfer_count + self.incoming_transfer_count

    @property
    def summary(self) -> list[str]:
        parts = []
        if self.inventory_count:
            parts.append(_plural(self.inventory_count, "inventory record"))
        if self.child_location_count:
            parts.append(_plural(self.child_location_count, "sub-location"))
        if self.stock_adjustment_count:
            parts.append(_plural(self.stock_adjustment_count, "stock adjustment"))
        if self.transfer_count:
            parts.append(_plural(self.transfer_count, "inventory transfer"))
        if self.goods_receipt_count:
            parts.append(_plural(self.goods_receipt_count, "goods receipt"))
        return parts

    @property
    def has_usage(self) -> bool:
        return bool(self.summary)


def get_location(location_id, *, practice_id) -> Location:
    return get_for_practice(
        Location.objects.all(),
        location_id,
        practice_id=practice_id,
        entity="Location",
        field="location_id",
    )


def get_location_usage(location_id, *, practice_id) -> LocationUsage:
    location = get_location(location_id, practice_id=practice_id)
    return LocationUsage(
        inventory_count=location.inventory.count(),
        child_location_count=location.children.count(),
        stock_adjustment_count=location.stock_adjustments.count(),
        outgoing_transfer_count=location.outgoing_transfers.count(),
        incoming_transfer_count=location.incoming_transfers.count(),
        goods_receipt_count=location.goods_receipts.count(),
    )


def _ensure_no_cycle(location: Location, parent: Location) -> None:
    """Walk up from ``parent``; reaching ``location`` means a cycle."""
    if parent.pk == location.pk:
        raise ValidationError("A location cannot be its own parent", field="parent_id")
    ancestor = parent
    while ancestor.parent_id is not None:
        if ancestor.parent_id == location.pk:
            raise ValidationError(
                "Cannot move a location under one of its own sub-locations",
                field="parent_id",
            )
        ancestor = ancestor.parent


@transaction.atomic
def create_location(
    context: RequestContext,
    *,
    name: str,
    description: str = "",
    parent_id=None,
) -> Location:
    require_role(context, MembershipRole.ADMIN)
    if not name or not name.strip():
        raise ValidationError("Location name is required", field="name")
    parent = None
    if parent_id is not None:
        parent = ensure_owned(
            Location.objects.all(),
            parent_id,
            practice_id=context.practice_id,
            entity="Location",
            field="parent_id",
        )
    return Location.objects.create(
        practice_id=context.practice_id,
        name=name.strip(),
        description=description,
        parent=parent,
    )


@transaction.atomic
def update_location(
    context: RequestContext,
    location_id,
    *,
    name: str | None = None,
    description: str | None = None,
    parent_id=None,
    clear_parent: bool = False,
) -> Location:
    """Rename or move a location.

    ``parent_id`` moves the location under another one of the practice;
    ``clear_parent`` makes it a top-level location.
    """
    require_role(context, MembershipRole.ADMIN)
    location = get_for_practice(
        Location.objects.select_for_update(),
        location_id,
        practice_id=context.practice_id,
        entity="Location",
        field="location_id",
    )
    update_fields = ["updated_at"]
    if name is not None:
        if not name.strip():
            raise ValidationError("Location name is required", field="name")
        location.name = name.strip()
        update_fields.append("name")
    if description is not None:
        location.description = description
        update_fields.append("description")
    if clear_parent:
        location.parent = None
        update_fields.append("parent")
    elif parent_id is not None:
        parent = ensure_owned(
            Location.objects.all(),
            parent_id,
            practice_id=context.practice_id,
            entity="Location",
            field="parent_id",
        )
        _ensure_no_cycle(location, parent)
        location.parent = parent
        update_fields.append("parent")
    location.save(update_fields=update_fields)
    return location


@transaction.atomic
def delete_location(context: RequestContext, location_id) -> None:
    """Delete a location nothing refers to.

    Raises:
        NotFoundError: Location is missing or belongs to another practice.
        LocationInUse: Inventory, sub-locations, adjustments, transfers or
            receipts still reference the location.

    """
    require_role(context, MembershipRole.ADMIN)
    location = get_location(location_id, practice_id=context.practice_id)
    usage = get_location_usage(location.pk, practice_id=context.practice_id)
    if usage.has_usage:
        raise LocationInUse(location, usage.summary)

    location_pk, name = location.pk, location.name
    location.delete()
    location_deleted_event(
        practice_id=context.practice_id,
        location_id=location_pk,
        name=name,
        user=context.user,
    )
    logger.info("Deleted location %s (%s)", name, location_pk)
