"""Practice (tenant) scoping for every read and write.

``practice_id`` is a required keyword-only argument everywhere so a call
without it fails immediately instead of silently reading across tenants.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import QuerySet

from .exceptions import CrossPracticeReference, NotFoundError

logger = logging.getLogger(__name__)


def scoped(
    queryset: QuerySet, *, practice_id, practice_field: str = "practice_id"
) -> QuerySet:
    """Restrict a queryset to rows owned by the given practice."""
    return queryset.filter(**{practice_field: practice_id})


def find_for_practice(
    queryset: QuerySet, pk, *, practice_id, practice_field: str = "practice_id"
):
    """Return the row with ``pk`` owned by the practice, or None.

    Malformed primary keys are treated the same as missing rows.
    """
    if pk is None:
        return None
    try:
        return (
            scoped(queryset, practice_id=practice_id, practice_field=practice_field)
            .filter(pk=pk)
            .first()
        )
    except (ValueError, DjangoValidationError):
        return None


def get_for_practice(
    queryset: QuerySet,
    pk,
    *,
    practice_id,
    entity: str,
    practice_field: str = "practice_id",
    field: str | None = None,
):
    """Filter-on-read lookup raising NotFoundError for absent or foreign rows."""
    instance = find_for_practice(
        queryset, pk, practice_id=practice_id, practice_field=practice_field
    )
    if instance is None:
        raise NotFoundError(entity, pk, field=field)
    return instance


def ensure_owned(
    queryset: QuerySet,
    pk,
    *,
    practice_id,
    entity: str,
    field: str,
    practice_field: str = "practice_id",
):
    """Verify-before-write: the referenced row must belong to the practice."""
    instance = find_for_practice(
        queryset, pk, practice_id=practice_id, practice_field=practice_field
    )
    if instance is None:
        logger.warning(
            "Rejected reference to %s %s outside practice %s",
            entity,
            pk,
            practice_id,
        )
        raise CrossPracticeReference(entity, pk, field=field)
    return instance
