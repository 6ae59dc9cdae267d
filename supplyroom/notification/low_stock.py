import logging
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from ..catalog.models import Item
from ..practice import MembershipRole
from ..practice.models import Location, Membership
from . import NotificationType
from .models import Notification

logger = logging.getLogger(__name__)


def check_and_create_low_stock_notification(
    *, practice_id, item_id, location_id, new_quantity: int, reorder_point: int | None
) -> list[Notification]:
    """Notify admins and staff when stock drops below its reorder point.

    Runs inside the caller's transaction. Nothing is created when:
    1. the stock row has no reorder point,
    2. the new quantity is at or above the reorder point,
    3. an unread low stock notification for the same item and location was
       created within ``LOW_STOCK_NOTIFICATION_WINDOW_HOURS``.

    Returns:
        The notifications created, one per notified member.

    """
    if reorder_point is None or new_quantity >= reorder_point:
        return []

    window_start = timezone.now() - timedelta(
        hours=settings.LOW_STOCK_NOTIFICATION_WINDOW_HOURS
    )
    already_notified = Notification.objects.filter(
        practice_id=practice_id,
        type=NotificationType.LOW_STOCK,
        item_id=item_id,
        location_id=location_id,
        is_read=False,
        created_at__gte=window_start,
    ).exists()
    if already_notified:
        logger.debug(
            "Skipping low stock notification for item %s at %s, recent one unread",
            item_id,
            location_id,
        )
        return []

    item = Item.objects.get(pk=item_id, practice_id=practice_id)
    location = Location.objects.get(pk=location_id, practice_id=practice_id)
    recipients = Membership.objects.filter(
        practice_id=practice_id,
        role__in=MembershipRole.NOTIFIED_ROLES,
        is_active=True,
    ).values_list("user_id", flat=True)

    notifications = Notification.objects.bulk_create(
        [
            Notification(
                practice_id=practice_id,
                user_id=user_id,
                type=NotificationType.LOW_STOCK,
                title=f"Low stock: {item.name}",
                message=(
                    f'Location "{location.name}" is below its reorder point '
                    f"({new_quantity} < {reorder_point})."
                ),
                item=item,
                location=location,
            )
            for user_id in recipients
        ]
    )
    logger.info(
        "Created %d low stock notifications for %s at %s",
        len(notifications),
        item.name,
        location.name,
    )
    return notifications
