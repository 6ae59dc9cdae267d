from uuid import uuid4

from django.conf import settings
from django.db import models

from ..catalog.models import Item
from ..practice.models import Location, Practice
from . import NotificationType


class Notification(models.Model):
    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="notifications"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="supplyroom_notifications",
    )
    type = models.CharField(max_length=32, choices=NotificationType.CHOICES)
    title = models.CharField(max_length=255)
    message = models.TextField()
    item = models.ForeignKey(
        Item, on_delete=models.CASCADE, null=True, blank=True, related_name="+"
    )
    location = models.ForeignKey(
        Location, on_delete=models.CASCADE, null=True, blank=True, related_name="+"
    )
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at",)
        indexes = [
            models.Index(
                fields=["practice", "type", "is_read"],
                name="notification_unread_idx",
            ),
        ]

    def __str__(self):
        return self.title
