from uuid import uuid4

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from ..practice.models import Practice
from . import AuditAction, AuditEntityType


class AuditLog(models.Model):
    """Append-only record of a business event inside a practice."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="audit_logs"
    )
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    entity_type = models.CharField(max_length=64, choices=AuditEntityType.CHOICES)
    entity_id = models.CharField(max_length=64)
    action = models.CharField(max_length=32, choices=AuditAction.CHOICES)
    changes = models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)
    metadata = models.JSONField(blank=True, default=dict, encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ("created_at",)
        indexes = [
            models.Index(
                fields=["practice", "entity_type", "entity_id"],
                name="auditlog_entity_idx",
            ),
        ]

    def __str__(self):
        return f"{self.entity_type}:{self.entity_id} {self.action}"
