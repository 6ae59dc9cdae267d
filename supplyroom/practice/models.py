from uuid import uuid4

from django.conf import settings
from django.db import models
from django_countries.fields import CountryField

from . import MembershipRole


class Practice(models.Model):
    """A veterinary or dental practice. Root of all tenant scoping."""

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    country = CountryField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name


class Membership(models.Model):
    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="memberships"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="practice_memberships",
    )
    role = models.CharField(
        max_length=32,
        choices=MembershipRole.CHOICES,
        default=MembershipRole.STAFF,
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["practice", "user"], name="unique_practice_membership"
            ),
        ]

    def __str__(self):
        return f"{self.user} @ {self.practice} ({self.role})"


class Location(models.Model):
    """A physical storage place inside a practice (room, cabinet, shelf).

    Locations form a tree through ``parent``. The tree is kept cycle-free by
    ``locations.update_location``.
    """

    id = models.UUIDField(primary_key=True, editable=False, default=uuid4)
    practice = models.ForeignKey(
        Practice, on_delete=models.CASCADE, related_name="locations"
    )
    parent = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="children",
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("name",)
        indexes = [
            models.Index(fields=["practice", "name"], name="location_practice_name_idx")
        ]

    def __str__(self):
        return self.name
