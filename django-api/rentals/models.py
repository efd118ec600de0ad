"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from artworks.models import Artwork


class Rental(models.Model):
    """Persistence model for rental requests."""

    class Status(models.TextChoices):
        REQUESTED = "requested", "Requested"
        APPROVED = "approved", "Approved"
        FINALIZED = "finalized", "Finalized"
        REJECTED = "rejected", "Rejected"

    ACTIVE_STATUSES = (Status.REQUESTED, Status.APPROVED)

    uuid = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    artwork = models.ForeignKey(Artwork, on_delete=models.CASCADE, related_name="rentals")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="rentals")
    address = models.CharField(max_length=500)
    phone_number = models.CharField(max_length=50)
    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.REQUESTED)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="approved_rentals",
    )
    approved_at = models.DateTimeField(null=True, blank=True)
    finalized_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="finalized_rentals",
    )
    finalized_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "rentals"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="rentals_status_idx"),
            models.Index(fields=["start_date"], name="rentals_start_date_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["artwork"],
                condition=models.Q(status__in=["requested", "approved"]),
                name="one_active_rental_per_artwork",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.artwork.title} - {self.status}"
