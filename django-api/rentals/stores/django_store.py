"""Django ORM implementation of the RentalStore."""

from contextlib import AbstractContextManager
from datetime import datetime

from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from accounts.stores.django_store import to_user_summary
from artworks.domain import ArtworkId
from rentals import models
from rentals.domain import ArtworkSummary, Rental, RentalId, RentalPeriod, RentalStatus
from rentals.domain.errors import ArtworkUnavailableError
from rentals.stores.interfaces import RentalStore


def to_rental(row: models.Rental) -> Rental:
    artwork = row.artwork
    return Rental(
        id=row.pk,
        uuid=RentalId(row.uuid),
        artwork_id=row.artwork_id,
        user_id=row.user_id,
        address=row.address,
        phone_number=row.phone_number,
        start_date=row.start_date,
        end_date=row.end_date,
        status=RentalStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
        approved_by_id=row.approved_by_id,
        approved_at=row.approved_at,
        finalized_by_id=row.finalized_by_id,
        finalized_at=row.finalized_at,
        artwork=ArtworkSummary(
            uuid=ArtworkId(artwork.uuid),
            title=artwork.title,
            description=artwork.description,
            created_by_id=artwork.created_by_id,
        ),
        user=to_user_summary(row.user),
        approver=to_user_summary(row.approved_by),
        finalizer=to_user_summary(row.finalized_by),
    )


def _rentals() -> QuerySet[models.Rental]:
    return models.Rental.objects.select_related("artwork", "user", "approved_by", "finalized_by")


class DjangoRentalStore(RentalStore):
    """Database-backed rental store using Django ORM."""

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def is_artwork_available(self, artwork_id: int) -> bool:
        return not models.Rental.objects.filter(
            artwork_id=artwork_id,
            status__in=models.Rental.ACTIVE_STATUSES,
        ).exists()

    def create(
        self,
        *,
        artwork_id: int,
        user_id: int,
        address: str,
        phone_number: str,
        period: RentalPeriod,
    ) -> Rental:
        try:
            with transaction.atomic():
                row = models.Rental.objects.create(
                    artwork_id=artwork_id,
                    user_id=user_id,
                    address=address,
                    phone_number=phone_number,
                    start_date=period.start,
                    end_date=period.end,
                    status=models.Rental.Status.REQUESTED,
                )
        except IntegrityError as exc:
            raise ArtworkUnavailableError(str(artwork_id)) from exc
        return to_rental(_rentals().get(pk=row.pk))

    def update(
        self,
        rental_id: RentalId,
        *,
        status: RentalStatus,
        **fields: int | datetime | None,
    ) -> Rental:
        models.Rental.objects.filter(uuid=rental_id.value).update(
            status=status.value,
            **fields,
            updated_at=timezone.now(),
        )
        return self.get_by_uuid(rental_id)

    def get_by_uuid(self, rental_id: RentalId, for_update: bool = False) -> Rental | None:
        queryset = _rentals()
        if for_update:
            queryset = queryset.select_for_update(of=("self",))
        row = queryset.filter(uuid=rental_id.value).first()
        return to_rental(row) if row else None

    def list_all(self, limit: int, offset: int) -> list[Rental]:
        rows = _rentals().order_by("-created_at")[offset : offset + limit]
        return [to_rental(row) for row in rows]

    def list_by_user(self, user_id: int, limit: int, offset: int) -> list[Rental]:
        rows = _rentals().filter(user_id=user_id).order_by("-created_at")[offset : offset + limit]
        return [to_rental(row) for row in rows]

    def list_by_artwork_creator(self, creator_id: int, limit: int, offset: int) -> list[Rental]:
        rows = _rentals().filter(artwork__created_by_id=creator_id).order_by("-created_at")[offset : offset + limit]
        return [to_rental(row) for row in rows]

    def list_pending(self) -> list[Rental]:
        rows = _rentals().filter(status=models.Rental.Status.REQUESTED).order_by("created_at")
        return [to_rental(row) for row in rows]

    def delete(self, rental_id: RentalId) -> bool:
        deleted, _ = models.Rental.objects.filter(uuid=rental_id.value).delete()
        return deleted > 0
