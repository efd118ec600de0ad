"""Django ORM implementations of the artwork and medium stores."""

from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import datetime

from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from accounts.stores.django_store import to_user_summary
from artworks import models
from artworks.domain import Artwork, ArtworkId, ArtworkImage, ImageId, Medium, MediumId, ModerationStatus
from artworks.domain.errors import MediumAlreadyExistsError
from artworks.stores.interfaces import ArtworkStore, MediumStore


def to_medium(row: models.Medium) -> Medium:
    return Medium(id=row.pk, uuid=MediumId(row.uuid), name=row.name)


def to_image(row: models.ArtworkImage) -> ArtworkImage:
    return ArtworkImage(
        uuid=ImageId(row.uuid),
        filename=row.filename,
        original_filename=row.original_filename,
        mime_type=row.mime_type,
        file_size=row.file_size,
        description=row.description,
        sort_order=row.sort_order,
    )


def to_artwork(row: models.Artwork) -> Artwork:
    return Artwork(
        id=row.pk,
        uuid=ArtworkId(row.uuid),
        title=row.title,
        description=row.description,
        width=row.width,
        height=row.height,
        depth=row.depth,
        status=ModerationStatus(row.status),
        created_by_id=row.created_by_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        creator=to_user_summary(row.created_by),
        reviewer=to_user_summary(row.reviewed_by),
        reviewed_at=row.reviewed_at,
        review_notes=row.review_notes,
        artists=tuple(to_user_summary(artist) for artist in row.artists.all()),
        mediums=tuple(to_medium(medium) for medium in row.mediums.all()),
        images=tuple(to_image(image) for image in row.images.all()),
    )


def _artworks() -> QuerySet[models.Artwork]:
    return models.Artwork.objects.select_related("created_by", "reviewed_by").prefetch_related(
        "artists", "mediums", "images"
    )


class DjangoArtworkStore(ArtworkStore):
    """Database-backed artwork store using Django ORM."""

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def get_by_uuid(self, artwork_id: ArtworkId) -> Artwork | None:
        row = _artworks().filter(uuid=artwork_id.value).first()
        return to_artwork(row) if row else None

    def get_by_id(self, pk: int) -> Artwork | None:
        row = _artworks().filter(pk=pk).first()
        return to_artwork(row) if row else None

    def lock(self, pk: int) -> None:
        list(models.Artwork.objects.select_for_update().filter(pk=pk).values_list("pk", flat=True))

    def list_artworks(
        self,
        limit: int,
        offset: int,
        status: ModerationStatus | None = None,
        creator_id: int | None = None,
    ) -> list[Artwork]:
        queryset = _artworks()
        if creator_id is not None:
            queryset = queryset.filter(created_by_id=creator_id)
        if status is not None:
            queryset = queryset.filter(status=status.value)
        return [to_artwork(row) for row in queryset.order_by("-created_at")[offset : offset + limit]]

    def search(
        self,
        term: str | None,
        medium_ids: Sequence[MediumId],
        limit: int,
        offset: int,
        status: ModerationStatus | None = None,
        visible_to_creator_id: int | None = None,
    ) -> list[Artwork]:
        matches = models.Artwork.objects.all()
        if status is not None:
            visible = Q(status=status.value)
            if visible_to_creator_id is not None:
                visible |= Q(created_by_id=visible_to_creator_id)
            matches = matches.filter(visible)
        if term:
            matches = matches.filter(
                Q(title__icontains=term)
                | Q(artists__first_name__icontains=term)
                | Q(artists__last_name__icontains=term)
            )
        if medium_ids:
            matches = matches.filter(mediums__uuid__in=[medium_id.value for medium_id in medium_ids])

        queryset = _artworks().filter(pk__in=matches.values("pk")).order_by("-created_at")
        return [to_artwork(row) for row in queryset[offset : offset + limit]]

    def create(
        self,
        *,
        title: str,
        description: str | None,
        width: str | None,
        height: str | None,
        depth: str | None,
        status: ModerationStatus,
        creator_id: int | None,
        artist_ids: Sequence[int],
        medium_ids: Sequence[int],
    ) -> Artwork:
        row = models.Artwork.objects.create(
            title=title,
            description=description,
            width=width,
            height=height,
            depth=depth,
            status=status.value,
            created_by_id=creator_id,
        )
        row.artists.set(artist_ids)
        row.mediums.set(medium_ids)
        return self.get_by_id(row.pk)

    def update(self, artwork_id: ArtworkId, **fields: str | None) -> Artwork:
        models.Artwork.objects.filter(uuid=artwork_id.value).update(**fields, updated_at=timezone.now())
        return self.get_by_uuid(artwork_id)

    def delete(self, artwork_id: ArtworkId) -> bool:
        deleted, _ = models.Artwork.objects.filter(uuid=artwork_id.value).delete()
        return deleted > 0

    def update_review(
        self,
        artwork_id: ArtworkId,
        status: ModerationStatus,
        reviewer_id: int,
        reviewed_at: datetime,
        notes: str | None,
    ) -> Artwork:
        models.Artwork.objects.filter(uuid=artwork_id.value).update(
            status=status.value,
            reviewed_by_id=reviewer_id,
            reviewed_at=reviewed_at,
            review_notes=notes,
            updated_at=timezone.now(),
        )
        return self.get_by_uuid(artwork_id)

    def get_image(self, artwork_pk: int, image_id: ImageId) -> ArtworkImage | None:
        row = models.ArtworkImage.objects.filter(artwork_id=artwork_pk, uuid=image_id.value).first()
        return to_image(row) if row else None

    def update_image(self, image_id: ImageId, **fields: str | int | None) -> ArtworkImage:
        models.ArtworkImage.objects.filter(uuid=image_id.value).update(**fields, updated_at=timezone.now())
        return to_image(models.ArtworkImage.objects.get(uuid=image_id.value))

    def delete_image(self, image_id: ImageId) -> bool:
        deleted, _ = models.ArtworkImage.objects.filter(uuid=image_id.value).delete()
        return deleted > 0


class DjangoMediumStore(MediumStore):
    """Database-backed medium store using Django ORM."""

    def list_mediums(self) -> list[Medium]:
        return [to_medium(row) for row in models.Medium.objects.order_by("name")]

    def get_by_uuid(self, medium_id: MediumId) -> Medium | None:
        row = models.Medium.objects.filter(uuid=medium_id.value).first()
        return to_medium(row) if row else None

    def get_by_name(self, name: str) -> Medium | None:
        row = models.Medium.objects.filter(name__iexact=name).first()
        return to_medium(row) if row else None

    def create(self, name: str) -> Medium:
        try:
            with transaction.atomic():
                row = models.Medium.objects.create(name=name)
        except IntegrityError as exc:
            raise MediumAlreadyExistsError(name) from exc
        return to_medium(row)
