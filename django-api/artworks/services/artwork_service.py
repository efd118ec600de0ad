"""Artwork service - catalogue, submission moderation and mediums.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from accounts.domain import User, UserNotFoundError
from accounts.services import parse_user_id
from accounts.stores.interfaces import UserStore
from artworks.domain import Artwork, ArtworkId, ArtworkImage, ImageId, Medium, MediumId, ModerationStatus, SortOrder
from artworks.domain.errors import (
    ArtistNotFoundError,
    ArtworkNotFoundError,
    ImageNotFoundError,
    InvalidArtworkError,
    InvalidArtworkIdError,
    InvalidImageIdError,
    InvalidMediumError,
    InvalidMediumIdError,
    InvalidReviewError,
    MediumAlreadyExistsError,
    MediumNotFoundError,
)
from artworks.stores.interfaces import ArtworkStore, MediumStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "width", "height", "depth")
REVIEW_OUTCOMES = {ModerationStatus.APPROVED.value, ModerationStatus.DECLINED.value}


def parse_artwork_id(value: str) -> ArtworkId:
    try:
        return ArtworkId.from_string(value)
    except ValueError as exc:
        raise InvalidArtworkIdError() from exc


def parse_medium_id(value: str) -> MediumId:
    try:
        return MediumId.from_string(value)
    except ValueError as exc:
        raise InvalidMediumIdError() from exc


def parse_image_id(value: str) -> ImageId:
    try:
        return ImageId.from_string(value)
    except ValueError as exc:
        raise InvalidImageIdError() from exc


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ArtworkService:
    """Service for artwork catalogue operations."""

    def __init__(
        self,
        artwork_store: ArtworkStore,
        medium_store: MediumStore,
        user_store: UserStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._artworks = artwork_store
        self._mediums = medium_store
        self._users = user_store
        self._clock = clock

    def _require_user(self, user_id: str) -> User:
        user = self._users.get_by_uuid(parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_artworks(
        self,
        limit: int = 50,
        offset: int = 0,
        include_all: bool = False,
        user_id: str | None = None,
    ) -> list[Artwork]:
        """Return approved artworks, or every status with ``include_all``.

        With ``user_id`` only that user's artworks are listed.
        """
        creator_id = self._require_user(user_id).id if user_id else None
        status = None if include_all else ModerationStatus.APPROVED
        return self._artworks.list_artworks(limit, offset, status=status, creator_id=creator_id)

    def search_artworks(
        self,
        search: str | None = None,
        medium_ids: Sequence[str] = (),
        limit: int = 50,
        offset: int = 0,
        include_all: bool = False,
        user_id: str | None = None,
    ) -> list[Artwork]:
        """Search by title or artist name and filter by mediums.

        Non-admin callers see approved artworks plus their own submissions.
        """
        mediums = [parse_medium_id(medium_id) for medium_id in medium_ids]
        creator_id = self._require_user(user_id).id if user_id else None
        return self._artworks.search(
            _clean(search),
            mediums,
            limit,
            offset,
            status=None if include_all else ModerationStatus.APPROVED,
            visible_to_creator_id=creator_id,
        )

    def get_artwork(self, artwork_id: str) -> Artwork:
        """Return an artwork by ID.

        Raises:
            InvalidArtworkIdError: If the artwork_id is not a valid UUID.
            ArtworkNotFoundError: If the artwork does not exist.
        """
        artwork = self._artworks.get_by_uuid(parse_artwork_id(artwork_id))
        if artwork is None:
            raise ArtworkNotFoundError(artwork_id)
        return artwork

    def list_pending_artworks(self, limit: int = 50, offset: int = 0) -> list[Artwork]:
        return self._artworks.list_artworks(limit, offset, status=ModerationStatus.PENDING)

    def create_artwork(
        self,
        *,
        title: str,
        creator_id: str,
        artist_ids: Sequence[str],
        medium_ids: Sequence[str] = (),
        description: str | None = None,
        width: str | None = None,
        height: str | None = None,
        depth: str | None = None,
    ) -> Artwork:
        """Create an artwork with its artists and mediums.

        Artworks created by admins are published immediately; anyone else
        submits a pending artwork that waits for review.

        Raises:
            InvalidArtworkError: If the title is blank or no artist is given.
            ArtistNotFoundError / MediumNotFoundError: For unknown references.
        """
        title = _clean(title)
        if not title:
            raise InvalidArtworkError("Title is required")
        if not artist_ids:
            raise InvalidArtworkError("At least one artist is required")

        creator = self._require_user(creator_id)
        artists = []
        for artist_id in artist_ids:
            artist = self._users.get_by_uuid(parse_user_id(artist_id))
            if artist is None:
                raise ArtistNotFoundError(artist_id)
            artists.append(artist.id)
        mediums = []
        for medium_id in medium_ids:
            medium = self._mediums.get_by_uuid(parse_medium_id(medium_id))
            if medium is None:
                raise MediumNotFoundError(medium_id)
            mediums.append(medium.id)

        status = ModerationStatus.APPROVED if creator.is_admin else ModerationStatus.PENDING
        with self._artworks.atomic():
            artwork = self._artworks.create(
                title=title,
                description=_clean(description),
                width=_clean(width),
                height=_clean(height),
                depth=_clean(depth),
                status=status,
                creator_id=creator.id,
                artist_ids=artists,
                medium_ids=mediums,
            )
        logger.info("Artwork %s created by %s with status %s", artwork.uuid, creator.uuid, status.value)
        return artwork

    def update_artwork(self, artwork_id: str, **fields: str | None) -> Artwork:
        """Apply a partial update of the editable text fields."""
        artwork = self.get_artwork(artwork_id)
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise InvalidArtworkError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
        updates = {name: _clean(value) for name, value in fields.items()}
        if "title" in updates and not updates["title"]:
            raise InvalidArtworkError("Title is required")
        if not updates:
            return artwork
        return self._artworks.update(artwork.uuid, **updates)

    def delete_artwork(self, artwork_id: str) -> None:
        artwork = self.get_artwork(artwork_id)
        self._artworks.delete(artwork.uuid)
        logger.info("Artwork %s deleted", artwork.uuid)

    def review_artwork(self, artwork_id: str, reviewer_id: str, status: str, notes: str | None = None) -> Artwork:
        """Record an admin moderation decision on an artwork.

        Raises:
            InvalidReviewError: If status is not approved or declined.
        """
        if status not in REVIEW_OUTCOMES:
            raise InvalidReviewError(status)
        artwork = self.get_artwork(artwork_id)
        reviewer = self._require_user(reviewer_id)
        reviewed = self._artworks.update_review(
            artwork.uuid,
            ModerationStatus(status),
            reviewer_id=reviewer.id,
            reviewed_at=self._clock(),
            notes=_clean(notes),
        )
        logger.info("Artwork %s reviewed by %s: %s", artwork.uuid, reviewer.uuid, status)
        return reviewed

    def list_mediums(self) -> list[Medium]:
        return self._mediums.list_mediums()

    def create_medium(self, name: str) -> Medium:
        """Create a medium.

        Raises:
            InvalidMediumError: If the name is blank.
            MediumAlreadyExistsError: If a medium with that name exists.
        """
        name = _clean(name)
        if not name:
            raise InvalidMediumError("Medium name is required")
        if self._mediums.get_by_name(name) is not None:
            raise MediumAlreadyExistsError(name)
        return self._mediums.create(name)

    def _require_image(self, artwork_id: str, image_id: str) -> ArtworkImage:
        artwork = self.get_artwork(artwork_id)
        image = self._artworks.get_image(artwork.id, parse_image_id(image_id))
        if image is None:
            raise ImageNotFoundError(image_id)
        return image

    def update_artwork_image(
        self,
        artwork_id: str,
        image_id: str,
        description: str | None = None,
        sort_order: int | None = None,
    ) -> ArtworkImage:
        image = self._require_image(artwork_id, image_id)
        updates: dict[str, str | int | None] = {}
        if description is not None:
            updates["description"] = _clean(description)
        if sort_order is not None:
            try:
                updates["sort_order"] = SortOrder(sort_order).value
            except ValueError as exc:
                raise InvalidArtworkError(str(exc)) from exc
        if not updates:
            return image
        return self._artworks.update_image(image.uuid, **updates)

    def delete_artwork_image(self, artwork_id: str, image_id: str) -> None:
        image = self._require_image(artwork_id, image_id)
        self._artworks.delete_image(image.uuid)
