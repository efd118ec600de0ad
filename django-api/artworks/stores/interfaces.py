"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import datetime

from artworks.domain import Artwork, ArtworkId, ArtworkImage, ImageId, Medium, MediumId, ModerationStatus


class ArtworkStore(ABC):
    """Interface for artwork persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager that makes the enclosed writes all-or-nothing."""
        ...

    @abstractmethod
    def get_by_uuid(self, artwork_id: ArtworkId) -> Artwork | None:
        """Return an artwork with artists, mediums and images, or None."""
        ...

    @abstractmethod
    def get_by_id(self, pk: int) -> Artwork | None:
        ...

    @abstractmethod
    def lock(self, pk: int) -> None:
        """Take a row lock on the artwork until the current transaction ends."""
        ...

    @abstractmethod
    def list_artworks(
        self,
        limit: int,
        offset: int,
        status: ModerationStatus | None = None,
        creator_id: int | None = None,
    ) -> list[Artwork]:
        """Return artworks ordered by created_at descending.

        ``status`` None means any status; ``creator_id`` restricts to one creator.
        """
        ...

    @abstractmethod
    def search(
        self,
        term: str | None,
        medium_ids: Sequence[MediumId],
        limit: int,
        offset: int,
        status: ModerationStatus | None = None,
        visible_to_creator_id: int | None = None,
    ) -> list[Artwork]:
        """Match title or artist name (case-insensitive) and any of the mediums.

        With a status, artworks created by ``visible_to_creator_id`` are
        returned whatever their status.
        """
        ...

    @abstractmethod
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
        ...

    @abstractmethod
    def update(self, artwork_id: ArtworkId, **fields: str | None) -> Artwork:
        ...

    @abstractmethod
    def delete(self, artwork_id: ArtworkId) -> bool:
        ...

    @abstractmethod
    def update_review(
        self,
        artwork_id: ArtworkId,
        status: ModerationStatus,
        reviewer_id: int,
        reviewed_at: datetime,
        notes: str | None,
    ) -> Artwork:
        ...

    @abstractmethod
    def get_image(self, artwork_pk: int, image_id: ImageId) -> ArtworkImage | None:
        """Return an image only when it belongs to the given artwork."""
        ...

    @abstractmethod
    def update_image(self, image_id: ImageId, **fields: str | int | None) -> ArtworkImage:
        ...

    @abstractmethod
    def delete_image(self, image_id: ImageId) -> bool:
        ...


class MediumStore(ABC):
    """Interface for medium persistence operations."""

    @abstractmethod
    def list_mediums(self) -> list[Medium]:
        """Return all mediums ordered by name."""
        ...

    @abstractmethod
    def get_by_uuid(self, medium_id: MediumId) -> Medium | None:
        ...

    @abstractmethod
    def get_by_name(self, name: str) -> Medium | None:
        ...

    @abstractmethod
    def create(self, name: str) -> Medium:
        """Insert a medium.

        Raises:
            MediumAlreadyExistsError: If the name was taken concurrently.
        """
        ...
