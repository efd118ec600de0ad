"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from rentals.domain import Rental, RentalId, RentalPeriod, RentalStatus


class RentalStore(ABC):
    """Interface for rental persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager that makes the enclosed writes all-or-nothing."""
        ...

    @abstractmethod
    def is_artwork_available(self, artwork_id: int) -> bool:
        """True when the artwork has no requested or approved rental."""
        ...

    @abstractmethod
    def create(
        self,
        *,
        artwork_id: int,
        user_id: int,
        address: str,
        phone_number: str,
        period: RentalPeriod,
    ) -> Rental:
        """Insert a requested rental.

        Raises:
            ArtworkUnavailableError: If another active rental for the artwork
                was committed first.
        """
        ...

    @abstractmethod
    def update(
        self,
        rental_id: RentalId,
        *,
        status: RentalStatus,
        **fields: int | datetime | None,
    ) -> Rental:
        ...

    @abstractmethod
    def get_by_uuid(self, rental_id: RentalId, for_update: bool = False) -> Rental | None:
        """Return a rental with artwork and user summaries, or None.

        ``for_update`` locks the row until the current transaction ends.
        """
        ...

    @abstractmethod
    def list_all(self, limit: int, offset: int) -> list[Rental]:
        ...

    @abstractmethod
    def list_by_user(self, user_id: int, limit: int, offset: int) -> list[Rental]:
        ...

    @abstractmethod
    def list_by_artwork_creator(self, creator_id: int, limit: int, offset: int) -> list[Rental]:
        """Return rentals of artworks the user created, newest first."""
        ...

    @abstractmethod
    def list_pending(self) -> list[Rental]:
        """Return requested rentals, oldest first."""
        ...

    @abstractmethod
    def delete(self, rental_id: RentalId) -> bool:
        ...
