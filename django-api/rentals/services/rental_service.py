"""Rental service - the rental lifecycle state machine.

Services:
- Depend only on interfaces (stores, notifier)
- Validate domain invariants
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from accounts.domain import User, UserNotFoundError
from accounts.services import parse_user_id
from accounts.stores.interfaces import UserStore
from artworks.domain import Artwork
from artworks.domain.errors import ArtworkNotFoundError
from artworks.services import parse_artwork_id
from artworks.stores.interfaces import ArtworkStore
from rentals.domain import Rental, RentalId, RentalPeriod, RentalStatus
from rentals.domain.errors import (
    ArtworkUnavailableError,
    InvalidRentalIdError,
    InvalidRentalRequestError,
    InvalidRentalTransitionError,
    RentalNotFoundError,
)
from rentals.notifications import RentalEvent, RentalNotifier
from rentals.stores.interfaces import RentalStore

logger = logging.getLogger(__name__)


def parse_rental_id(value: str) -> RentalId:
    try:
        return RentalId.from_string(value)
    except ValueError as exc:
        raise InvalidRentalIdError() from exc


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RentalService:
    """Service for the rental request lifecycle."""

    def __init__(
        self,
        rental_store: RentalStore,
        artwork_store: ArtworkStore,
        user_store: UserStore,
        notifier: RentalNotifier,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._rentals = rental_store
        self._artworks = artwork_store
        self._users = user_store
        self._notifier = notifier
        self._clock = clock

    def _require_user(self, user_id: str) -> User:
        user = self._users.get_by_uuid(parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _require_artwork(self, artwork_id: str) -> Artwork:
        artwork = self._artworks.get_by_uuid(parse_artwork_id(artwork_id))
        if artwork is None:
            raise ArtworkNotFoundError(artwork_id)
        return artwork

    def _require_rental(self, rental_id: str, for_update: bool = False) -> Rental:
        rental = self._rentals.get_by_uuid(parse_rental_id(rental_id), for_update=for_update)
        if rental is None:
            raise RentalNotFoundError(rental_id)
        return rental

    def _check_transition(self, rental: Rental, target: RentalStatus) -> None:
        if not rental.status.can_transition_to(target):
            raise InvalidRentalTransitionError(rental.status, target)

    def create_rental_request(self, artwork_id: str, user_id: str, address: str, phone_number: str) -> Rental:
        """Request a one-month rental of an artwork starting today.

        The availability check and the insert run in one transaction holding a
        lock on the artwork row.

        Raises:
            InvalidRentalRequestError: If address or phone number is blank.
            UserNotFoundError / ArtworkNotFoundError: For unknown references.
            ArtworkUnavailableError: If the artwork has an active rental.
        """
        address = (address or "").strip()
        phone_number = (phone_number or "").strip()
        if not address:
            raise InvalidRentalRequestError("Address is required")
        if not phone_number:
            raise InvalidRentalRequestError("Phone number is required")

        user = self._require_user(user_id)
        artwork = self._require_artwork(artwork_id)
        period = RentalPeriod.starting(self._clock().date())

        with self._rentals.atomic():
            self._artworks.lock(artwork.id)
            if not self._rentals.is_artwork_available(artwork.id):
                raise ArtworkUnavailableError(artwork_id)
            rental = self._rentals.create(
                artwork_id=artwork.id,
                user_id=user.id,
                address=address,
                phone_number=phone_number,
                period=period,
            )
            self._notifier.notify(RentalEvent.REQUESTED, rental)

        logger.info("Rental %s requested for artwork %s by %s", rental.uuid, artwork.uuid, user.uuid)
        return rental

    def approve_rental(self, rental_id: str, approver_id: str) -> Rental:
        """Move a requested rental to approved.

        Raises:
            RentalNotFoundError: If the rental does not exist.
            InvalidRentalTransitionError: If the rental is not requested.
            UserNotFoundError: If the approver does not exist.
        """
        with self._rentals.atomic():
            rental = self._require_rental(rental_id, for_update=True)
            self._check_transition(rental, RentalStatus.APPROVED)
            approver = self._require_user(approver_id)
            rental = self._rentals.update(
                rental.uuid,
                status=RentalStatus.APPROVED,
                approved_by_id=approver.id,
                approved_at=self._clock(),
            )
            self._notifier.notify(RentalEvent.APPROVED, rental)

        logger.info("Rental %s approved by %s", rental.uuid, approver.uuid)
        return rental

    def reject_rental(self, rental_id: str, approver_id: str) -> Rental:
        """Move a requested rental to rejected. The rejecting user is not recorded."""
        with self._rentals.atomic():
            rental = self._require_rental(rental_id, for_update=True)
            self._check_transition(rental, RentalStatus.REJECTED)
            rental = self._rentals.update(rental.uuid, status=RentalStatus.REJECTED)
            self._notifier.notify(RentalEvent.REJECTED, rental)

        logger.info("Rental %s rejected by %s", rental.uuid, approver_id)
        return rental

    def finalize_rental(self, rental_id: str, approver_id: str) -> Rental:
        """Move an approved rental to finalized."""
        with self._rentals.atomic():
            rental = self._require_rental(rental_id, for_update=True)
            self._check_transition(rental, RentalStatus.FINALIZED)
            approver = self._require_user(approver_id)
            rental = self._rentals.update(
                rental.uuid,
                status=RentalStatus.FINALIZED,
                finalized_by_id=approver.id,
                finalized_at=self._clock(),
            )

        logger.info("Rental %s finalized by %s", rental.uuid, approver.uuid)
        return rental

    def check_artwork_availability(self, artwork_id: str) -> bool:
        artwork = self._require_artwork(artwork_id)
        return self._rentals.is_artwork_available(artwork.id)

    def get_user_rentals(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Rental]:
        user = self._require_user(user_id)
        return self._rentals.list_by_user(user.id, limit, offset)

    def get_all_rentals(self, limit: int = 50, offset: int = 0) -> list[Rental]:
        return self._rentals.list_all(limit, offset)

    def get_pending_requests(self) -> list[Rental]:
        return self._rentals.list_pending()

    def get_rental_by_uuid(self, rental_id: str) -> Rental:
        return self._require_rental(rental_id)

    def get_rentals_for_user_artworks(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Rental]:
        """Return rentals of the artworks the user created."""
        user = self._require_user(user_id)
        return self._rentals.list_by_artwork_creator(user.id, limit, offset)

    def can_manage_rental(self, rental_id: str, user_id: str) -> bool:
        """Admins manage every rental; creators manage rentals of their artworks."""
        user = self._require_user(user_id)
        if user.is_admin:
            return True
        rental = self._require_rental(rental_id)
        return rental.artwork is not None and rental.artwork.created_by_id == user.id
