"""Domain error codes for the rentals module."""

from enum import Enum

from core.errors import BadRequestError, ConflictError, NotFoundError
from rentals.domain.models import RentalStatus, required_status_for


class ErrorCode(Enum):
    """Domain error codes."""

    RENTAL_NOT_FOUND = "RENTAL_NOT_FOUND"
    INVALID_RENTAL_ID = "INVALID_RENTAL_ID"
    INVALID_RENTAL_REQUEST = "INVALID_RENTAL_REQUEST"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    ARTWORK_UNAVAILABLE = "ARTWORK_UNAVAILABLE"


class RentalNotFoundError(NotFoundError):
    """Raised when a rental is not found."""

    def __init__(self, rental_id: str) -> None:
        super().__init__(ErrorCode.RENTAL_NOT_FOUND, "Rental not found")
        self.rental_id = rental_id


class InvalidRentalIdError(BadRequestError):
    """Raised when a rental ID is invalid."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_RENTAL_ID, "Invalid rental ID format")


class InvalidRentalRequestError(BadRequestError):
    """Raised when a rental request is missing contact details."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_RENTAL_REQUEST, message)


class InvalidRentalTransitionError(BadRequestError):
    """Raised when a rental is not in the status the transition starts from."""

    def __init__(self, current: RentalStatus, target: RentalStatus) -> None:
        required = required_status_for(target)
        super().__init__(
            ErrorCode.INVALID_TRANSITION,
            f"Only {required.value} rentals can be {target.value}",
        )
        self.current = current
        self.target = target


class ArtworkUnavailableError(ConflictError):
    """Raised when the artwork already has an active rental."""

    def __init__(self, artwork_id: str) -> None:
        super().__init__(ErrorCode.ARTWORK_UNAVAILABLE, "Artwork is not available for rental")
        self.artwork_id = artwork_id
