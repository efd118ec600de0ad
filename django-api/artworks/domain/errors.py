"""Domain error codes for the artworks module."""

from enum import Enum

from core.errors import BadRequestError, ConflictError, NotFoundError


class ErrorCode(Enum):
    """Domain error codes."""

    ARTWORK_NOT_FOUND = "ARTWORK_NOT_FOUND"
    ARTIST_NOT_FOUND = "ARTIST_NOT_FOUND"
    MEDIUM_NOT_FOUND = "MEDIUM_NOT_FOUND"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
    INVALID_ARTWORK_ID = "INVALID_ARTWORK_ID"
    INVALID_MEDIUM_ID = "INVALID_MEDIUM_ID"
    INVALID_IMAGE_ID = "INVALID_IMAGE_ID"
    INVALID_ARTWORK = "INVALID_ARTWORK"
    INVALID_MEDIUM = "INVALID_MEDIUM"
    INVALID_REVIEW = "INVALID_REVIEW"
    MEDIUM_ALREADY_EXISTS = "MEDIUM_ALREADY_EXISTS"


class ArtworkNotFoundError(NotFoundError):
    """Raised when an artwork is not found."""

    def __init__(self, artwork_id: str) -> None:
        super().__init__(ErrorCode.ARTWORK_NOT_FOUND, "Artwork not found")
        self.artwork_id = artwork_id


class ArtistNotFoundError(NotFoundError):
    """Raised when an artist referenced by an artwork does not exist."""

    def __init__(self, artist_id: str) -> None:
        super().__init__(ErrorCode.ARTIST_NOT_FOUND, f"Artist with UUID {artist_id} not found")
        self.artist_id = artist_id


class MediumNotFoundError(NotFoundError):
    """Raised when a medium is not found."""

    def __init__(self, medium_id: str) -> None:
        super().__init__(ErrorCode.MEDIUM_NOT_FOUND, f"Medium with UUID {medium_id} not found")
        self.medium_id = medium_id


class ImageNotFoundError(NotFoundError):
    """Raised when an image does not belong to the artwork or does not exist."""

    def __init__(self, image_id: str) -> None:
        super().__init__(ErrorCode.IMAGE_NOT_FOUND, "Image not found")
        self.image_id = image_id


class InvalidArtworkIdError(BadRequestError):
    """Raised when an artwork ID is invalid."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_ARTWORK_ID, "Invalid artwork ID format")


class InvalidMediumIdError(BadRequestError):
    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_MEDIUM_ID, "Invalid medium ID format")


class InvalidImageIdError(BadRequestError):
    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_IMAGE_ID, "Invalid image ID format")


class InvalidArtworkError(BadRequestError):
    """Raised when artwork fields break a creation or update rule."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_ARTWORK, message)


class InvalidMediumError(BadRequestError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_MEDIUM, message)


class InvalidReviewError(BadRequestError):
    """Raised when a moderation decision is not approve or decline."""

    def __init__(self, status: str) -> None:
        super().__init__(ErrorCode.INVALID_REVIEW, "Review status must be 'approved' or 'declined'")
        self.status = status


class MediumAlreadyExistsError(ConflictError):
    def __init__(self, name: str) -> None:
        super().__init__(ErrorCode.MEDIUM_ALREADY_EXISTS, "Medium with this name already exists")
        self.name = name
