"""Domain error codes for the accounts module."""

from enum import Enum

from core.errors import BadRequestError, NotFoundError


class ErrorCode(Enum):
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_USER_ID = "INVALID_USER_ID"


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(ErrorCode.USER_NOT_FOUND, "User not found")
        self.user_id = user_id


class InvalidUserIdError(BadRequestError):
    """Raised when a user ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_USER_ID, "Invalid user ID format")
