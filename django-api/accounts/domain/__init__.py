from accounts.domain.errors import InvalidUserIdError, UserNotFoundError
from accounts.domain.models import User, UserSummary
from accounts.domain.value_objects import UserId

__all__ = [
    "User",
    "UserSummary",
    "UserId",
    "UserNotFoundError",
    "InvalidUserIdError",
]
