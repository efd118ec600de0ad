"""User service: lookups shared by the account endpoints."""

from accounts.domain import InvalidUserIdError, User, UserId, UserNotFoundError
from accounts.stores.interfaces import UserStore


def parse_user_id(value: str) -> UserId:
    try:
        return UserId.from_string(value)
    except ValueError as exc:
        raise InvalidUserIdError() from exc


class UserService:
    """Service for user account operations."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def get_user(self, user_id: str) -> User:
        """Return a user by public ID.

        Raises:
            InvalidUserIdError: If the user_id is not a valid UUID.
            UserNotFoundError: If the user does not exist.
        """
        user = self._store.get_by_uuid(parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self, limit: int = 50, offset: int = 0) -> list[User]:
        return self._store.list_users(limit, offset)
