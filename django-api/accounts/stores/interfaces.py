"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import User, UserId


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def get_by_uuid(self, user_id: UserId) -> User | None:
        """Return a user by public ID, or None if not found."""
        ...

    @abstractmethod
    def get_by_id(self, pk: int) -> User | None:
        """Return a user by surrogate key, or None if not found."""
        ...

    @abstractmethod
    def list_users(self, limit: int, offset: int) -> list[User]:
        """Return users ordered by created_at descending."""
        ...
