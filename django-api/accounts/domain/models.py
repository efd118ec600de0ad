"""Domain models representing persisted users.

Django ORM models are in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.value_objects import UserId


@dataclass(frozen=True)
class UserSummary:
    """The public slice of a user embedded in other resources."""

    uuid: UserId
    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email


@dataclass(frozen=True)
class User:
    """Domain representation of a User."""

    id: int
    uuid: UserId
    email: str
    first_name: str
    last_name: str
    is_admin: bool
    created_at: datetime

    def summary(self) -> UserSummary:
        return UserSummary(
            uuid=self.uuid,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )
