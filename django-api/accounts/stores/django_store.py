"""Django ORM implementation of the UserStore."""

from accounts import models
from accounts.domain import User, UserId, UserSummary
from accounts.stores.interfaces import UserStore


def to_user(row: models.User) -> User:
    return User(
        id=row.pk,
        uuid=UserId(row.uuid),
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        is_admin=row.is_admin,
        created_at=row.created_at,
    )


def to_user_summary(row: models.User | None) -> UserSummary | None:
    if row is None:
        return None
    return UserSummary(
        uuid=UserId(row.uuid),
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
    )


class DjangoUserStore(UserStore):
    """Database-backed user store using Django ORM."""

    def get_by_uuid(self, user_id: UserId) -> User | None:
        row = models.User.objects.filter(uuid=user_id.value).first()
        return to_user(row) if row else None

    def get_by_id(self, pk: int) -> User | None:
        row = models.User.objects.filter(pk=pk).first()
        return to_user(row) if row else None

    def list_users(self, limit: int, offset: int) -> list[User]:
        rows = models.User.objects.order_by("-created_at")[offset : offset + limit]
        return [to_user(row) for row in rows]
