from accounts.services.user_service import UserService, parse_user_id

__all__ = ["UserService", "parse_user_id", "build_user_service"]


def build_user_service() -> UserService:
    from accounts.stores.django_store import DjangoUserStore

    return UserService(DjangoUserStore())
