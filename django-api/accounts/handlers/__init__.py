from accounts.handlers.views import CurrentUserView, UserDetailView, UserListView

__all__ = ["CurrentUserView", "UserDetailView", "UserListView"]
