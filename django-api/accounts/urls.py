from django.urls import path

from accounts.handlers import CurrentUserView, UserDetailView, UserListView
from accounts.services import build_user_service

service = build_user_service()

urlpatterns = [
    path("users", UserListView.as_view(service=service), name="user-list"),
    path("users/me", CurrentUserView.as_view(service=service), name="user-me"),
    path("users/<str:user_id>", UserDetailView.as_view(service=service), name="user-detail"),
]
