"""HTTP handlers (views) for user accounts.

Handlers parse requests, call the service and serialize results.
Domain errors propagate to the DRF exception handler.
"""

from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.serializers import UserSerializer
from accounts.services import UserService
from core.permissions import IsAdmin
from core.responses import ok, page_params, pagination


class UserView(APIView):
    """Base view holding the injected UserService."""

    service: UserService | None = None


class UserListView(UserView):
    """Handler for GET /api/users"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        users = self.service.list_users(limit, offset)
        return ok(
            UserSerializer(users, many=True).data,
            pagination=pagination(limit, offset, len(users)),
        )


class CurrentUserView(UserView):
    """Handler for GET /api/users/me"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        user = self.service.get_user(str(request.user.uuid))
        return ok(UserSerializer(user).data)


class UserDetailView(UserView):
    """Handler for GET /api/users/{user_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, user_id: str) -> Response:
        user = self.service.get_user(user_id)
        return ok(UserSerializer(user).data)
