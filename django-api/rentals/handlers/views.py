"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to core.exception_handler
"""

from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdmin
from core.responses import created, ok, page_params, pagination
from rentals.domain import Rental
from rentals.handlers.serializers import RentalCreateSerializer, RentalSerializer
from rentals.services import RentalService


def _paginated(rentals: list[Rental], limit: int, offset: int) -> Response:
    return ok(
        RentalSerializer(rentals, many=True).data,
        pagination=pagination(limit, offset, len(rentals)),
    )


class RentalView(APIView):
    """Base view holding the injected RentalService."""

    service: RentalService | None = None
    method_permissions: dict[str, list] = {}

    def get_permissions(self):
        classes = self.method_permissions.get(self.request.method, [IsAuthenticated])
        return [permission() for permission in classes]


class RentalListView(RentalView):
    """Handler for GET/POST /api/rentals"""

    method_permissions = {"GET": [IsAdmin], "POST": [IsAuthenticated]}

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        return _paginated(self.service.get_all_rentals(limit, offset), limit, offset)

    def post(self, request: Request) -> Response:
        payload = RentalCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        rental = self.service.create_rental_request(
            data["artwork_uuid"],
            str(request.user.uuid),
            data["address"],
            data["phone_number"],
        )
        return created(RentalSerializer(rental).data, message="Rental request submitted successfully")


class MyRentalsView(RentalView):
    """Handler for GET /api/rentals/my-rentals"""

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        return _paginated(self.service.get_user_rentals(str(request.user.uuid), limit, offset), limit, offset)


class MyArtworksRentalsView(RentalView):
    """Handler for GET /api/rentals/my-artworks-rentals"""

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        rentals = self.service.get_rentals_for_user_artworks(str(request.user.uuid), limit, offset)
        return _paginated(rentals, limit, offset)


class PendingRentalListView(RentalView):
    """Handler for GET /api/rentals/pending"""

    method_permissions = {"GET": [IsAdmin]}

    def get(self, request: Request) -> Response:
        return ok(RentalSerializer(self.service.get_pending_requests(), many=True).data)


class ArtworkAvailabilityView(RentalView):
    """Handler for GET /api/rentals/check-availability/{artwork_id}"""

    method_permissions = {"GET": [AllowAny]}

    def get(self, request: Request, artwork_id: str) -> Response:
        return ok({"available": self.service.check_artwork_availability(artwork_id)})


class RentalDetailView(RentalView):
    """Handler for GET /api/rentals/{rental_id}

    Requesters see their own rentals; admins see every rental.
    """

    def get(self, request: Request, rental_id: str) -> Response:
        rental = self.service.get_rental_by_uuid(rental_id)
        if rental.user_id != request.user.pk and not getattr(request.user, "is_admin", False):
            raise PermissionDenied("Access denied")
        return ok(RentalSerializer(rental).data)


class RentalTransitionView(RentalView):
    """Base for PUT /api/rentals/{rental_id}/<action>.

    Only admins and the creator of the rented artwork may move a rental.
    ``transition`` names the RentalService method the subclass applies.
    """

    transition: str
    message: str

    def put(self, request: Request, rental_id: str) -> Response:
        user_id = str(request.user.uuid)
        if not self.service.can_manage_rental(rental_id, user_id):
            raise PermissionDenied("Access denied")
        rental = getattr(self.service, self.transition)(rental_id, user_id)
        return ok(RentalSerializer(rental).data, message=self.message)


class ApproveRentalView(RentalTransitionView):
    transition = "approve_rental"
    message = "Rental approved successfully"


class RejectRentalView(RentalTransitionView):
    transition = "reject_rental"
    message = "Rental rejected successfully"


class FinalizeRentalView(RentalTransitionView):
    transition = "finalize_rental"
    message = "Rental finalized successfully"
