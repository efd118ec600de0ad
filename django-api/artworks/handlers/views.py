"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to core.exception_handler
"""

from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from artworks.domain import ModerationStatus
from artworks.handlers.serializers import (
    ArtworkCreateSerializer,
    ArtworkImageSerializer,
    ArtworkImageUpdateSerializer,
    ArtworkReviewSerializer,
    ArtworkSerializer,
    ArtworkUpdateSerializer,
    MediumCreateSerializer,
    MediumSerializer,
)
from artworks.services import ArtworkService
from core.permissions import IsAdmin
from core.responses import created, ok, page_params, pagination


def _is_admin(request: Request) -> bool:
    return bool(request.user.is_authenticated and getattr(request.user, "is_admin", False))


def _flag(request: Request, name: str) -> bool:
    return request.query_params.get(name, "").lower() in {"1", "true", "yes"}


class ArtworkView(APIView):
    """Base view holding the injected ArtworkService.

    ``method_permissions`` maps an HTTP method to the permission classes it
    needs; methods not listed are public.
    """

    service: ArtworkService | None = None
    method_permissions: dict[str, list] = {}

    def get_permissions(self):
        classes = self.method_permissions.get(self.request.method, [AllowAny])
        return [permission() for permission in classes]


class ArtworkListView(ArtworkView):
    """Handler for GET/POST /api/artworks"""

    method_permissions = {"POST": [IsAuthenticated]}

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        include_all = _is_admin(request) and _flag(request, "include_all")
        artworks = self.service.list_artworks(limit, offset, include_all=include_all)
        return ok(
            ArtworkSerializer(artworks, many=True).data,
            pagination=pagination(limit, offset, len(artworks)),
        )

    def post(self, request: Request) -> Response:
        payload = ArtworkCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        artwork = self.service.create_artwork(
            title=data["title"],
            creator_id=str(request.user.uuid),
            artist_ids=data["artist_uuids"],
            medium_ids=data["medium_uuids"],
            description=data.get("description"),
            width=data.get("width"),
            height=data.get("height"),
            depth=data.get("depth"),
        )
        message = (
            "Artwork created successfully"
            if artwork.status is ModerationStatus.APPROVED
            else "Artwork submitted for review"
        )
        return created(ArtworkSerializer(artwork).data, message=message)


class ArtworkSearchView(ArtworkView):
    """Handler for GET /api/artworks/search"""

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        search = request.query_params.get("search", "").strip() or None
        mediums = [m.strip() for m in request.query_params.get("mediums", "").split(",") if m.strip()]
        if _is_admin(request):
            artworks = self.service.search_artworks(search, mediums, limit, offset, include_all=True)
        else:
            user_id = str(request.user.uuid) if request.user.is_authenticated else None
            artworks = self.service.search_artworks(search, mediums, limit, offset, user_id=user_id)
        return ok(
            ArtworkSerializer(artworks, many=True).data,
            filters={"search": search, "mediums": mediums},
            pagination=pagination(limit, offset, len(artworks)),
        )


class MyArtworksView(ArtworkView):
    """Handler for GET /api/artworks/my-artworks"""

    method_permissions = {"GET": [IsAuthenticated]}

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        artworks = self.service.list_artworks(limit, offset, include_all=True, user_id=str(request.user.uuid))
        return ok(
            ArtworkSerializer(artworks, many=True).data,
            pagination=pagination(limit, offset, len(artworks)),
        )


class PendingArtworkListView(ArtworkView):
    """Handler for GET /api/artworks/pending"""

    method_permissions = {"GET": [IsAdmin]}

    def get(self, request: Request) -> Response:
        limit, offset = page_params(request)
        artworks = self.service.list_pending_artworks(limit, offset)
        return ok(
            ArtworkSerializer(artworks, many=True).data,
            pagination=pagination(limit, offset, len(artworks)),
        )


class ArtworkDetailView(ArtworkView):
    """Handler for GET/PUT/DELETE /api/artworks/{artwork_id}"""

    method_permissions = {"PUT": [IsAdmin], "DELETE": [IsAdmin]}

    def get(self, request: Request, artwork_id: str) -> Response:
        artwork = self.service.get_artwork(artwork_id)
        return ok(ArtworkSerializer(artwork).data)

    def put(self, request: Request, artwork_id: str) -> Response:
        payload = ArtworkUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        artwork = self.service.update_artwork(artwork_id, **payload.validated_data)
        return ok(ArtworkSerializer(artwork).data, message="Artwork updated successfully")

    def delete(self, request: Request, artwork_id: str) -> Response:
        self.service.delete_artwork(artwork_id)
        return ok(message="Artwork deleted successfully")


class ArtworkReviewView(ArtworkView):
    """Handler for PUT /api/artworks/{artwork_id}/review"""

    method_permissions = {"PUT": [IsAdmin]}

    def put(self, request: Request, artwork_id: str) -> Response:
        payload = ArtworkReviewSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        artwork = self.service.review_artwork(
            artwork_id,
            str(request.user.uuid),
            payload.validated_data["status"],
            payload.validated_data.get("notes"),
        )
        return ok(ArtworkSerializer(artwork).data, message=f"Artwork {artwork.status.value}")


class ArtworkImageDetailView(ArtworkView):
    """Handler for PUT/DELETE /api/artworks/{artwork_id}/images/{image_id}"""

    method_permissions = {"PUT": [IsAdmin], "DELETE": [IsAdmin]}

    def put(self, request: Request, artwork_id: str, image_id: str) -> Response:
        payload = ArtworkImageUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        image = self.service.update_artwork_image(artwork_id, image_id, **payload.validated_data)
        return ok(ArtworkImageSerializer(image).data, message="Image updated successfully")

    def delete(self, request: Request, artwork_id: str, image_id: str) -> Response:
        self.service.delete_artwork_image(artwork_id, image_id)
        return ok(message="Image deleted successfully")


class MediumListView(ArtworkView):
    """Handler for GET/POST /api/mediums"""

    method_permissions = {"POST": [IsAdmin]}

    def get(self, request: Request) -> Response:
        return ok(MediumSerializer(self.service.list_mediums(), many=True).data)

    def post(self, request: Request) -> Response:
        payload = MediumCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        medium = self.service.create_medium(payload.validated_data["name"])
        return created(MediumSerializer(medium).data, message="Medium created successfully")
