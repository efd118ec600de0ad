from django.urls import path

from artworks.handlers import (
    ArtworkDetailView,
    ArtworkImageDetailView,
    ArtworkListView,
    ArtworkReviewView,
    ArtworkSearchView,
    MediumListView,
    MyArtworksView,
    PendingArtworkListView,
)
from artworks.services import build_artwork_service

service = build_artwork_service()

urlpatterns = [
    path("artworks", ArtworkListView.as_view(service=service), name="artwork-list"),
    path("artworks/search", ArtworkSearchView.as_view(service=service), name="artwork-search"),
    path("artworks/my-artworks", MyArtworksView.as_view(service=service), name="artwork-mine"),
    path("artworks/pending", PendingArtworkListView.as_view(service=service), name="artwork-pending"),
    path("artworks/<str:artwork_id>", ArtworkDetailView.as_view(service=service), name="artwork-detail"),
    path(
        "artworks/<str:artwork_id>/review",
        ArtworkReviewView.as_view(service=service),
        name="artwork-review",
    ),
    path(
        "artworks/<str:artwork_id>/images/<str:image_id>",
        ArtworkImageDetailView.as_view(service=service),
        name="artwork-image-detail",
    ),
    path("mediums", MediumListView.as_view(service=service), name="medium-list"),
]
