from artworks.handlers.views import (
    ArtworkDetailView,
    ArtworkImageDetailView,
    ArtworkListView,
    ArtworkReviewView,
    ArtworkSearchView,
    MediumListView,
    MyArtworksView,
    PendingArtworkListView,
)

__all__ = [
    "ArtworkDetailView",
    "ArtworkImageDetailView",
    "ArtworkListView",
    "ArtworkReviewView",
    "ArtworkSearchView",
    "MediumListView",
    "MyArtworksView",
    "PendingArtworkListView",
]
