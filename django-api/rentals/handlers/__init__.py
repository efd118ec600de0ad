from rentals.handlers.views import (
    ApproveRentalView,
    ArtworkAvailabilityView,
    FinalizeRentalView,
    MyArtworksRentalsView,
    MyRentalsView,
    PendingRentalListView,
    RejectRentalView,
    RentalDetailView,
    RentalListView,
)

__all__ = [
    "ApproveRentalView",
    "ArtworkAvailabilityView",
    "FinalizeRentalView",
    "MyArtworksRentalsView",
    "MyRentalsView",
    "PendingRentalListView",
    "RejectRentalView",
    "RentalDetailView",
    "RentalListView",
]
