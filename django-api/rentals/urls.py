from django.urls import path

from rentals.handlers import (
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
from rentals.services import build_rental_service

service = build_rental_service()

urlpatterns = [
    path("rentals", RentalListView.as_view(service=service), name="rental-list"),
    path("rentals/my-rentals", MyRentalsView.as_view(service=service), name="rental-mine"),
    path(
        "rentals/my-artworks-rentals",
        MyArtworksRentalsView.as_view(service=service),
        name="rental-my-artworks",
    ),
    path("rentals/pending", PendingRentalListView.as_view(service=service), name="rental-pending"),
    path(
        "rentals/check-availability/<str:artwork_id>",
        ArtworkAvailabilityView.as_view(service=service),
        name="rental-availability",
    ),
    path("rentals/<str:rental_id>", RentalDetailView.as_view(service=service), name="rental-detail"),
    path("rentals/<str:rental_id>/approve", ApproveRentalView.as_view(service=service), name="rental-approve"),
    path("rentals/<str:rental_id>/reject", RejectRentalView.as_view(service=service), name="rental-reject"),
    path(
        "rentals/<str:rental_id>/finalize",
        FinalizeRentalView.as_view(service=service),
        name="rental-finalize",
    ),
]
