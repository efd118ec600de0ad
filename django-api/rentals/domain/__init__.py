from rentals.domain.models import ACTIVE_STATUSES, ArtworkSummary, Rental, RentalStatus
from rentals.domain.value_objects import RENTAL_PERIOD_MONTHS, RentalId, RentalPeriod, add_months

__all__ = [
    "ACTIVE_STATUSES",
    "ArtworkSummary",
    "Rental",
    "RentalStatus",
    "RentalId",
    "RentalPeriod",
    "RENTAL_PERIOD_MONTHS",
    "add_months",
]
