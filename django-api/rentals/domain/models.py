"""Domain models for the rental lifecycle.

A rental moves forward only:

    requested -> approved -> finalized
    requested -> rejected

Requested and approved rentals are active: an artwork can have at most
one active rental.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from accounts.domain import UserSummary
from artworks.domain import ArtworkId
from rentals.domain.value_objects import RentalId


class RentalStatus(Enum):
    REQUESTED = "requested"
    APPROVED = "approved"
    FINALIZED = "finalized"
    REJECTED = "rejected"

    @property
    def is_active(self) -> bool:
        return self in ACTIVE_STATUSES

    def can_transition_to(self, target: "RentalStatus") -> bool:
        return target in TRANSITIONS.get(self, frozenset())


ACTIVE_STATUSES = frozenset({RentalStatus.REQUESTED, RentalStatus.APPROVED})

TRANSITIONS: dict[RentalStatus, frozenset[RentalStatus]] = {
    RentalStatus.REQUESTED: frozenset({RentalStatus.APPROVED, RentalStatus.REJECTED}),
    RentalStatus.APPROVED: frozenset({RentalStatus.FINALIZED}),
}


def required_status_for(target: RentalStatus) -> RentalStatus:
    """Return the only status a rental may hold before moving to ``target``."""
    for source, targets in TRANSITIONS.items():
        if target in targets:
            return source
    raise ValueError(f"No transition leads to {target.value}")


@dataclass(frozen=True)
class ArtworkSummary:
    """The slice of an artwork embedded in a rental."""

    uuid: ArtworkId
    title: str
    description: str | None
    created_by_id: int | None


@dataclass(frozen=True)
class Rental:
    """Domain representation of a Rental."""

    id: int
    uuid: RentalId
    artwork_id: int
    user_id: int
    address: str
    phone_number: str
    start_date: date
    end_date: date
    status: RentalStatus
    created_at: datetime
    updated_at: datetime
    approved_by_id: int | None = None
    approved_at: datetime | None = None
    finalized_by_id: int | None = None
    finalized_at: datetime | None = None
    artwork: ArtworkSummary | None = None
    user: UserSummary | None = None
    approver: UserSummary | None = None
    finalizer: UserSummary | None = None
