"""Notification interfaces for rental lifecycle events."""

from abc import ABC, abstractmethod
from enum import Enum

from rentals.domain import Rental


class RentalEvent(Enum):
    REQUESTED = "rental_requested"
    APPROVED = "rental_approved"
    REJECTED = "rental_rejected"


class RentalNotifier(ABC):
    """Receives rental events once the state change that caused them is committed."""

    @abstractmethod
    def notify(self, event: RentalEvent, rental: Rental) -> None:
        ...
