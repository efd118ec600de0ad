from rentals.notifications.interfaces import RentalEvent, RentalNotifier

__all__ = ["RentalEvent", "RentalNotifier"]
