from rentals.services.rental_service import RentalService, parse_rental_id

__all__ = ["RentalService", "parse_rental_id", "build_rental_service"]


def build_rental_service() -> RentalService:
    from accounts.stores.django_store import DjangoUserStore
    from artworks.stores.django_store import DjangoArtworkStore
    from rentals.notifications.mailer import EmailRentalNotifier, OnCommitNotifier
    from rentals.stores.django_store import DjangoRentalStore

    return RentalService(
        DjangoRentalStore(),
        DjangoArtworkStore(),
        DjangoUserStore(),
        OnCommitNotifier(EmailRentalNotifier()),
    )
