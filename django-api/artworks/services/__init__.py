from artworks.services.artwork_service import ArtworkService, parse_artwork_id

__all__ = ["ArtworkService", "parse_artwork_id", "build_artwork_service"]


def build_artwork_service() -> ArtworkService:
    from accounts.stores.django_store import DjangoUserStore
    from artworks.stores.django_store import DjangoArtworkStore, DjangoMediumStore

    return ArtworkService(DjangoArtworkStore(), DjangoMediumStore(), DjangoUserStore())
