from artworks.domain.models import Artwork, ArtworkImage, Medium, ModerationStatus
from artworks.domain.value_objects import ArtworkId, ImageId, MediumId, SortOrder

__all__ = [
    "Artwork",
    "ArtworkImage",
    "Medium",
    "ModerationStatus",
    "ArtworkId",
    "ImageId",
    "MediumId",
    "SortOrder",
]
