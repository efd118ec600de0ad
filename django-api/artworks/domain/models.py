"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in artworks/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from accounts.domain import UserSummary
from artworks.domain.value_objects import ArtworkId, ImageId, MediumId


class ModerationStatus(Enum):
    """Admin review state of an artwork submission."""

    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"


@dataclass(frozen=True)
class Medium:
    """Domain representation of a Medium."""

    id: int
    uuid: MediumId
    name: str


@dataclass(frozen=True)
class ArtworkImage:
    """Domain representation of an ArtworkImage (metadata only)."""

    uuid: ImageId
    filename: str
    original_filename: str
    mime_type: str
    file_size: int
    description: str | None
    sort_order: int


@dataclass(frozen=True)
class Artwork:
    """Domain representation of an Artwork."""

    id: int
    uuid: ArtworkId
    title: str
    description: str | None
    width: str | None
    height: str | None
    depth: str | None
    status: ModerationStatus
    created_by_id: int | None
    created_at: datetime
    updated_at: datetime
    creator: UserSummary | None = None
    reviewer: UserSummary | None = None
    reviewed_at: datetime | None = None
    review_notes: str | None = None
    artists: tuple[UserSummary, ...] = ()
    mediums: tuple[Medium, ...] = ()
    images: tuple[ArtworkImage, ...] = ()
