"""Unit tests for RentalService and ArtworkService.

Services depend only on store interfaces, so these run against in-memory
fakes without a database.
Run with: pytest tests/test_services.py -v
"""

from contextlib import nullcontext
from dataclasses import replace
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from accounts.domain import User, UserId, UserNotFoundError
from artworks.domain import Artwork, ArtworkId, Medium, MediumId, ModerationStatus
from artworks.domain.errors import (
    ArtistNotFoundError,
    ArtworkNotFoundError,
    InvalidArtworkError,
    InvalidArtworkIdError,
    InvalidReviewError,
    MediumAlreadyExistsError,
)
from artworks.services import ArtworkService
from rentals.domain import ArtworkSummary, Rental, RentalId, RentalStatus
from rentals.domain.errors import (
    ArtworkUnavailableError,
    InvalidRentalIdError,
    InvalidRentalRequestError,
    InvalidRentalTransitionError,
    RentalNotFoundError,
)
from rentals.notifications import RentalEvent
from rentals.services import RentalService

NOW = datetime(2024, 1, 31, 9, 30, tzinfo=UTC)


def make_user(pk: int, is_admin: bool = False) -> User:
    return User(
        id=pk,
        uuid=UserId(uuid4()),
        email=f"user{pk}@example.com",
        first_name=f"First{pk}",
        last_name=f"Last{pk}",
        is_admin=is_admin,
        created_at=NOW,
    )


def make_artwork(pk: int, created_by_id: int | None, status=ModerationStatus.APPROVED) -> Artwork:
    return Artwork(
        id=pk,
        uuid=ArtworkId(uuid4()),
        title=f"Artwork {pk}",
        description=None,
        width=None,
        height=None,
        depth=None,
        status=status,
        created_by_id=created_by_id,
        created_at=NOW,
        updated_at=NOW,
    )


class FakeUserStore:
    def __init__(self, *users: User) -> None:
        self.users = {user.uuid: user for user in users}

    def get_by_uuid(self, user_id):
        return self.users.get(user_id)

    def get_by_id(self, pk):
        return next((user for user in self.users.values() if user.id == pk), None)


class FakeArtworkStore:
    def __init__(self, *artworks: Artwork) -> None:
        self.artworks = {artwork.uuid: artwork for artwork in artworks}
        self.locked: list[int] = []

    def atomic(self):
        return nullcontext()

    def get_by_uuid(self, artwork_id):
        return self.artworks.get(artwork_id)

    def get_by_id(self, pk):
        return next((artwork for artwork in self.artworks.values() if artwork.id == pk), None)

    def lock(self, pk):
        self.locked.append(pk)

    def create(self, *, title, description, width, height, depth, status, creator_id, artist_ids, medium_ids):
        artwork = replace(
            make_artwork(len(self.artworks) + 1, creator_id, status),
            title=title,
            description=description,
            width=width,
            height=height,
            depth=depth,
        )
        self.artworks[artwork.uuid] = artwork
        return artwork


class FakeMediumStore:
    def __init__(self, *mediums: Medium) -> None:
        self.mediums = list(mediums)

    def get_by_uuid(self, medium_id):
        return next((medium for medium in self.mediums if medium.uuid == medium_id), None)

    def get_by_name(self, name):
        return next((medium for medium in self.mediums if medium.name.lower() == name.lower()), None)

    def create(self, name):
        medium = Medium(id=len(self.mediums) + 1, uuid=MediumId(uuid4()), name=name)
        self.mediums.append(medium)
        return medium


class FakeRentalStore:
    def __init__(self, artworks: FakeArtworkStore, users: FakeUserStore) -> None:
        self._artworks = artworks
        self._users = users
        self.rentals: dict[RentalId, Rental] = {}
        self.locked_reads = 0

    def atomic(self):
        return nullcontext()

    def is_artwork_available(self, artwork_id):
        return not any(r.artwork_id == artwork_id and r.status.is_active for r in self.rentals.values())

    def create(self, *, artwork_id, user_id, address, phone_number, period, status=RentalStatus.REQUESTED):
        artwork = self._artworks.get_by_id(artwork_id)
        rental = Rental(
            id=len(self.rentals) + 1,
            uuid=RentalId(uuid4()),
            artwork_id=artwork_id,
            user_id=user_id,
            address=address,
            phone_number=phone_number,
            start_date=period.start if period else date(2024, 1, 1),
            end_date=period.end if period else date(2024, 2, 1),
            status=status,
            created_at=NOW,
            updated_at=NOW,
            artwork=ArtworkSummary(
                uuid=artwork.uuid,
                title=artwork.title,
                description=artwork.description,
                created_by_id=artwork.created_by_id,
            ),
            user=self._users.get_by_id(user_id).summary(),
        )
        self.rentals[rental.uuid] = rental
        return rental

    def update(self, rental_id, *, status, **fields):
        self.rentals[rental_id] = replace(self.rentals[rental_id], status=status, **fields)
        return self.rentals[rental_id]

    def get_by_uuid(self, rental_id, for_update=False):
        if for_update:
            self.locked_reads += 1
        return self.rentals.get(rental_id)

    def list_by_user(self, user_id, limit, offset):
        return [r for r in self.rentals.values() if r.user_id == user_id][offset : offset + limit]

    def list_by_artwork_creator(self, creator_id, limit, offset):
        rentals = [r for r in self.rentals.values() if r.artwork.created_by_id == creator_id]
        return rentals[offset : offset + limit]


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[tuple[RentalEvent, Rental]] = []

    def notify(self, event, rental):
        self.events.append((event, rental))


@pytest.fixture
def admin():
    return make_user(1, is_admin=True)


@pytest.fixture
def creator():
    return make_user(2)


@pytest.fixture
def renter():
    return make_user(3)


@pytest.fixture
def artwork(creator):
    return make_artwork(10, creator.id)


@pytest.fixture
def stores(admin, creator, renter, artwork):
    users = FakeUserStore(admin, creator, renter)
    artworks = FakeArtworkStore(artwork)
    return users, artworks, FakeRentalStore(artworks, users)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def service(stores, notifier):
    users, artworks, rentals = stores
    return RentalService(rentals, artworks, users, notifier, clock=lambda: NOW)


@pytest.fixture
def rental_store(stores):
    return stores[2]


def seed_rental(rental_store, artwork, renter, status):
    return rental_store.create(
        artwork_id=artwork.id,
        user_id=renter.id,
        address="1 Gallery Road",
        phone_number="555-0100",
        period=None,
        status=status,
    )


class TestCreateRentalRequest:
    def test_creates_requested_rental_for_one_month(self, service, artwork, renter, notifier, stores):
        rental = service.create_rental_request(str(artwork.uuid), str(renter.uuid), "1 Gallery Road", "555-0100")

        assert rental.status is RentalStatus.REQUESTED
        assert rental.start_date == date(2024, 1, 31)
        assert rental.end_date == date(2024, 2, 29)
        assert notifier.events == [(RentalEvent.REQUESTED, rental)]
        assert stores[1].locked == [artwork.id]

    def test_strips_contact_details(self, service, artwork, renter):
        rental = service.create_rental_request(str(artwork.uuid), str(renter.uuid), "  1 Gallery Road ", " 555 ")

        assert rental.address == "1 Gallery Road"
        assert rental.phone_number == "555"

    @pytest.mark.parametrize(("address", "phone"), [("", "555-0100"), ("1 Gallery Road", "   ")])
    def test_blank_contact_details_are_rejected(self, service, artwork, renter, rental_store, address, phone):
        with pytest.raises(InvalidRentalRequestError):
            service.create_rental_request(str(artwork.uuid), str(renter.uuid), address, phone)

        assert rental_store.rentals == {}

    def test_invalid_artwork_id(self, service, renter):
        with pytest.raises(InvalidArtworkIdError):
            service.create_rental_request("nope", str(renter.uuid), "1 Gallery Road", "555-0100")

    def test_unknown_user(self, service, artwork):
        with pytest.raises(UserNotFoundError):
            service.create_rental_request(str(artwork.uuid), str(uuid4()), "1 Gallery Road", "555-0100")

    def test_unknown_artwork(self, service, renter):
        with pytest.raises(ArtworkNotFoundError):
            service.create_rental_request(str(uuid4()), str(renter.uuid), "1 Gallery Road", "555-0100")

    @pytest.mark.parametrize("status", [RentalStatus.REQUESTED, RentalStatus.APPROVED])
    def test_active_rental_blocks_new_request(self, service, artwork, renter, rental_store, notifier, status):
        seed_rental(rental_store, artwork, renter, status)

        with pytest.raises(ArtworkUnavailableError):
            service.create_rental_request(str(artwork.uuid), str(renter.uuid), "1 Gallery Road", "555-0100")

        assert len(rental_store.rentals) == 1
        assert notifier.events == []

    @pytest.mark.parametrize("status", [RentalStatus.REJECTED, RentalStatus.FINALIZED])
    def test_closed_rental_frees_artwork(self, service, artwork, renter, rental_store, status):
        seed_rental(rental_store, artwork, renter, status)

        assert service.check_artwork_availability(str(artwork.uuid)) is True
        service.create_rental_request(str(artwork.uuid), str(renter.uuid), "1 Gallery Road", "555-0100")
        assert len(rental_store.rentals) == 2


class TestTransitions:
    def test_approve_records_approver(self, service, artwork, renter, admin, rental_store, notifier):
        rental = seed_rental(rental_store, artwork, renter, RentalStatus.REQUESTED)

        approved = service.approve_rental(str(rental.uuid), str(admin.uuid))

        assert approved.status is RentalStatus.APPROVED
        assert approved.approved_by_id == admin.id
        assert approved.approved_at == NOW
        assert notifier.events == [(RentalEvent.APPROVED, approved)]
        assert rental_store.locked_reads == 1

    @pytest.mark.parametrize("status", [RentalStatus.APPROVED, RentalStatus.REJECTED, RentalStatus.FINALIZED])
    def test_approve_requires_requested(self, service, artwork, renter, admin, rental_store, status):
        rental = seed_rental(rental_store, artwork, renter, status)

        with pytest.raises(InvalidRentalTransitionError, match="Only requested rentals can be approved"):
            service.approve_rental(str(rental.uuid), str(admin.uuid))

        assert rental_store.rentals[rental.uuid].status is status

    def test_approve_unknown_approver_leaves_rental(self, service, artwork, renter, rental_store):
        rental = seed_rental(rental_store, artwork, renter, RentalStatus.REQUESTED)

        with pytest.raises(UserNotFoundError):
            service.approve_rental(str(rental.uuid), str(uuid4()))

        assert rental_store.rentals[rental.uuid].status is RentalStatus.REQUESTED

    def test_reject_records_no_approver(self, service, artwork, renter, admin, rental_store, notifier):
        rental = seed_rental(rental_store, artwork, renter, RentalStatus.REQUESTED)

        rejected = service.reject_rental(str(rental.uuid), str(admin.uuid))

        assert rejected.status is RentalStatus.REJECTED
        assert rejected.approved_by_id is None
        assert notifier.events == [(RentalEvent.REJECTED, rejected)]

    @pytest.mark.parametrize("status", [RentalStatus.APPROVED, RentalStatus.REJECTED, RentalStatus.FINALIZED])
    def test_reject_requires_requested(self, service, artwork, renter, admin, rental_store, status):
        rental = seed_rental(rental_store, artwork, renter, status)

        with pytest.raises(InvalidRentalTransitionError, match="Only requested rentals can be rejected"):
            service.reject_rental(str(rental.uuid), str(admin.uuid))

        assert rental_store.rentals[rental.uuid].status is status

    def test_finalize_approved_rental(self, service, artwork, renter, admin, rental_store, notifier):
        rental = seed_rental(rental_store, artwork, renter, RentalStatus.APPROVED)

        finalized = service.finalize_rental(str(rental.uuid), str(admin.uuid))

        assert finalized.status is RentalStatus.FINALIZED
        assert finalized.finalized_by_id == admin.id
        assert finalized.finalized_at == NOW
        assert notifier.events == []

    @pytest.mark.parametrize("status", [RentalStatus.REQUESTED, RentalStatus.REJECTED, RentalStatus.FINALIZED])
    def test_finalize_requires_approved(self, service, artwork, renter, admin, rental_store, status):
        rental = seed_rental(rental_store, artwork, renter, status)

        with pytest.raises(InvalidRentalTransitionError, match="Only approved rentals can be finalized"):
            service.finalize_rental(str(rental.uuid), str(admin.uuid))

        assert rental_store.rentals[rental.uuid].status is status

    def test_unknown_rental(self, service, admin):
        with pytest.raises(RentalNotFoundError):
            service.approve_rental(str(uuid4()), str(admin.uuid))

    def test_invalid_rental_id(self, service, admin):
        with pytest.raises(InvalidRentalIdError):
            service.reject_rental("42", str(admin.uuid))


class TestReads:
    def test_availability_of_unknown_artwork(self, service):
        with pytest.raises(ArtworkNotFoundError):
            service.check_artwork_availability(str(uuid4()))

    def test_get_user_rentals_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            service.get_user_rentals(str(uuid4()))

    def test_get_user_rentals(self, service, artwork, renter, admin, rental_store):
        mine = seed_rental(rental_store, artwork, renter, RentalStatus.FINALIZED)
        seed_rental(rental_store, artwork, admin, RentalStatus.REQUESTED)

        assert service.get_user_rentals(str(renter.uuid)) == [mine]

    def test_rentals_for_user_artworks(self, service, artwork, creator, renter, rental_store):
        rental = seed_rental(rental_store, artwork, renter, RentalStatus.REQUESTED)

        assert service.get_rentals_for_user_artworks(str(creator.uuid)) == [rental]
        assert service.get_rentals_for_user_artworks(str(renter.uuid)) == []

    def test_get_rental_by_uuid_not_found(self, service):
        with pytest.raises(RentalNotFoundError):
            service.get_rental_by_uuid(str(uuid4()))


class TestCanManageRental:
    @pytest.fixture
    def rental(self, artwork, renter, rental_store):
        return seed_rental(rental_store, artwork, renter, RentalStatus.REQUESTED)

    def test_admin_can_manage(self, service, rental, admin):
        assert service.can_manage_rental(str(rental.uuid), str(admin.uuid)) is True

    def test_artwork_creator_can_manage(self, service, rental, creator):
        assert service.can_manage_rental(str(rental.uuid), str(creator.uuid)) is True

    def test_requester_cannot_manage(self, service, rental, renter):
        assert service.can_manage_rental(str(rental.uuid), str(renter.uuid)) is False


class TestArtworkService:
    @pytest.fixture
    def oils(self):
        return Medium(id=1, uuid=MediumId(uuid4()), name="Oil")

    @pytest.fixture
    def artwork_service(self, admin, creator, artwork, oils):
        return ArtworkService(
            FakeArtworkStore(artwork),
            FakeMediumStore(oils),
            FakeUserStore(admin, creator),
            clock=lambda: NOW,
        )

    def test_admin_creations_are_approved(self, artwork_service, admin, creator, oils):
        created = artwork_service.create_artwork(
            title=" Haystacks ",
            creator_id=str(admin.uuid),
            artist_ids=[str(creator.uuid)],
            medium_ids=[str(oils.uuid)],
        )

        assert created.title == "Haystacks"
        assert created.status is ModerationStatus.APPROVED

    def test_user_submissions_wait_for_review(self, artwork_service, creator):
        created = artwork_service.create_artwork(
            title="Haystacks", creator_id=str(creator.uuid), artist_ids=[str(creator.uuid)]
        )

        assert created.status is ModerationStatus.PENDING

    def test_title_is_required(self, artwork_service, creator):
        with pytest.raises(InvalidArtworkError, match="Title is required"):
            artwork_service.create_artwork(title="  ", creator_id=str(creator.uuid), artist_ids=[str(creator.uuid)])

    def test_unknown_artist(self, artwork_service, creator):
        with pytest.raises(ArtistNotFoundError):
            artwork_service.create_artwork(title="Haystacks", creator_id=str(creator.uuid), artist_ids=[str(uuid4())])

    def test_duplicate_medium_name(self, artwork_service):
        with pytest.raises(MediumAlreadyExistsError):
            artwork_service.create_medium("oil")

    def test_create_medium(self, artwork_service):
        assert artwork_service.create_medium(" Bronze ").name == "Bronze"

    def test_review_rejects_unknown_outcome(self, artwork_service, artwork, admin):
        with pytest.raises(InvalidReviewError):
            artwork_service.review_artwork(str(artwork.uuid), str(admin.uuid), "pending")

    def test_update_rejects_unknown_fields(self, artwork_service, artwork):
        with pytest.raises(InvalidArtworkError):
            artwork_service.update_artwork(str(artwork.uuid), status="approved")
