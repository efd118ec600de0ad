"""Pytest configuration and shared fixtures."""

import itertools

import pytest
from rest_framework.test import APIClient

_sequence = itertools.count(1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_user(db):
    from accounts.models import User

    def make(is_admin: bool = False, **fields):
        n = next(_sequence)
        fields.setdefault("username", f"user{n}")
        fields.setdefault("email", f"user{n}@example.com")
        fields.setdefault("first_name", f"First{n}")
        fields.setdefault("last_name", f"Last{n}")
        return User.objects.create_user(password="secret", is_admin=is_admin, **fields)

    return make


@pytest.fixture
def user(make_user):
    return make_user(first_name="Ada", last_name="Renter", email="ada@example.com")


@pytest.fixture
def admin_user(make_user):
    return make_user(is_admin=True, first_name="Grace", last_name="Admin", email="admin@example.com")


@pytest.fixture
def make_artwork(db):
    from artworks.models import Artwork

    def make(created_by=None, artists=(), status=Artwork.Status.APPROVED, **fields):
        fields.setdefault("title", f"Artwork {next(_sequence)}")
        artwork = Artwork.objects.create(created_by=created_by, status=status, **fields)
        artwork.artists.set(artists)
        return artwork

    return make


@pytest.fixture
def artwork(make_artwork, admin_user):
    return make_artwork(created_by=admin_user, artists=[admin_user], title="Water Lilies")


@pytest.fixture
def make_rental(db):
    from datetime import date

    from rentals.models import Rental

    def make(artwork, user, status=Rental.Status.REQUESTED, **fields):
        fields.setdefault("address", "1 Gallery Road")
        fields.setdefault("phone_number", "555-0100")
        fields.setdefault("start_date", date(2024, 3, 1))
        fields.setdefault("end_date", date(2024, 4, 1))
        return Rental.objects.create(artwork=artwork, user=user, status=status, **fields)

    return make


@pytest.fixture
def client_for(api_client):
    """Return an APIClient authenticated as the given user."""

    def login(user) -> APIClient:
        api_client.force_authenticate(user=user)
        return api_client

    return login
