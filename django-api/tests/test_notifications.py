"""Tests for rental email notifications.

Mail goes out only after commit, and a failing mail backend never affects
the rental operation.
Run with: pytest tests/test_notifications.py -v
"""

import logging
from datetime import date
from uuid import uuid4

import pytest

from accounts.domain import UserId, UserSummary
from artworks.domain import ArtworkId
from rentals.domain import ArtworkSummary, Rental, RentalId, RentalStatus
from rentals.models import Rental as RentalRow
from rentals.notifications import RentalEvent
from rentals.notifications.mailer import EmailRentalNotifier, OnCommitNotifier, render

pytestmark = pytest.mark.django_db

ADMIN_EMAIL = "curator@example.com"


@pytest.fixture(autouse=True)
def admin_address(settings):
    settings.RENTAL_ADMIN_EMAIL = ADMIN_EMAIL
    settings.DEFAULT_FROM_EMAIL = "gallery@example.com"


@pytest.fixture
def rental():
    recipient = UserSummary(uuid=UserId(uuid4()), first_name="Ada", last_name="Renter", email="ada@example.com")
    return Rental(
        id=1,
        uuid=RentalId(uuid4()),
        artwork_id=1,
        user_id=1,
        address="1 Gallery Road",
        phone_number="555-0100",
        start_date=date(2024, 1, 31),
        end_date=date(2024, 2, 29),
        status=RentalStatus.REQUESTED,
        created_at=None,
        updated_at=None,
        artwork=ArtworkSummary(uuid=ArtworkId(uuid4()), title="Water Lilies", description=None, created_by_id=1),
        user=recipient,
    )


def request_rental(client, artwork):
    return client.post(
        "/api/rentals",
        {"artwork_uuid": str(artwork.uuid), "address": "1 Gallery Road", "phone_number": "555-0100"},
        format="json",
    )


class TestRender:
    def test_requested_email_names_artwork_and_requester(self, rental):
        subject, body = render(RentalEvent.REQUESTED, rental.user, rental.artwork, rental)

        assert subject == 'New Artwork Rental Request: "Water Lilies"'
        assert "Ada Renter <ada@example.com>" in body
        assert "2024-01-31 to 2024-02-29" in body

    def test_approved_email_greets_requester(self, rental):
        subject, body = render(RentalEvent.APPROVED, rental.user, rental.artwork, rental)

        assert subject == "Your Artwork Rental Request Has Been Approved!"
        assert body.startswith("Hello Ada Renter,")


class TestEmailRentalNotifier:
    def test_requested_goes_to_admin(self, rental, mailoutbox):
        EmailRentalNotifier().send(RentalEvent.REQUESTED, rental.user, rental.artwork, rental, admin_email=ADMIN_EMAIL)

        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == [ADMIN_EMAIL]
        assert mailoutbox[0].from_email == "gallery@example.com"

    def test_rejected_goes_to_requester(self, rental, mailoutbox):
        EmailRentalNotifier().send(RentalEvent.REJECTED, rental.user, rental.artwork, rental)

        assert mailoutbox[0].to == ["ada@example.com"]
        assert mailoutbox[0].subject == "Update on Your Artwork Rental Request"

    def test_send_failure_is_logged_not_raised(self, rental, mailoutbox, monkeypatch, caplog):
        def broken_send_mail(*args, **kwargs):
            raise ConnectionRefusedError("smtp down")

        monkeypatch.setattr("rentals.notifications.mailer.send_mail", broken_send_mail)

        with caplog.at_level(logging.ERROR, logger="rentals"):
            EmailRentalNotifier().send(RentalEvent.APPROVED, rental.user, rental.artwork, rental)

        assert mailoutbox == []
        assert "Failed to send rental_approved email" in caplog.text


class TestOnCommitNotifier:
    def test_waits_for_commit(self, rental, mailoutbox, django_capture_on_commit_callbacks):
        notifier = OnCommitNotifier(EmailRentalNotifier())

        with django_capture_on_commit_callbacks() as callbacks:
            notifier.notify(RentalEvent.APPROVED, rental)
            assert mailoutbox == []

        assert len(callbacks) == 1
        callbacks[0]()
        assert mailoutbox[0].to == ["ada@example.com"]

    def test_skips_requested_without_admin_address(self, rental, mailoutbox, settings, caplog):
        settings.RENTAL_ADMIN_EMAIL = ""
        notifier = OnCommitNotifier(EmailRentalNotifier())

        with caplog.at_level(logging.WARNING, logger="rentals"):
            notifier._deliver(RentalEvent.REQUESTED, rental)

        assert mailoutbox == []
        assert "RENTAL_ADMIN_EMAIL is not set" in caplog.text


class TestRentalEmailsThroughApi:
    def test_request_emails_admin_after_commit(
        self, client_for, user, artwork, mailoutbox, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            response = request_rental(client_for(user), artwork)

        assert response.status_code == 201
        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == [ADMIN_EMAIL]
        assert "Water Lilies" in mailoutbox[0].subject

    def test_conflict_sends_nothing(
        self, client_for, user, artwork, make_rental, mailoutbox, django_capture_on_commit_callbacks
    ):
        make_rental(artwork, user)

        with django_capture_on_commit_callbacks(execute=True):
            response = request_rental(client_for(user), artwork)

        assert response.status_code == 409
        assert mailoutbox == []

    def test_approve_emails_requester(
        self, client_for, admin_user, user, artwork, make_rental, mailoutbox, django_capture_on_commit_callbacks
    ):
        row = make_rental(artwork, user)

        with django_capture_on_commit_callbacks(execute=True):
            client_for(admin_user).put(f"/api/rentals/{row.uuid}/approve")

        assert [message.to for message in mailoutbox] == [[user.email]]

    def test_finalize_sends_nothing(
        self, client_for, admin_user, user, artwork, make_rental, mailoutbox, django_capture_on_commit_callbacks
    ):
        row = make_rental(artwork, user, status=RentalRow.Status.APPROVED)

        with django_capture_on_commit_callbacks(execute=True):
            response = client_for(admin_user).put(f"/api/rentals/{row.uuid}/finalize")

        assert response.status_code == 200
        assert mailoutbox == []

    def test_mail_failure_does_not_fail_the_request(
        self, client_for, user, artwork, mailoutbox, monkeypatch, django_capture_on_commit_callbacks
    ):
        def broken_send_mail(*args, **kwargs):
            raise ConnectionRefusedError("smtp down")

        monkeypatch.setattr("rentals.notifications.mailer.send_mail", broken_send_mail)

        with django_capture_on_commit_callbacks(execute=True):
            response = request_rental(client_for(user), artwork)

        assert response.status_code == 201
        assert RentalRow.objects.filter(artwork=artwork).count() == 1
