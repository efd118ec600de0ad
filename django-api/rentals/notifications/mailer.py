"""Email delivery of rental events.

Mail is sent only after the surrounding transaction commits, and a failed
send never undoes or fails the rental operation that triggered it.
"""

import logging
from functools import partial

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

from accounts.domain import UserSummary
from rentals.domain import ArtworkSummary, Rental
from rentals.notifications.interfaces import RentalEvent, RentalNotifier

logger = logging.getLogger(__name__)

SUBJECTS = {
    RentalEvent.REQUESTED: 'New Artwork Rental Request: "{title}"',
    RentalEvent.APPROVED: "Your Artwork Rental Request Has Been Approved!",
    RentalEvent.REJECTED: "Update on Your Artwork Rental Request",
}

BODIES = {
    RentalEvent.REQUESTED: (
        "A new rental request needs review.\n"
        "\n"
        "Artwork: {title}\n"
        "Requested by: {name} <{email}>\n"
        "Delivery address: {address}\n"
        "Phone: {phone}\n"
        "Rental period: {start} to {end}\n"
        "Rental ID: {rental_id}\n"
    ),
    RentalEvent.APPROVED: (
        "Hello {name},\n"
        "\n"
        'Your request to rent "{title}" has been approved.\n'
        "\n"
        "Rental period: {start} to {end}\n"
        "Delivery address: {address}\n"
        "\n"
        "We will contact you at {phone} to arrange delivery.\n"
    ),
    RentalEvent.REJECTED: (
        "Hello {name},\n"
        "\n"
        'Unfortunately your request to rent "{title}" could not be accommodated.\n'
        "\n"
        "You are welcome to browse the gallery and request another artwork.\n"
    ),
}


def render(kind: RentalEvent, recipient: UserSummary, artwork: ArtworkSummary, rental: Rental) -> tuple[str, str]:
    """Return the subject and plain-text body for a rental email."""
    context = {
        "name": recipient.full_name,
        "email": recipient.email,
        "title": artwork.title,
        "address": rental.address,
        "phone": rental.phone_number,
        "start": rental.start_date.isoformat(),
        "end": rental.end_date.isoformat(),
        "rental_id": rental.uuid,
    }
    return SUBJECTS[kind].format(**context), BODIES[kind].format(**context)


class EmailRentalNotifier:
    """Sends one rental email through Django's mail backend."""

    def __init__(self, from_email: str | None = None) -> None:
        self._from_email = from_email

    def send(
        self,
        kind: RentalEvent,
        recipient: UserSummary,
        artwork: ArtworkSummary,
        rental: Rental,
        admin_email: str | None = None,
    ) -> None:
        """Send the email for ``kind``; errors are logged, never raised.

        Requested events go to ``admin_email``, the others to the recipient.
        """
        to = admin_email if kind is RentalEvent.REQUESTED else recipient.email
        try:
            subject, body = render(kind, recipient, artwork, rental)
            send_mail(subject, body, self._from_email or settings.DEFAULT_FROM_EMAIL, [to])
        except Exception:
            logger.exception("Failed to send %s email for rental %s", kind.value, rental.uuid)
            return
        logger.info("Sent %s email for rental %s to %s", kind.value, rental.uuid, to)


class OnCommitNotifier(RentalNotifier):
    """Defers delivery until the current transaction commits.

    Outside a transaction the event is delivered immediately.
    """

    def __init__(self, sender: EmailRentalNotifier, admin_email: str | None = None) -> None:
        self._sender = sender
        self._admin_email = admin_email

    def notify(self, event: RentalEvent, rental: Rental) -> None:
        transaction.on_commit(partial(self._deliver, event, rental))

    def _deliver(self, event: RentalEvent, rental: Rental) -> None:
        if rental.user is None or rental.artwork is None:
            logger.warning("Rental %s has no user or artwork loaded, skipping %s", rental.uuid, event.value)
            return
        if event is not RentalEvent.REQUESTED:
            self._sender.send(event, rental.user, rental.artwork, rental)
            return
        admin_email = self._admin_email or settings.RENTAL_ADMIN_EMAIL
        if not admin_email:
            logger.warning("RENTAL_ADMIN_EMAIL is not set, skipping %s for rental %s", event.value, rental.uuid)
            return
        self._sender.send(event, rental.user, rental.artwork, rental, admin_email=admin_email)
