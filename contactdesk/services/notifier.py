"""Outbound email for contact requests."""

import logging
from threading import Thread

from flask import current_app, render_template
from flask_mail import Message

from contactdesk.errors import DeliveryError

logger = logging.getLogger(__name__)

RECEIPT_SUBJECT = 'Contact request received successfully'


class Notifier:
    """Sends HTML mail through Flask-Mail.

    ``send`` is fire-and-forget: delivery runs on a daemon thread, failures
    are logged and never reach the caller. At most one attempt is made.
    """

    def __init__(self, mail, admin_email=None):
        self.mail = mail
        self.admin_email = admin_email

    def deliver(self, to, subject, html_body):
        """Send one message now. Raises DeliveryError on failure."""
        msg = Message(subject=subject, recipients=[to], html=html_body)
        try:
            self.mail.send(msg)
        except Exception as exc:
            raise DeliveryError(f'Could not deliver "{subject}" to {to}: {exc}') from exc
        logger.info('Email "%s" delivered to %s', subject, to)

    def _deliver_in_background(self, app, to, subject, html_body):
        with app.app_context():
            try:
                self.deliver(to, subject, html_body)
            except DeliveryError:
                logger.exception('Email delivery failed')

    def send(self, to, subject, html_body):
        """Start delivery on a worker thread and return the thread."""
        app = current_app._get_current_object()
        thread = Thread(
            target=self._deliver_in_background,
            args=(app, to, subject, html_body),
            daemon=True,
        )
        thread.start()
        return thread

    def notify_admin(self, contact):
        """Announce a new contact request to the administrator."""
        if not self.admin_email:
            logger.warning('ADMIN_EMAIL is not configured; skipping admin notification for %s',
                           contact.id)
            return None
        html_body = render_template('emails/admin_notification.html', contact=contact)
        return self.send(self.admin_email, f'New contact request: {contact.subject}', html_body)

    def acknowledge_submitter(self, contact):
        """Confirm receipt to the person who filled in the form."""
        html_body = render_template('emails/submitter_receipt.html', contact=contact)
        return self.send(contact.email, RECEIPT_SUBJECT, html_body)


def get_notifier():
    """The Notifier registered on the current app."""
    return current_app.extensions['notifier']
