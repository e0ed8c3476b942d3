"""Persistence for contact requests."""

import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from contactdesk.errors import StorageError, ValidationError
from contactdesk.models import Contact

logger = logging.getLogger(__name__)


class ContactStore:
    """Create, list, complete and delete Contact records.

    Every database failure rolls back the session and surfaces as
    StorageError. A store built with ``enabled=False`` (no database
    configured) raises StorageError from every operation.
    """

    def __init__(self, db, enabled=True):
        self.db = db
        self.enabled = enabled

    def _ensure_enabled(self):
        if not self.enabled:
            raise StorageError('Storage is disabled: DB_URI is not configured')

    def _fail(self, exc):
        self.db.session.rollback()
        raise StorageError(str(exc)) from exc

    def create(self, fields):
        """Validate and persist a submission; returns the new Contact."""
        missing = [
            name for name in Contact.REQUIRED_FIELDS
            if fields.get(name) in (None, '')
        ]
        if missing:
            raise ValidationError(missing)

        self._ensure_enabled()
        contact = Contact(**{name: fields[name] for name in Contact.REQUIRED_FIELDS})
        try:
            self.db.session.add(contact)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self._fail(exc)

        logger.info('Contact %s created', contact.id)
        return contact

    def list_all(self):
        """All contacts, newest first."""
        self._ensure_enabled()
        try:
            return Contact.query.order_by(Contact.created_at.desc()).all()
        except SQLAlchemyError as exc:
            self._fail(exc)

    def mark_completed(self, contact_id):
        """Set status to completed. Unknown ids are a no-op; returns True on a match."""
        self._ensure_enabled()
        try:
            matched = Contact.query.filter_by(id=contact_id).update(
                {'status': Contact.STATUS_COMPLETED}
            )
            self.db.session.commit()
            return matched > 0
        except SQLAlchemyError as exc:
            self._fail(exc)

    def delete(self, contact_id):
        """Remove a contact. Unknown ids are a no-op; returns True if one was removed."""
        self._ensure_enabled()
        try:
            deleted = Contact.query.filter_by(id=contact_id).delete()
            self.db.session.commit()
            return deleted > 0
        except SQLAlchemyError as exc:
            self._fail(exc)


def get_store():
    """The ContactStore registered on the current app."""
    return current_app.extensions['contact_store']
