"""Contact request model."""

import uuid
from datetime import datetime, timezone
from contactdesk.extensions import db


def _new_id():
    return str(uuid.uuid4())


def _utcnow():
    return datetime.now(timezone.utc)


class Contact(db.Model):
    """A single contact form submission."""
    __tablename__ = 'contacts'

    STATUS_PENDING = 'pending'
    STATUS_COMPLETED = 'completed'
    STATUSES = (STATUS_PENDING, STATUS_COMPLETED)

    REQUIRED_FIELDS = ('name', 'email', 'phone', 'subject', 'message')

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text, nullable=False)
    subject = db.Column(db.Text, nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)  # pending, completed
    created_at = db.Column(db.DateTime, default=_utcnow)

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('pending', 'completed')", name='ck_contacts_status'
        ),
    )

    @property
    def is_completed(self):
        return self.status == self.STATUS_COMPLETED

    def __repr__(self):
        return f'<Contact {self.id} {self.status}>'
