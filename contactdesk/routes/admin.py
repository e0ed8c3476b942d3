"""Admin panel routes.

These routes carry no access control.
"""

import logging

from flask import Blueprint, render_template, redirect, url_for, request

from contactdesk.services import get_store
from contactdesk.utils.decorators import contact_errors_handled

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/contact')
@contact_errors_handled
def contacts():
    """All contact requests."""
    return render_template('admin/contacts.html', contacts=get_store().list_all())


@admin_bp.route('/contact/update', methods=['POST'])
@contact_errors_handled
def update_contact():
    """Mark a contact request as completed."""
    contact_id = request.form.get('id', '')
    if not get_store().mark_completed(contact_id):
        logger.warning('Update requested for unknown contact %r', contact_id)
    return redirect(url_for('admin.contacts'))


@admin_bp.route('/contact/delete', methods=['POST'])
@contact_errors_handled
def delete_contact():
    """Delete a contact request."""
    contact_id = request.form.get('id', '')
    if not get_store().delete(contact_id):
        logger.warning('Delete requested for unknown contact %r', contact_id)
    return redirect(url_for('admin.contacts'))
