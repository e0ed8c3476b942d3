"""Main public routes."""

from flask import Blueprint, render_template, redirect, url_for, request

from contactdesk.errors import ValidationError
from contactdesk.forms import ContactForm
from contactdesk.services import get_store, get_notifier
from contactdesk.utils.decorators import contact_errors_handled

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Homepage."""
    return render_template('main/index.html')


@main_bp.route('/contact', methods=['GET'])
def contact():
    """Contact us page."""
    return render_template('main/contact.html',
                           form=ContactForm(),
                           success=request.args.get('success'))


@main_bp.route('/contact', methods=['POST'])
@contact_errors_handled
def submit_contact():
    """Store a contact request and notify the admin and the submitter."""
    form = ContactForm()
    if not form.validate_on_submit():
        raise ValidationError(sorted(form.errors))

    created = get_store().create(form.contact_fields())

    # Delivery runs in the background; the threads are never joined.
    notifier = get_notifier()
    notifier.notify_admin(created)
    notifier.acknowledge_submitter(created)

    return redirect(url_for('main.contact', success='true'))


@main_bp.route('/services')
def services():
    """Services page."""
    return render_template('main/services.html')


@main_bp.route('/about')
def about():
    """About us page."""
    return render_template('main/about.html')
