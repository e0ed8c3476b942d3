import pytest

from contactdesk import create_app
from contactdesk.extensions import db, mail


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions['contact_store']


@pytest.fixture
def notifier(app):
    return app.extensions['notifier']


@pytest.fixture
def sent_notifications(notifier, monkeypatch):
    """Records Notifier.send calls instead of starting delivery threads."""
    calls = []

    def _record(to, subject, html_body):
        calls.append({'to': to, 'subject': subject, 'html': html_body})

    monkeypatch.setattr(notifier, 'send', _record)
    return calls


@pytest.fixture
def outbox(app):
    with mail.record_messages() as messages:
        yield messages


@pytest.fixture
def valid_fields():
    return {
        'name': 'A',
        'email': 'a@x.com',
        'phone': '123',
        'subject': 'S',
        'message': 'M',
    }
