import pytest

from contactdesk.errors import StorageError, ValidationError
from contactdesk.extensions import db
from contactdesk.models import Contact
from contactdesk.services import ContactStore


def test_create_then_list_includes_pending_record(store, valid_fields):
    created = store.create(valid_fields)

    contacts = store.list_all()
    assert [c.id for c in contacts] == [created.id]
    stored = contacts[0]
    assert stored.status == 'pending'
    for name, value in valid_fields.items():
        assert getattr(stored, name) == value


def test_create_generates_distinct_ids(store, valid_fields):
    first = store.create(valid_fields)
    second = store.create(valid_fields)

    assert first.id and second.id
    assert first.id != second.id


def test_create_ignores_unknown_keys(store, valid_fields):
    created = store.create(dict(valid_fields, status='completed', id='chosen'))

    assert created.status == 'pending'
    assert created.id != 'chosen'


@pytest.mark.parametrize('field', Contact.REQUIRED_FIELDS)
def test_create_rejects_missing_field(store, valid_fields, field):
    fields = dict(valid_fields)
    del fields[field]

    with pytest.raises(ValidationError) as excinfo:
        store.create(fields)

    assert excinfo.value.missing == [field]
    assert store.list_all() == []


def test_create_rejects_empty_values(store, valid_fields):
    fields = dict(valid_fields, message='', subject=None)

    with pytest.raises(ValidationError) as excinfo:
        store.create(fields)

    assert excinfo.value.missing == ['subject', 'message']
    assert store.list_all() == []


def test_create_accepts_whitespace_values(store, valid_fields):
    created = store.create(dict(valid_fields, subject='   '))

    assert created.subject == '   '
    assert [c.id for c in store.list_all()] == [created.id]


def test_create_keeps_long_values(store, valid_fields):
    long_fields = {name: name[0] * 5000 for name in Contact.REQUIRED_FIELDS}
    created = store.create(long_fields)
    db.session.expire_all()

    stored = db.session.get(Contact, created.id)
    for name, value in long_fields.items():
        assert getattr(stored, name) == value


def test_text_columns_have_no_length_cap():
    for name in Contact.REQUIRED_FIELDS:
        assert getattr(Contact.__table__.c[name].type, 'length', None) is None


def test_list_all_empty(store):
    assert store.list_all() == []


def test_mark_completed_changes_only_status(store, valid_fields):
    created = store.create(valid_fields)
    created_at = created.created_at

    assert store.mark_completed(created.id) is True
    db.session.expire_all()

    stored = db.session.get(Contact, created.id)
    assert stored.status == 'completed'
    assert stored.created_at == created_at
    for name, value in valid_fields.items():
        assert getattr(stored, name) == value


def test_mark_completed_is_idempotent(store, valid_fields):
    created = store.create(valid_fields)

    store.mark_completed(created.id)
    store.mark_completed(created.id)
    db.session.expire_all()

    assert db.session.get(Contact, created.id).status == 'completed'


def test_mark_completed_unknown_id_is_noop(store, valid_fields):
    created = store.create(valid_fields)

    assert store.mark_completed('does-not-exist') is False
    db.session.expire_all()

    assert db.session.get(Contact, created.id).status == 'pending'


def test_delete_removes_exactly_one_record(store, valid_fields):
    keep = store.create(valid_fields)
    drop = store.create(dict(valid_fields, name='B'))

    assert store.delete(drop.id) is True

    assert [c.id for c in store.list_all()] == [keep.id]


def test_repeated_delete_is_noop(store, valid_fields):
    keep = store.create(valid_fields)
    drop = store.create(dict(valid_fields, name='B'))

    store.delete(drop.id)
    assert store.delete(drop.id) is False

    assert [c.id for c in store.list_all()] == [keep.id]


def test_delete_unknown_id_leaves_records_alone(store, valid_fields):
    created = store.create(valid_fields)

    assert store.delete('does-not-exist') is False

    assert [c.id for c in store.list_all()] == [created.id]


def test_disabled_store_raises_storage_error(app, valid_fields):
    disabled = ContactStore(db, enabled=False)

    with pytest.raises(StorageError):
        disabled.create(valid_fields)
    with pytest.raises(StorageError):
        disabled.list_all()
    with pytest.raises(StorageError):
        disabled.mark_completed('any')
    with pytest.raises(StorageError):
        disabled.delete('any')


def test_database_failure_becomes_storage_error(store, valid_fields):
    db.drop_all()

    with pytest.raises(StorageError):
        store.list_all()
    with pytest.raises(StorageError):
        store.create(valid_fields)


def test_database_failure_on_mutations_becomes_storage_error(store):
    db.drop_all()

    with pytest.raises(StorageError):
        store.mark_completed('any')
    with pytest.raises(StorageError):
        store.delete('any')
