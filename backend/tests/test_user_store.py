"""
Tests for the users table data-mapping layer.
"""

import pytest
from sqlmodel import Session

from user_service.database import create_db_and_tables
from user_service.store.user_store import DuplicateEmailError, UserStore


@pytest.fixture
def store(engine):
    create_db_and_tables(engine)
    with Session(engine) as session:
        yield UserStore(session)


def ann():
    return {"name": "Ann", "email": "ann@x.com", "password": "secret1"}


def test_create_assigns_id(store):
    user = store.create(ann())
    assert user.id == 1
    assert store.find_by_pk(1).email == "ann@x.com"


def test_duplicate_email_raises_and_session_recovers(store):
    store.create(ann())

    with pytest.raises(DuplicateEmailError):
        store.create({**ann(), "name": "Other"})

    assert len(store.find_all()) == 1


def test_update_returns_row_count(store):
    user = store.create(ann())

    count = store.update(user.id, {"name": "Annie"})

    assert count == 1
    assert isinstance(count, int)
    assert store.find_by_pk(user.id).name == "Annie"


def test_update_missing_row_returns_zero(store):
    assert store.update(42, {"name": "Annie"}) == 0


def test_update_without_values_touches_nothing(store):
    user = store.create(ann())
    assert store.update(user.id, {}) == 0
    assert store.find_by_pk(user.id).name == "Ann"


def test_update_to_taken_email_raises(store):
    store.create(ann())
    bob = store.create({"name": "Bob", "email": "bob@x.com", "password": "secret1"})

    with pytest.raises(DuplicateEmailError):
        store.update(bob.id, {"email": "ann@x.com"})

    assert store.find_by_pk(bob.id).email == "bob@x.com"


def test_destroy_returns_row_count(store):
    user = store.create(ann())

    assert store.destroy(user.id) == 1
    assert store.destroy(user.id) == 0
    assert store.find_by_pk(user.id) is None
