"""SampleUserService — seeded data, isolation between instances, CRUD semantics."""

import pytest

from users_service.core.errors import ResourceNotFoundError, ValidationError
from users_service.core.user import User
from users_service.infrastructure.sample_users import SampleUserService, sample_users


def test_fresh_service_lists_the_two_sample_users():
    users = SampleUserService().list_users()
    assert [u.id for u in users] == [1, 2]
    assert users[0] == User(id=1, name="John Doe", email="john@example.com")
    assert users[1] == User(id=2, name="Jane Smith", email="jane@example.com")


def test_sample_users_returns_new_objects():
    first, second = sample_users(), sample_users()
    first[0].name = "Changed"
    assert second[0].name == "John Doe"


def test_instances_do_not_share_state():
    a = SampleUserService()
    a.create_user(User(id=3, name="Ann", email="a@x.com"))
    a.delete_user(1)
    assert [u.id for u in SampleUserService().list_users()] == [1, 2]


def test_get_user_missing_raises_not_found():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        SampleUserService().get_user(99)
    assert exc_info.value.context.user_id == 99


def test_create_user_then_listed_in_id_order():
    service = SampleUserService()
    service.create_user(User(id=0, name="", email=""))
    assert [u.id for u in service.list_users()] == [0, 1, 2]


def test_create_user_with_existing_id_replaces_record():
    service = SampleUserService()
    service.create_user(User(id=1, name="Ann", email="a@x.com"))
    assert service.get_user(1).name == "Ann"
    assert len(service.list_users()) == 2


def test_update_user_changes_name_and_email():
    service = SampleUserService()
    updated = service.update_user(User(id=2, name="Jane Doe", email="jd@example.com"))
    assert updated.display_name() == "Jane Doe <jd@example.com>"
    assert service.get_user(2) == updated


def test_update_user_empty_email_rejected_and_record_kept():
    service = SampleUserService()
    with pytest.raises(ValidationError):
        service.update_user(User(id=1, name="Renamed", email=""))
    assert service.get_user(1) == User(id=1, name="John Doe", email="john@example.com")


def test_update_missing_user_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        SampleUserService().update_user(User(id=5, name="X", email="x@x.com"))


def test_delete_user_removes_it():
    service = SampleUserService()
    service.delete_user(1)
    assert [u.id for u in service.list_users()] == [2]
    with pytest.raises(ResourceNotFoundError):
        service.delete_user(1)
