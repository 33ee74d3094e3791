from __future__ import annotations

import uuid

import pytest

from app.domain.errors import UserNotFoundError, ValidationError
from app.security.passwords import verify_password


def test_create_user_stores_verifiable_hash(service, repository):
    user = service.create_user("Test User", "test@example.com", "password123")

    stored = repository.passwords[user.user_id]
    assert stored != "password123"
    assert verify_password("password123", stored)
    assert user.name == "Test User"
    assert user.email == "test@example.com"
    assert not hasattr(user, "password")


@pytest.mark.parametrize(
    ("name", "email", "password"),
    [
        ("", "e@x.com", "p"),
        ("n", "", "p"),
        ("n", "e@x.com", ""),
    ],
)
def test_create_user_requires_all_fields(service, repository, name, email, password):
    with pytest.raises(ValidationError, match="name, email, and password are required"):
        service.create_user(name, email, password)
    assert repository.writes == 0


def test_create_then_find_round_trip(service):
    created = service.create_user("Round Trip", "rt@example.com", "secret")

    found = service.find_by_id(created.user_id)

    assert found is not None
    assert found.name == "Round Trip"
    assert found.email == "rt@example.com"
    assert found.created_at


def test_find_by_id_missing_user_returns_none(service):
    assert service.find_by_id(str(uuid.uuid4())) is None


def test_find_by_id_requires_id(service):
    with pytest.raises(ValidationError, match="user ID is required"):
        service.find_by_id("")


def test_list_all_on_empty_store(service):
    assert service.list_all() == []


def test_list_all_orders_by_name(service):
    service.create_user("Zed", "z@example.com", "pw")
    service.create_user("Amy", "a@example.com", "pw")

    assert [user.name for user in service.list_all()] == ["Amy", "Zed"]


def test_update_without_fields_is_rejected(service, repository):
    user = service.create_user("Name", "n@example.com", "pw")
    writes = repository.writes

    with pytest.raises(ValidationError, match="no update data provided"):
        service.update_user(user.user_id)
    assert repository.writes == writes


def test_update_rejects_empty_password(service, repository):
    user = service.create_user("Name", "n@example.com", "pw")
    writes = repository.writes

    with pytest.raises(ValidationError, match="password cannot be updated to empty string"):
        service.update_user(user.user_id, password="")
    assert repository.writes == writes


def test_update_requires_id(service):
    with pytest.raises(ValidationError, match="user ID is required for update"):
        service.update_user("", name="x")


def test_update_merges_provided_fields(service):
    user = service.create_user("Old Name", "old@example.com", "pw")

    updated = service.update_user(user.user_id, name="New Name")

    assert updated.name == "New Name"
    assert updated.email == "old@example.com"


def test_update_with_empty_email_keeps_stored_value(service):
    user = service.create_user("Name", "keep@example.com", "pw")

    updated = service.update_user(user.user_id, email="")

    assert updated.email == "keep@example.com"


def test_update_password_rehashes(service, repository):
    user = service.create_user("Name", "n@example.com", "first")
    original_hash = repository.passwords[user.user_id]

    service.update_user(user.user_id, password="second")

    new_hash = repository.passwords[user.user_id]
    assert new_hash != original_hash
    assert verify_password("second", new_hash)


def test_update_missing_user_raises_not_found(service):
    with pytest.raises(UserNotFoundError):
        service.update_user(str(uuid.uuid4()), name="ghost")


def test_remove_user_missing_raises_not_found(service):
    with pytest.raises(UserNotFoundError):
        service.remove_user(str(uuid.uuid4()))


def test_remove_user_then_find_returns_none(service):
    user = service.create_user("Gone", "gone@example.com", "pw")

    service.remove_user(user.user_id)

    assert service.find_by_id(user.user_id) is None


def test_remove_user_requires_id(service):
    with pytest.raises(ValidationError, match="user ID is required"):
        service.remove_user("")


def test_create_user_rejects_password_over_72_bytes(service, repository):
    with pytest.raises(ValidationError, match="password cannot be longer than 72 bytes"):
        service.create_user("n", "e@x.com", "a" * 80)
    assert repository.writes == 0


def test_create_user_accepts_72_byte_password(service, repository):
    user = service.create_user("n", "e@x.com", "a" * 72)

    assert verify_password("a" * 72, repository.passwords[user.user_id])


def test_password_length_counts_utf8_bytes(service, repository):
    # 25 characters, 75 bytes
    with pytest.raises(ValidationError, match="72 bytes"):
        service.create_user("n", "e@x.com", "é" * 25 + "a" * 25)
    assert repository.writes == 0


def test_update_rejects_password_over_72_bytes(service, repository):
    user = service.create_user("Name", "n@example.com", "pw")
    writes = repository.writes

    with pytest.raises(ValidationError, match="password cannot be longer than 72 bytes"):
        service.update_user(user.user_id, password="a" * 80)
    assert repository.writes == writes
