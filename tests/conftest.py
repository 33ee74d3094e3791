from __future__ import annotations

import os

# Settings are read at import time; keep bcrypt cheap for the test run.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import uuid
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from app.domain.contracts import CreateUserInput, UserUpdate
from app.domain.errors import InvalidIdentifierError, UserNotFoundError
from app.domain.service import UserService
from app.domain.user import User


class FakeUserRepository:
    """In-memory repository mimicking the Postgres-backed behaviours."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self.passwords: dict[str, str] = {}
        self.writes = 0

    def create(self, user: CreateUserInput, hashed_password: str) -> User:
        self.writes += 1
        now = datetime.now(timezone.utc)
        user_id = str(uuid.uuid4())
        self._users[user_id] = User(
            user_id=user_id,
            name=user.name,
            email=user.email,
            created_at=now,
            updated_at=now,
        )
        self.passwords[user_id] = hashed_password
        return replace(self._users[user_id])

    def get_by_id(self, user_id: str) -> User | None:
        self._check_id(user_id)
        user = self._users.get(user_id)
        return replace(user) if user else None

    def list(self) -> list[User]:
        return [replace(user) for user in sorted(self._users.values(), key=lambda u: u.name)]

    def update(self, user_id: str, changes: UserUpdate, hashed_password: str | None = None) -> User:
        self._check_id(user_id)
        current = self._users.get(user_id)
        if current is None:
            raise UserNotFoundError(user_id)
        self.writes += 1
        if changes.name:
            current.name = changes.name
        if changes.email:
            current.email = changes.email
        if hashed_password is not None:
            self.passwords[user_id] = hashed_password
        current.updated_at = datetime.now(timezone.utc)
        return replace(current)

    def delete(self, user_id: str) -> None:
        self._check_id(user_id)
        if user_id not in self._users:
            raise UserNotFoundError(user_id)
        self.writes += 1
        del self._users[user_id]
        self.passwords.pop(user_id, None)

    def _check_id(self, user_id: str) -> None:
        try:
            uuid.UUID(user_id)
        except ValueError as exc:
            raise InvalidIdentifierError(user_id) from exc


@pytest.fixture
def repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def service(repository: FakeUserRepository) -> UserService:
    return UserService(repository)
