"""Domain-level request contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .user import User


@dataclass(slots=True)
class CreateUserInput:
    """Profile fields of a user about to be inserted; the password travels separately as a hash."""

    name: str
    email: str


@dataclass(slots=True)
class UserUpdate:
    """Partial user record; ``None`` means the field was not provided."""

    name: str | None = None
    email: str | None = None


class UserRepositoryPort(Protocol):
    """Persistence operations the user service depends on."""

    def create(self, user: CreateUserInput, hashed_password: str) -> User:
        """Insert a new user and return it with storage-assigned timestamps."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Return the user or ``None`` when no row matches."""
        ...

    def list(self) -> list[User]:
        """Return every user ordered by name."""
        ...

    def update(self, user_id: str, changes: UserUpdate, hashed_password: str | None = None) -> User:
        """Merge the non-empty fields of ``changes`` into the stored row."""
        ...

    def delete(self, user_id: str) -> None:
        """Hard-delete the user row."""
        ...
