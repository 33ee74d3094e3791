"""User service validating input and hashing passwords before persistence."""

from __future__ import annotations

import logging

from .contracts import CreateUserInput, UserRepositoryPort, UserUpdate
from .errors import ValidationError
from .user import User
from ..security.passwords import MAX_PASSWORD_BYTES, hash_password

logger = logging.getLogger(__name__)


def _check_password_length(password: str) -> None:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")


class UserService:
    """User account workflows backed by a repository."""

    def __init__(self, repository: UserRepositoryPort) -> None:
        """Store the repository used for every persistence call."""
        self._repository = repository

    def create_user(self, name: str, email: str, password: str) -> User:
        """Validate the inputs, hash the password and insert the user."""
        if not name or not email or not password:
            raise ValidationError("name, email, and password are required")
        _check_password_length(password)

        user = self._repository.create(
            CreateUserInput(name=name, email=email),
            hash_password(password),
        )
        logger.info("user created id=%s", user.user_id)
        return user

    def find_by_id(self, user_id: str) -> User | None:
        """Return the user or ``None``; absence is not an error."""
        if not user_id:
            raise ValidationError("user ID is required")
        return self._repository.get_by_id(user_id)

    def list_all(self) -> list[User]:
        return self._repository.list()

    def update_user(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        """Apply a partial update.

        Only arguments that are not ``None`` count as provided. An empty
        ``name`` or ``email`` is accepted but leaves the stored value
        unchanged, so those fields cannot be cleared. An empty ``password``
        is rejected outright.
        """
        if not user_id:
            raise ValidationError("user ID is required for update")

        changes = UserUpdate(name=name, email=email)
        hashed_password: str | None = None
        if password is not None:
            if password == "":
                raise ValidationError("password cannot be updated to empty string")
            _check_password_length(password)
            hashed_password = hash_password(password)

        if name is None and email is None and hashed_password is None:
            raise ValidationError("no update data provided")

        user = self._repository.update(user_id, changes, hashed_password)
        logger.info("user updated id=%s password_changed=%s", user_id, hashed_password is not None)
        return user

    def remove_user(self, user_id: str) -> None:
        """Hard-delete the user; raises ``UserNotFoundError`` when nothing was removed."""
        if not user_id:
            raise ValidationError("user ID is required")
        self._repository.delete(user_id)
        logger.info("user deleted id=%s", user_id)
