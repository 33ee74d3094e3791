"""Database repository for user accounts."""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from typing import Iterator

import psycopg
from psycopg.rows import tuple_row
from psycopg_pool import ConnectionPool

from .db.queries import UserQueries, UserRow
from .domain.contracts import CreateUserInput, UserUpdate
from .domain.errors import InvalidIdentifierError, StorageError, UserNotFoundError
from .domain.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Postgres-backed user persistence."""

    def __init__(self, pool: ConnectionPool) -> None:
        """Store the connection pool used for all database interactions."""
        self._pool = pool

    @contextmanager
    def _queries(self) -> Iterator[UserQueries]:
        """Borrow a pooled connection for one unit of work.

        The pool commits on a clean exit and rolls back otherwise. Driver
        failures surface as ``StorageError``.
        """
        try:
            with self._pool.connection() as conn:
                with conn.cursor(row_factory=tuple_row) as cur:
                    yield UserQueries(cur)
        except psycopg.Error as exc:
            raise StorageError(str(exc)) from exc

    def _parse_id(self, user_id: str) -> uuid.UUID:
        try:
            return uuid.UUID(str(user_id))
        except ValueError as exc:
            raise InvalidIdentifierError(user_id) from exc

    def create(self, user: CreateUserInput, hashed_password: str) -> User:
        """Insert a user under a fresh UUID and return the stored row."""
        user_id = uuid.uuid4()
        with self._queries() as queries:
            queries.create_user(user_id, user.name, user.email, hashed_password)
            row = queries.get_user_by_id(user_id)
        if row is None:
            raise StorageError(f"inserted user {user_id} could not be read back")
        logger.debug("inserted user row id=%s", user_id)
        return self._map_record(row)

    def get_by_id(self, user_id: str) -> User | None:
        """Fetch a user by identifier or return ``None``."""
        parsed = self._parse_id(user_id)
        with self._queries() as queries:
            row = queries.get_user_by_id(parsed)
        if not row:
            return None
        return self._map_record(row)

    def list(self) -> list[User]:
        """Return all users ordered by name."""
        with self._queries() as queries:
            rows = queries.list_users()
        return [self._map_record(row) for row in rows]

    def update(self, user_id: str, changes: UserUpdate, hashed_password: str | None = None) -> User:
        """Overlay the non-empty fields of ``changes`` on the stored row.

        Raises
        ------
        InvalidIdentifierError
            ``user_id`` is not a UUID.
        UserNotFoundError
            No row matches ``user_id``.
        """
        parsed = self._parse_id(user_id)
        with self._queries() as queries:
            current = queries.get_user_by_id(parsed)
            if current is None:
                raise UserNotFoundError(user_id)

            # Empty strings mean "not provided"; the stored value is kept.
            name = changes.name or current[1]
            email = changes.email or current[2]
            password = hashed_password if hashed_password is not None else current[3]

            queries.update_user(parsed, name, email, password)
            row = queries.get_user_by_id(parsed)
        if row is None:
            raise UserNotFoundError(user_id)
        logger.debug("updated user row id=%s", parsed)
        return self._map_record(row)

    def delete(self, user_id: str) -> None:
        """Delete the user row, raising ``UserNotFoundError`` if none was removed."""
        parsed = self._parse_id(user_id)
        with self._queries() as queries:
            deleted = queries.delete_user(parsed)
        if deleted == 0:
            raise UserNotFoundError(user_id)
        logger.debug("deleted user row id=%s", parsed)

    def _map_record(self, row: UserRow) -> User:
        """Convert a raw database tuple into the domain ``User``; the hash stays behind."""
        return User(
            user_id=str(row[0]),
            name=row[1] or "",
            email=row[2] or "",
            created_at=row[4],
            updated_at=row[5],
        )
