"""Parameterized statements for the ``users`` table, one method per statement."""

from __future__ import annotations

import uuid
from typing import Any

from psycopg import Cursor

USER_COLUMNS = "id, name, email, password, created_at, updated_at"

CREATE_USER = """
    INSERT INTO users (id, name, email, password)
    VALUES (%s, %s, %s, %s)
"""

GET_USER_BY_ID = f"""
    SELECT {USER_COLUMNS}
    FROM users
    WHERE id = %s
    LIMIT 1
"""

LIST_USERS = f"""
    SELECT {USER_COLUMNS}
    FROM users
    ORDER BY name
"""

UPDATE_USER = """
    UPDATE users
    SET name = %s, email = %s, password = %s, updated_at = NOW()
    WHERE id = %s
"""

DELETE_USER = """
    DELETE FROM users
    WHERE id = %s
"""

# (id, name, email, password, created_at, updated_at)
UserRow = tuple[Any, ...]


class UserQueries:
    """Thin statement wrapper; callers own the connection and transaction."""

    def __init__(self, cursor: Cursor) -> None:
        self._cur = cursor

    def create_user(self, user_id: uuid.UUID, name: str, email: str, password: str) -> int:
        self._cur.execute(CREATE_USER, (user_id, name, email, password))
        return self._cur.rowcount

    def get_user_by_id(self, user_id: uuid.UUID) -> UserRow | None:
        self._cur.execute(GET_USER_BY_ID, (user_id,))
        return self._cur.fetchone()

    def list_users(self) -> list[UserRow]:
        self._cur.execute(LIST_USERS)
        return self._cur.fetchall()

    def update_user(self, user_id: uuid.UUID, name: str, email: str, password: str) -> int:
        self._cur.execute(UPDATE_USER, (name, email, password, user_id))
        return self._cur.rowcount

    def delete_user(self, user_id: uuid.UUID) -> int:
        self._cur.execute(DELETE_USER, (user_id,))
        return self._cur.rowcount
