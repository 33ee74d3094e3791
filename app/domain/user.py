from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class User:
    """Aggregate root for a user account; the password hash is kept out of it."""

    user_id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
