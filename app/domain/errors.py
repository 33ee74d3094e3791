"""Domain-level exceptions.

The service and repository raise these; route handlers map them to HTTP
status codes.
"""


class DomainError(Exception):
    """Base class for all user-service errors."""


class ValidationError(DomainError):
    """Input is missing or violates a validation rule."""


class InvalidIdentifierError(ValidationError):
    """A user identifier is not a well-formed UUID."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"invalid user id: {user_id!r}")


class UserNotFoundError(DomainError):
    """No user row matches the requested identifier."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("user not found")


class StorageError(DomainError):
    """The database rejected a statement or could not be reached."""
