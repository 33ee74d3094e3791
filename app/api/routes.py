"""HTTP route definitions for the user service."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from ..domain.errors import DomainError
from ..domain.service import UserService
from ..domain.user import User
from .errors import http_error_from_domain_error

router = APIRouter(prefix="/v1", tags=["users"])


class UserResponse(BaseModel):
    """Serialised representation of a `User`; the password hash is never included."""

    user_id: str
    name: str
    email: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        """Build a response model from the domain aggregate."""
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            created_at=user.created_at.isoformat(),
            updated_at=user.updated_at.isoformat(),
        )


class CreateUserRequest(BaseModel):
    """Payload accepted when creating a user; emptiness is checked by the service."""

    name: str
    email: str
    password: str


class UpdateUserRequest(BaseModel):
    """Partial update payload; omitted or null fields are left unchanged."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


def get_service(request: Request) -> UserService:
    """Resolve the `UserService` stored on the FastAPI application state."""
    service: UserService = request.app.state.user_service
    return service


def _parse_user_id(user_id: str) -> str:
    """Reject identifiers that are not UUIDs before they reach the service."""
    try:
        return str(uuid.UUID(user_id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid user id") from exc


@router.get("/users", response_model=list[UserResponse])
def list_users(service: UserService = Depends(get_service)) -> list[UserResponse]:
    """Return every user ordered by name."""
    try:
        users = service.list_all()
    except DomainError as exc:
        raise http_error_from_domain_error(exc) from exc
    return [UserResponse.from_domain(user) for user in users]


@router.post("/user", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: CreateUserRequest,
    service: UserService = Depends(get_service),
) -> UserResponse:
    """Create a user account."""
    try:
        user = service.create_user(payload.name, payload.email, payload.password)
    except DomainError as exc:
        raise http_error_from_domain_error(exc) from exc
    return UserResponse.from_domain(user)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str, service: UserService = Depends(get_service)) -> UserResponse:
    user_id = _parse_user_id(user_id)
    try:
        user = service.find_by_id(user_id)
    except DomainError as exc:
        raise http_error_from_domain_error(exc) from exc
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")
    return UserResponse.from_domain(user)


@router.patch("/users/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    payload: UpdateUserRequest,
    service: UserService = Depends(get_service),
) -> UserResponse:
    """Apply a partial update to the user."""
    user_id = _parse_user_id(user_id)
    try:
        user = service.update_user(
            user_id,
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
    except DomainError as exc:
        raise http_error_from_domain_error(exc) from exc
    return UserResponse.from_domain(user)


@router.delete("/users/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_service)) -> dict[str, str]:
    """Hard-delete the user and answer with an empty object."""
    user_id = _parse_user_id(user_id)
    try:
        service.remove_user(user_id)
    except DomainError as exc:
        raise http_error_from_domain_error(exc) from exc
    return {}
