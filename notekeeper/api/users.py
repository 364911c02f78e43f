"""User management API endpoints (administrators only).

Non-administrators are sent back to the note index; a missing user sends an
administrator back to the user index. Both checks run as dependencies, ahead
of request body validation.
"""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status

from notekeeper.api import flash
from notekeeper.api.dependencies import get_current_user, get_user_service
from notekeeper.models.enums import Action
from notekeeper.models.user import User
from notekeeper.schemas.pagination import FormResponse, IndexResponse
from notekeeper.schemas.user import UserCreate, UserDetail, UserUpdate
from notekeeper.services.access import can_list, is_granted
from notekeeper.services.users import EmailAlreadyRegisteredError, UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"])

INDEX = "/user"
FALLBACK = "/note"


def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Send a non-administrator away from user management."""
    if not can_list(current_user):
        logger.warning(f"User {current_user.id} denied access to user management")
        raise flash.redirect_error(FALLBACK)
    return current_user


def managed_user(action: Action) -> Callable[..., User]:
    """Dependency loading the user an administrator acts on."""

    def load(
        user_id: Annotated[int, Path(ge=1)],
        current_user: Annotated[User, Depends(require_admin)],
        service: Annotated[UserService, Depends(get_user_service)],
    ) -> User:
        user = service.find_by_id(user_id)
        if user is None or not is_granted(current_user, action, user):
            raise flash.redirect_error(INDEX)
        return user

    return load


def email_taken() -> HTTPException:
    """Duplicate email, reported the same way for create and edit."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email already registered",
    )


@router.get("", response_model=IndexResponse[UserDetail])
def get_users(
    request: Request,
    response: Response,
    current_user: Annotated[User, Depends(require_admin)],
    service: Annotated[UserService, Depends(get_user_service)],
    page: Annotated[int, Query(ge=1)] = 1,
):
    """Get one page of users, newest first."""
    pagination = service.list_paginated(page)
    return IndexResponse[UserDetail](
        pagination=pagination.as_schema(UserDetail),
        flashes=flash.pop_flashes(request, response),
    )


@router.get("/create", response_model=FormResponse)
def create_user_form(
    current_user: Annotated[User, Depends(require_admin)],
):
    """Describe the registration form."""
    return FormResponse(
        method="POST",
        action=f"{INDEX}/create",
        data={"email": None, "password": None},
    )


@router.post("/create")
def create_user(
    request: Request,
    user_data: UserCreate,
    current_user: Annotated[User, Depends(require_admin)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user with the default role."""
    try:
        service.register(User(email=user_data.email), user_data.password)
    except EmailAlreadyRegisteredError as e:
        raise email_taken() from e
    return flash.redirect(INDEX, request, "success", flash.CREATED)


@router.get("/{user_id}", response_model=UserDetail)
def get_user(user: Annotated[User, Depends(managed_user(Action.VIEW))]):
    """Get a single user."""
    return user


@router.get("/{user_id}/edit", response_model=FormResponse)
def update_user_form(user: Annotated[User, Depends(managed_user(Action.EDIT))]):
    """Describe the edit form, prefilled with the user."""
    return FormResponse(
        method="PUT",
        action=f"{INDEX}/{user.id}/edit",
        data={"email": user.email, "roles": user.roles, "password": None},
    )


@router.put("/{user_id}/edit")
def update_user(
    request: Request,
    user: Annotated[User, Depends(managed_user(Action.EDIT))],
    user_data: UserUpdate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Change a user's email, roles or password."""
    if user_data.email is not None:
        user.email = user_data.email
    if user_data.roles is not None:
        user.roles = user_data.roles

    try:
        service.save(user)
    except EmailAlreadyRegisteredError as e:
        raise email_taken() from e

    if user_data.password is not None:
        service.change_password(user, user_data.password)

    return flash.redirect(INDEX, request, "success", flash.EDITED)


@router.get("/{user_id}/delete", response_model=FormResponse)
def delete_user_form(user: Annotated[User, Depends(managed_user(Action.DELETE))]):
    """Describe the delete confirmation."""
    return FormResponse(
        method="DELETE",
        action=f"{INDEX}/{user.id}/delete",
        data={"email": user.email},
    )


@router.delete("/{user_id}/delete")
def delete_user(
    request: Request,
    user: Annotated[User, Depends(managed_user(Action.DELETE))],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Delete a user together with all of their notes and tasks."""
    service.delete_with_dependents(user)
    return flash.redirect(INDEX, request, "success", flash.DELETED)
