"""Category API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status

from notekeeper.api import flash
from notekeeper.api.dependencies import get_category_service, get_current_user
from notekeeper.models.category import Category
from notekeeper.models.user import User
from notekeeper.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from notekeeper.schemas.pagination import FormResponse, IndexResponse
from notekeeper.services.category import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/category", tags=["categories"])

INDEX = "/category"


@router.get("", response_model=IndexResponse[CategoryResponse])
def get_categories(
    request: Request,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CategoryService, Depends(get_category_service)],
    page: Annotated[int, Query(ge=1)] = 1,
):
    """Get one page of categories."""
    pagination = service.list_paginated(page)
    return IndexResponse[CategoryResponse](
        pagination=pagination.as_schema(CategoryResponse),
        flashes=flash.pop_flashes(request, response),
    )


@router.get("/create", response_model=FormResponse)
def create_category_form(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Describe the create form."""
    return FormResponse(method="POST", action=f"{INDEX}/create", data={"title": None})


@router.post("/create")
def create_category(
    request: Request,
    category_data: CategoryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Create a new category."""
    service.save(Category(title=category_data.title))
    return flash.redirect(INDEX, request, "success", flash.CREATED)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: Annotated[int, Path(ge=1)],
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get a single category."""
    category = service.find_by_id(category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


def existing_category(
    category_id: Annotated[int, Path(ge=1)],
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> Category:
    """Load a category for edit or delete, redirecting to the index if it is gone."""
    category = service.find_by_id(category_id)
    if not category:
        raise flash.redirect_error(INDEX)
    return category


@router.get("/{category_id}/edit", response_model=FormResponse)
def update_category_form(
    category: Annotated[Category, Depends(existing_category)],
):
    """Describe the edit form, prefilled with the category."""
    return FormResponse(
        method="PUT",
        action=f"{INDEX}/{category.id}/edit",
        data={"title": category.title},
    )


@router.put("/{category_id}/edit")
def update_category(
    request: Request,
    category: Annotated[Category, Depends(existing_category)],
    category_data: CategoryUpdate,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Update a category."""
    category.title = category_data.title
    service.save(category)
    return flash.redirect(INDEX, request, "success", flash.EDITED)


def _refuse_if_in_use(
    request: Request, service: CategoryService, category: Category
) -> Response | None:
    if service.can_be_deleted(category.id):
        return None
    logger.info(f"Refused to delete category {category.id}: it still has notes or tasks")
    return flash.redirect(INDEX, request, "warning", flash.CATEGORY_IN_USE)


@router.get("/{category_id}/delete", response_model=FormResponse)
def delete_category_form(
    request: Request,
    category: Annotated[Category, Depends(existing_category)],
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Describe the delete confirmation, unless the category is in use."""
    refused = _refuse_if_in_use(request, service, category)
    if refused is not None:
        return refused

    return FormResponse(
        method="DELETE",
        action=f"{INDEX}/{category.id}/delete",
        data={"title": category.title},
    )


@router.delete("/{category_id}/delete")
def delete_category(
    request: Request,
    category: Annotated[Category, Depends(existing_category)],
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Delete a category that no note or task references."""
    # The check locks the category row; delete commits in the same transaction.
    refused = _refuse_if_in_use(request, service, category)
    if refused is not None:
        return refused

    service.delete(category)
    return flash.redirect(INDEX, request, "success", flash.DELETED)
