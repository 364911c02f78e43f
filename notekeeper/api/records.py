"""Router factory for user-owned records (notes and tasks).

Both record kinds expose the same routes and the same rule: only the author
may view, edit or delete a record. Absent and foreign records redirect to the
index so the response never reveals whether the id exists. The check runs as
a dependency, so a denied request is redirected even when its body is invalid.
"""

import logging
from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from notekeeper.api import flash
from notekeeper.api.dependencies import get_category_service, get_current_user
from notekeeper.models.enums import Action
from notekeeper.models.user import User
from notekeeper.schemas.pagination import FormResponse, IndexResponse
from notekeeper.services.access import is_granted
from notekeeper.services.category import CategoryService
from notekeeper.services.records import RecordService

logger = logging.getLogger(__name__)


def check_category(categories: CategoryService, category_id: int | None) -> None:
    """Reject a payload that files a record under a missing category."""
    if category_id is not None and not categories.exists(category_id):
        raise RequestValidationError(
            [
                {
                    "loc": ["body", "category_id"],
                    "msg": "Category not found",
                    "type": "value_error",
                }
            ]
        )


def build_record_router(
    *,
    prefix: str,
    tag: str,
    model: type[Any],
    get_service: Callable[..., RecordService],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
) -> APIRouter:
    """Build index/show/create/edit/delete routes for one record kind."""
    router = APIRouter(prefix=prefix, tags=[tag])
    name = model.__name__.lower()
    form_fields = list(create_schema.model_fields)

    def authorized(action: Action) -> Callable[..., Any]:
        def load(
            record_id: Annotated[int, Path(ge=1)],
            current_user: Annotated[User, Depends(get_current_user)],
            service: Annotated[RecordService, Depends(get_service)],
        ) -> Any:
            record = service.find_by_id(record_id)
            if record is None:
                raise flash.redirect_error(prefix)
            if not is_granted(current_user, action, record):
                logger.warning(f"User {current_user.id} denied {action.value} on {name} {record_id}")
                raise flash.redirect_error(prefix)
            return record

        return load

    viewable = authorized(Action.VIEW)
    editable = authorized(Action.EDIT)
    deletable = authorized(Action.DELETE)

    def form_data(record: Any) -> dict[str, Any]:
        return {field: getattr(record, field) for field in form_fields}

    @router.get("", response_model=IndexResponse[response_schema])
    def index(
        request: Request,
        response: Response,
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[RecordService, Depends(get_service)],
        page: Annotated[int, Query(ge=1)] = 1,
    ):
        """List the current user's records, most recently updated first."""
        pagination = service.list_paginated(page, current_user)
        return IndexResponse[response_schema](
            pagination=pagination.as_schema(response_schema),
            flashes=flash.pop_flashes(request, response),
        )

    @router.get("/create", response_model=FormResponse)
    def create_form(
        current_user: Annotated[User, Depends(get_current_user)],
    ):
        """Describe the create form."""
        return FormResponse(
            method="POST",
            action=f"{prefix}/create",
            data=dict.fromkeys(form_fields),
        )

    @router.post("/create")
    def create(
        request: Request,
        payload: create_schema,  # type: ignore[valid-type]
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[RecordService, Depends(get_service)],
        categories: Annotated[CategoryService, Depends(get_category_service)],
    ):
        """Create a record owned by the current user."""
        check_category(categories, payload.category_id)
        record = model(**payload.model_dump(), author_id=current_user.id)
        service.save(record)
        return flash.redirect(prefix, request, "success", flash.CREATED)

    @router.get("/{record_id}", response_model=response_schema)
    def show(record: Annotated[Any, Depends(viewable)]):
        """Show a record to its author."""
        return record

    @router.get("/{record_id}/edit", response_model=FormResponse)
    def edit_form(record: Annotated[Any, Depends(editable)]):
        """Describe the edit form, prefilled with the record."""
        return FormResponse(
            method="PUT",
            action=f"{prefix}/{record.id}/edit",
            data=form_data(record),
        )

    @router.put("/{record_id}/edit")
    def edit(
        request: Request,
        record: Annotated[Any, Depends(editable)],
        payload: update_schema,  # type: ignore[valid-type]
        service: Annotated[RecordService, Depends(get_service)],
        categories: Annotated[CategoryService, Depends(get_category_service)],
    ):
        """Update a record owned by the current user."""
        changes = payload.model_dump(exclude_unset=True)
        check_category(categories, changes.get("category_id"))
        for field, value in changes.items():
            if value is not None:
                setattr(record, field, value)

        service.save(record)
        return flash.redirect(prefix, request, "success", flash.EDITED)

    @router.get("/{record_id}/delete", response_model=FormResponse)
    def delete_form(record: Annotated[Any, Depends(deletable)]):
        """Describe the delete confirmation."""
        return FormResponse(
            method="DELETE",
            action=f"{prefix}/{record.id}/delete",
            data=form_data(record),
        )

    @router.delete("/{record_id}/delete")
    def delete(
        request: Request,
        record: Annotated[Any, Depends(deletable)],
        service: Annotated[RecordService, Depends(get_service)],
    ):
        """Delete a record owned by the current user."""
        service.delete(record)
        return flash.redirect(prefix, request, "success", flash.DELETED)

    return router
