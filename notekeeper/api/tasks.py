"""Task API endpoints."""

from notekeeper.api.dependencies import get_task_service
from notekeeper.api.records import build_record_router
from notekeeper.models.task import Task
from notekeeper.schemas.task import TaskCreate, TaskResponse, TaskUpdate

router = build_record_router(
    prefix="/task",
    tag="tasks",
    model=Task,
    get_service=get_task_service,
    create_schema=TaskCreate,
    update_schema=TaskUpdate,
    response_schema=TaskResponse,
)
