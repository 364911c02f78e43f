"""Note API endpoints."""

from notekeeper.api.dependencies import get_note_service
from notekeeper.api.records import build_record_router
from notekeeper.models.note import Note
from notekeeper.schemas.note import NoteCreate, NoteResponse, NoteUpdate

router = build_record_router(
    prefix="/note",
    tag="notes",
    model=Note,
    get_service=get_note_service,
    create_schema=NoteCreate,
    update_schema=NoteUpdate,
    response_schema=NoteResponse,
)
