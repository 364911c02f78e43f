"""Access-control policy.

Every entry point asks this module whether an actor may act on a subject.
The answers are pure predicates: they never raise and never touch the
database. Callers treat ``False`` as "redirect away", not as an error.

- Notes and tasks: only their author may view, edit or delete them.
- Users: only administrators may list, view, edit or delete them.
"""

from typing import Any

from notekeeper.models.enums import Action
from notekeeper.models.note import Note
from notekeeper.models.task import Task
from notekeeper.models.user import User

AUTHORED_TYPES = (Note, Task)


def is_author(actor: User | None, resource: Any) -> bool:
    """Check if the actor owns a note or task."""
    if actor is None or actor.id is None:
        return False
    return resource.author_id == actor.id


def can_list(actor: User | None) -> bool:
    """Check if the actor may list users."""
    return actor is not None and actor.is_admin


def can_view(actor: User | None, resource: Any) -> bool:
    """Check if the actor may view a resource."""
    return is_granted(actor, Action.VIEW, resource)


def can_edit(actor: User | None, resource: Any) -> bool:
    """Check if the actor may edit a resource."""
    return is_granted(actor, Action.EDIT, resource)


def can_delete(actor: User | None, resource: Any) -> bool:
    """Check if the actor may delete a resource."""
    return is_granted(actor, Action.DELETE, resource)


def is_granted(actor: User | None, action: Action, subject: Any = None) -> bool:
    """Decide a single access check.

    ``LIST`` takes no subject and covers user management. Unsupported
    subjects are always denied.
    """
    if actor is None:
        return False
    if action == Action.LIST:
        return can_list(actor)
    if isinstance(subject, AUTHORED_TYPES):
        return is_author(actor, subject)
    if isinstance(subject, User):
        return can_list(actor)
    return False
