"""Flash messages carried across redirects in a cookie.

The cookie holds ``kind:message`` entries separated by ``|``. Message values
are translation keys, so they never contain either separator.
"""

from fastapi import HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse

from notekeeper.schemas.pagination import FlashMessage

FLASH_COOKIE = "flash"

CREATED = "message.created_successfully"
EDITED = "message.edited_successfully"
DELETED = "message.deleted_successfully"
CATEGORY_IN_USE = "message.category_contains_elements"


def _parse(raw: str | None) -> list[FlashMessage]:
    flashes = []
    for entry in (raw or "").split("|"):
        kind, sep, message = entry.partition(":")
        if sep and kind and message:
            flashes.append(FlashMessage(kind=kind, message=message))
    return flashes


def redirect(
    url: str,
    request: Request | None = None,
    kind: str | None = None,
    message: str | None = None,
) -> RedirectResponse:
    """Redirect with 303 See Other, optionally queueing a flash message."""
    response = RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
    if kind and message:
        pending = _parse(request.cookies.get(FLASH_COOKIE)) if request else []
        pending.append(FlashMessage(kind=kind, message=message))
        value = "|".join(f"{flash.kind}:{flash.message}" for flash in pending)
        response.set_cookie(FLASH_COOKIE, value, httponly=True, samesite="lax")
    return response


def pop_flashes(request: Request, response: Response) -> list[FlashMessage]:
    """Read pending flash messages and clear them."""
    raw = request.cookies.get(FLASH_COOKIE)
    if raw is None:
        return []
    response.delete_cookie(FLASH_COOKIE)
    return _parse(raw)


def redirect_error(url: str) -> HTTPException:
    """A 303 redirect raised from a dependency, before the body is validated."""
    return HTTPException(status_code=status.HTTP_303_SEE_OTHER, headers={"Location": url})
