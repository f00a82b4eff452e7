from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from alias_shortener.dependencies import get_url_getter
from alias_shortener.schemas.url import Response
from alias_shortener.storage.errors import URLNotFoundError
from alias_shortener.storage.strategies import URLGetter

router = APIRouter(tags=["redirect"])


@router.get("/url/{alias}")
def redirect_to_url(
    alias: str,
    url_getter: URLGetter = Depends(get_url_getter)
):
    """
    Redirect to the URL registered for alias.

    The getter only reads; this route cannot save or delete.
    """
    try:
        url = url_getter.get_url(alias)
    except URLNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=Response.failure("not found").model_dump(exclude_none=True),
        )

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
