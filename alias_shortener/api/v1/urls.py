from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from alias_shortener.dependencies import get_url_deleter, get_url_service
from alias_shortener.schemas.url import STATUS_OK, Response, URLCreate, URLSaved
from alias_shortener.services.url_service import URLService
from alias_shortener.storage.errors import (
    AliasGenerationError,
    URLExistsError,
    URLNotFoundError,
)
from alias_shortener.storage.strategies import URLDeleter

router = APIRouter(prefix="/url", tags=["url"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=Response.failure(message).model_dump(exclude_none=True),
    )


@router.post(
    "",
    response_model=URLSaved,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def save_url(
    url_data: URLCreate,
    url_service: URLService = Depends(get_url_service)
):
    """Save a URL under the given alias, or under a generated one"""
    try:
        saved = url_service.save_url(str(url_data.url), url_data.alias)
    except URLExistsError:
        return _error(status.HTTP_409_CONFLICT, "url already exists")
    except AliasGenerationError:
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "failed to generate alias")

    return URLSaved(status=STATUS_OK, alias=saved.alias, id=saved.id)


@router.delete(
    "/{alias}",
    response_model=Response,
    response_model_exclude_none=True,
)
def delete_url(
    alias: str = Path(..., min_length=1),
    url_deleter: URLDeleter = Depends(get_url_deleter)
):
    """Delete the record for alias"""
    try:
        url_deleter.delete_url(alias)
    except URLNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "url not found")

    return Response.ok()
