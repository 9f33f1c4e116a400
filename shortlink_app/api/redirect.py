from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from shortlink_app.exceptions import InvalidInputError
from shortlink_app.services.url_service import URLService
from shortlink_app.dependencies import get_url_service

router = APIRouter(tags=["redirect"])


@router.get("/{short_code}")
def redirect_to_long_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    Only takes the store's read lock, so redirects run in parallel
    and never wait on disk unless a write is in progress.
    """
    try:
        long_url = url_service.resolve(short_code)
    except InvalidInputError:
        long_url = None

    if long_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
