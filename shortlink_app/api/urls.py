from fastapi import APIRouter, Depends, HTTPException, status
from shortlink_app.exceptions import InvalidInputError, StoreError
from shortlink_app.schemas.url import ShortenRequest, ShortenResponse
from shortlink_app.services.url_service import URLService
from shortlink_app.dependencies import get_url_service

router = APIRouter(tags=["urls"])


@router.post("/shorten", response_model=ShortenResponse)
def create_short_url(
    url_data: ShortenRequest,
    url_service: URLService = Depends(get_url_service)
):
    """
    Create a new short URL.

    Sync on purpose: FastAPI runs it in the threadpool, and the store
    serializes writers with its own lock (including the snapshot write).
    Write failures are logged by the store; clients only get a 500.
    """
    try:
        short_url = url_service.shorten(url_data.url)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    return ShortenResponse(short_url=short_url)
