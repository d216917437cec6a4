"""
Paste routes.
Handles create and fetch (API) operations.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from ephemeral_paste.config import settings
from ephemeral_paste.exceptions import PasteNotFoundError
from ephemeral_paste.models import PasteCreate, PasteResponse, PasteView
from ephemeral_paste.store import PasteStore, current_time_ms

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> PasteStore:
    """The store owned by the running application."""
    return request.app.state.store


def _get_current_time(x_test_now_ms: Optional[str] = None) -> int:
    """
    Get current time in ms, honouring the x-test-now-ms override.

    Args:
        x_test_now_ms: Test timestamp header (milliseconds since epoch)

    Returns:
        Override if it parses as an integer, else wall-clock time
    """
    if x_test_now_ms:
        try:
            return int(x_test_now_ms.strip())
        except ValueError:
            logger.warning(f"Invalid x-test-now-ms header: {x_test_now_ms!r}")

    return current_time_ms()


def _share_url(request: Request, paste_id: str) -> str:
    base_url = settings.APP_DOMAIN or str(request.base_url)
    return f"{base_url.rstrip('/')}/p/{paste_id}"


@router.post("/api/pastes", response_model=PasteResponse, status_code=201)
async def create_paste(
    paste: PasteCreate,
    request: Request,
    store: PasteStore = Depends(get_store),
) -> PasteResponse:
    """
    Create a new paste.

    Args:
        paste: Paste data (content, optional ttl_seconds, optional max_views)
        request: HTTP request context
        store: Paste store

    Returns:
        Paste ID and shareable URL
    """
    created = store.create(
        content=paste.content,
        ttl_seconds=paste.ttl_seconds,
        max_views=paste.max_views,
    )
    return PasteResponse(id=created.id, url=_share_url(request, created.id))


@router.get("/api/pastes/{paste_id}", response_model=PasteView)
async def fetch_paste(
    paste_id: str,
    x_test_now_ms: Optional[str] = Header(None),
    store: PasteStore = Depends(get_store),
) -> PasteView:
    """
    Fetch a paste. Each fetch counts as a view.

    Raises:
        PasteNotFoundError: If paste is unknown, expired, or out of views (404)
    """
    snapshot = store.retrieve(paste_id, now=_get_current_time(x_test_now_ms))
    if snapshot is None:
        raise PasteNotFoundError()

    return PasteView(
        content=snapshot.content,
        created_at=snapshot.created_at,
        expires_at=snapshot.expires_at,
        views_remaining=snapshot.views_remaining,
    )
