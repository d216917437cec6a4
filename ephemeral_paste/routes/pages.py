"""
HTML page routes.
Both pages are static; the view page loads the paste through the JSON API.
"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@router.get("/", response_class=FileResponse, include_in_schema=False)
async def create_page():
    """Serve the create paste HTML page."""
    return FileResponse(TEMPLATES_DIR / "create.html", media_type="text/html")


@router.get("/p/{paste_id}", response_class=FileResponse, include_in_schema=False)
async def view_page(paste_id: str):
    """Serve the view paste HTML page. Does not count as a view by itself."""
    return FileResponse(TEMPLATES_DIR / "view.html", media_type="text/html")
