from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

INDEX_PAGE = Path(__file__).parent / "index.html"


@router.get("/", response_class=HTMLResponse)
async def index_page():
    """Single page search UI."""
    return HTMLResponse(INDEX_PAGE.read_text(encoding="utf-8"))
