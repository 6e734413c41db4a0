import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from api.deps import get_settings
from api.errors import PageLoadError
from settings import Settings
from .service import render_page_with_config

logger = logging.getLogger(__name__)

router = APIRouter()

INDEX_PAGE = "index.html"
ADMIN_PAGE = "admin.html"


def _serve_configured_page(path: Path, settings: Settings) -> HTMLResponse:
    try:
        return HTMLResponse(render_page_with_config(path, settings.firebase))
    except (OSError, UnicodeDecodeError) as exc:
        logger.exception("Error serving HTML file %s", path)
        raise PageLoadError(str(path)) from exc


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
def index_page(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    return _serve_configured_page(settings.frontend_dir / INDEX_PAGE, settings)


@router.api_route("/admin.html", methods=["GET", "HEAD"], response_class=HTMLResponse)
def admin_page(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    return _serve_configured_page(settings.frontend_dir / ADMIN_PAGE, settings)
