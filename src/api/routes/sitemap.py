from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.orm import Session

from src.core.config import settings
from src.core.logging import get_logger
from src.core.reference import CITIES
from src.db.session import get_db
from src.services.activity_service import list_sitemap_activities
from src.services.sitemap import build_sitemap_entries, render_sitemap_xml

router = APIRouter(tags=["sitemap"])
logger = get_logger(__name__)


@router.get("/sitemap.xml", response_class=Response)
def sitemap(db: Session = Depends(get_db)) -> Response:
    entries = build_sitemap_entries(
        settings.public_base_url,
        list_sitemap_activities(db),
        CITIES,
        now=datetime.utcnow(),
    )
    logger.info("sitemap generated entries=%d", len(entries))
    return Response(
        content=render_sitemap_xml(entries),
        media_type="application/xml",
        headers={"Cache-Control": f"public, max-age={settings.sitemap_revalidate_seconds}"},
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots() -> str:
    return f"User-agent: *\nAllow: /\n\nSitemap: {settings.public_base_url}/sitemap.xml\n"
