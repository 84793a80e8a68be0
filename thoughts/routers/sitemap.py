import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from thoughts import dependencies as deps
from thoughts.errors import ContentError
from thoughts.services.articles_service import ArticlesService
from thoughts.services.sitemap_service import build_sitemap_entries, render_sitemap_xml
from thoughts.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap.xml")
def sitemap(
    service: ArticlesService = Depends(deps.get_articles_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        articles = service.list_published(current_settings.is_development)
    except ContentError as e:
        logger.error(f"Failed to build sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")

    entries = build_sitemap_entries(articles, current_settings.SITE_URL)
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")
