import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from thoughts import dependencies as deps
from thoughts.errors import ContentError, NotFoundError
from thoughts.schemas.article import ArticleDetail, ArticleMetadata, ArticlePath
from thoughts.services.articles_service import ArticlesService
from thoughts.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()
MAX_LATEST_LIMIT = 50


@router.get("/thoughts", response_model=List[ArticleMetadata])
def list_articles(
    service: ArticlesService = Depends(deps.get_articles_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Published articles metadata, newest first."""
    try:
        return service.list_published(current_settings.is_development)
    except ContentError as e:
        logger.error(f"Failed to list articles: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve articles")


@router.get("/thoughts/{slug}", response_model=ArticleDetail)
def get_article(
    slug: str,
    service: ArticlesService = Depends(deps.get_articles_service),
):
    """Get a single article by slug."""
    try:
        return service.get_article(slug)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Article not found")
    except ContentError as e:
        logger.error(f"Failed to load article {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve article")


@router.get("/latest", response_model=List[ArticleMetadata])
def latest_articles(
    limit: int | None = Query(None, ge=1, le=MAX_LATEST_LIMIT),
    service: ArticlesService = Depends(deps.get_articles_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        return service.latest(
            limit or current_settings.LATEST_ARTICLES_LIMIT,
            current_settings.is_development,
        )
    except ContentError as e:
        logger.error(f"Failed to list latest articles: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve articles")


@router.get("/paths", response_model=List[ArticlePath])
def article_paths(service: ArticlesService = Depends(deps.get_articles_service)):
    """Every slug, for static page generation."""
    try:
        return [ArticlePath(slug=slug) for slug in service.list_slugs()]
    except ContentError as e:
        logger.error(f"Failed to list article paths: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve articles")
