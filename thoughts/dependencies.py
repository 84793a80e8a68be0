from fastapi import Depends

from thoughts.repos.articles_repo import FileArticlesRepo
from thoughts.services.articles_service import ArticlesService
from thoughts.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_articles_repo(current_settings: Settings = Depends(get_settings)):
    return FileArticlesRepo(
        current_settings.content_path, current_settings.CONTENT_EXTENSIONS
    )


def get_articles_service(repo=Depends(get_articles_repo)):
    return ArticlesService(repo=repo)
