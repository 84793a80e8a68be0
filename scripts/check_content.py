import logging
import sys

from thoughts.errors import ContentError
from thoughts.repos.articles_repo import FileArticlesRepo
from thoughts.services.articles_service import ArticlesService
from thoughts.settings import settings

logger = logging.getLogger(__name__)


def check_content(service: ArticlesService) -> int:
    try:
        articles = service.list_articles()
    except ContentError as e:
        logger.error(f"Content check failed: {e}")
        return 1

    drafts = sum(1 for article in articles if article.draft)
    logger.info(f"Loaded {len(articles)} articles ({drafts} drafts).")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    repo = FileArticlesRepo(settings.content_path, settings.CONTENT_EXTENSIONS)
    sys.exit(check_content(ArticlesService(repo)))
