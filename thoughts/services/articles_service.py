import logging
from pathlib import Path
from typing import Iterable, List

import frontmatter
from pydantic import ValidationError
from yaml import YAMLError

from thoughts.errors import ContentParseError, NotFoundError
from thoughts.repos.articles_repo import derive_slug
from thoughts.schemas.article import ArticleDetail, ArticleMetadata

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date")


class ArticlesService:
    def __init__(self, repo):
        self.repo = repo

    def list_articles(self) -> List[ArticleMetadata]:
        """All articles, newest first. One bad file fails the whole listing."""
        articles = []
        for path in self.repo.list_article_files():
            text = self.repo.read(path)
            metadata, _ = parse_article(text, derive_slug(path), path=path)
            articles.append(metadata)
        return sort_by_recency(articles)

    def get_article(self, slug: str) -> ArticleDetail:
        path = self.repo.get_article_file(slug)
        if path is None:
            raise NotFoundError(slug)
        metadata, body = parse_article(self.repo.read(path), slug, path=path)
        return ArticleDetail(body=body, metadata=metadata)

    def list_slugs(self) -> List[str]:
        return sorted(derive_slug(path) for path in self.repo.list_article_files())

    def list_published(self, development: bool = False) -> List[ArticleMetadata]:
        return filter_published(self.list_articles(), development)

    def latest(self, limit: int, development: bool = False) -> List[ArticleMetadata]:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        return self.list_published(development)[:limit]


def parse_article(
    text: str, slug: str, *, path: Path | None = None
) -> tuple[ArticleMetadata, str]:
    """Parse frontmatter and body into typed metadata tagged with the slug"""
    source = path or slug
    try:
        parsed = frontmatter.loads(text)
    except YAMLError as e:
        logger.warning(f"Malformed front matter in {source}: {e}")
        raise ContentParseError(
            f"Malformed front matter in {source}: {e}", path=path
        ) from e

    metadata = dict(parsed.metadata or {})
    missing = [field for field in REQUIRED_FIELDS if metadata.get(field) is None]
    if missing:
        logger.warning(f"Missing {', '.join(missing)} in {source}")
        raise ContentParseError(
            f"Missing required field(s) {', '.join(missing)} in {source}", path=path
        )

    # The filename is the source of truth for the slug
    metadata["slug"] = slug
    try:
        article = ArticleMetadata.model_validate(_string_keys(metadata))
    except ValidationError as e:
        logger.warning(f"Invalid front matter in {source}: {e}")
        raise ContentParseError(
            f"Invalid front matter in {source}: {e}", path=path
        ) from e
    return article, parsed.content


def filter_published(
    articles: Iterable[ArticleMetadata], development: bool
) -> List[ArticleMetadata]:
    if development:
        return list(articles)
    return [article for article in articles if not article.draft]


def sort_by_recency(
    articles: Iterable[ArticleMetadata], descending: bool = True
) -> List[ArticleMetadata]:
    # Slug ordering keeps equal dates deterministic in both directions
    by_slug = sorted(articles, key=lambda a: a.slug)
    return sorted(by_slug, key=lambda a: a.date, reverse=descending)


def _string_keys(metadata: dict) -> dict:
    return {str(key): value for key, value in metadata.items()}
