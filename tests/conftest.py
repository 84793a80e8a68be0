import datetime
import textwrap
from pathlib import Path

import pytest

from thoughts.schemas.article import ArticleMetadata


def write_article(directory: Path, filename: str, raw: str) -> Path:
    """Write a dedented article file into the content directory."""
    path = directory / filename
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


def make_metadata(slug: str, date: str = "2024-01-01", **extra) -> ArticleMetadata:
    return ArticleMetadata(slug=slug, title=slug.title(), date=date, **extra)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    In-memory stand-in for FileArticlesRepo used in service tests.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_article_files(self):
        return [Path(name) for name in sorted(self.files)]

    def get_article_file(self, slug: str):
        for name in self.files:
            if Path(name).stem == slug:
                return Path(name)
        return None

    def read(self, path: Path) -> str:
        self.reads.append(path.name)
        return textwrap.dedent(self.files[path.name]).lstrip()


class FakeArticlesService:
    """
    Minimal articles service stand-in for router tests.
    """

    def __init__(self, articles=None, detail=None, slugs=None, error=None):
        self.articles = articles or []
        self.detail = detail
        self.slugs = slugs or []
        self.error = error
        self.calls = []

    def _maybe_raise(self):
        if self.error is not None:
            raise self.error

    def list_published(self, development: bool = False):
        self.calls.append(("list_published", development))
        self._maybe_raise()
        if development:
            return list(self.articles)
        return [a for a in self.articles if not a.draft]

    def latest(self, limit: int, development: bool = False):
        self.calls.append(("latest", limit, development))
        return self.list_published(development)[:limit]

    def get_article(self, slug: str):
        self.calls.append(("get_article", slug))
        self._maybe_raise()
        return self.detail

    def list_slugs(self):
        self._maybe_raise()
        return list(self.slugs)


UTC = datetime.timezone.utc
