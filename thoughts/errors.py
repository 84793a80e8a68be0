from pathlib import Path
from typing import Optional


class ContentError(Exception):
    """Base class for failures while reading articles from the content directory."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ContentReadError(ContentError):
    pass


class ContentParseError(ContentError):
    pass


class DuplicateSlugError(ContentError):
    pass


class NotFoundError(ContentError):
    def __init__(self, slug: str):
        super().__init__(f"No article found for slug {slug!r}")
        self.slug = slug
