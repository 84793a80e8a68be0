import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from thoughts.errors import ContentReadError, DuplicateSlugError

logger = logging.getLogger(__name__)


def derive_slug(path: Path | str) -> str:
    """Filename without its extension, no further normalization."""
    return Path(path).stem


class FileArticlesRepo:
    def __init__(self, content_dir: Path | str, extensions: Iterable[str]):
        self.content_dir = Path(content_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def list_article_files(self) -> List[Path]:
        files = self._content_files()
        self._check_unique(files)
        return files

    def get_article_file(self, slug: str) -> Optional[Path]:
        if not self._is_safe_slug(slug):
            logger.debug(f"Rejected slug {slug!r}")
            return None

        matches = [path for path in self._content_files() if path.stem == slug]
        if len(matches) > 1:
            self._check_unique(matches)
        return matches[0] if matches else None

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentReadError(f"Cannot read {path}: {e}", path=path) from e

    def _content_files(self) -> List[Path]:
        try:
            entries = sorted(self.content_dir.iterdir())
        except OSError as e:
            raise ContentReadError(
                f"Cannot list content directory {self.content_dir}: {e}",
                path=self.content_dir,
            ) from e
        return [path for path in entries if self._is_content_file(path)]

    def _is_content_file(self, path: Path) -> bool:
        return (
            not path.name.startswith(".")
            and path.suffix.lower() in self.extensions
            and path.is_file()
        )

    @staticmethod
    def _check_unique(files: List[Path]) -> None:
        seen: Dict[str, Path] = {}
        for path in files:
            slug = derive_slug(path)
            if slug in seen:
                raise DuplicateSlugError(
                    f"Slug {slug!r} maps to both {seen[slug].name} and {path.name}",
                    path=path,
                )
            seen[slug] = path

    @staticmethod
    def _is_safe_slug(slug: str) -> bool:
        if not slug or slug in (".", ".."):
            return False
        return "/" not in slug and "\\" not in slug
