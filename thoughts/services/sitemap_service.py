import datetime
from typing import Iterable, List
from xml.sax.saxutils import escape

from thoughts.schemas.article import ArticleMetadata
from thoughts.schemas.sitemap import SitemapEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap_entries(
    articles: Iterable[ArticleMetadata],
    site_url: str,
    now: datetime.datetime | None = None,
) -> List[SitemapEntry]:
    """
    Home page and listing page first, then one entry per article
    """
    now = now or datetime.datetime.now(datetime.timezone.utc)
    site_url = site_url.rstrip("/")

    entries = [
        SitemapEntry(
            url=site_url,
            lastModified=now,
            changeFrequency="weekly",
            priority=1.0,
        ),
        SitemapEntry(
            url=f"{site_url}/thoughts",
            lastModified=now,
            changeFrequency="weekly",
            priority=0.9,
        ),
    ]
    entries.extend(
        SitemapEntry(
            url=f"{site_url}/thoughts/{article.slug}",
            lastModified=article.date,
            changeFrequency="monthly",
            priority=0.8,
        )
        for article in articles
    )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    items = [
        "\n".join(
            [
                "<url>",
                f"<loc>{escape(entry.url)}</loc>",
                f"<lastmod>{entry.lastModified.isoformat()}</lastmod>",
                f"<changefreq>{entry.changeFrequency}</changefreq>",
                f"<priority>{entry.priority:.1f}</priority>",
                "</url>",
            ]
        )
        for entry in entries
    ]
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
            *items,
            "</urlset>",
        ]
    )
