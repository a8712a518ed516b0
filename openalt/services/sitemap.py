"""
XML sitemap generation.

Static routes plus one entry per category and per alternative, in the
sitemaps.org 0.9 schema. Regenerated in full on every call.
"""

import html
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..models.alternative import AlternativeRecord
from ..models.category import CategoryRecord

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class SitemapEntry:
    path: str
    priority: float
    changefreq: str


STATIC_PAGES = [
    SitemapEntry("/", 1.0, "daily"),
    SitemapEntry("/categories", 0.9, "weekly"),
    SitemapEntry("/search", 0.8, "daily"),
    SitemapEntry("/about", 0.7, "monthly"),
    SitemapEntry("/submit", 0.6, "monthly"),
]


def build_sitemap_entries(
    categories: Iterable[CategoryRecord],
    alternatives: Iterable[AlternativeRecord],
) -> List[SitemapEntry]:
    """Static pages, then categories, then alternatives."""
    entries = list(STATIC_PAGES)
    entries.extend(SitemapEntry(f"/categories/{c.slug}", 0.8, "weekly") for c in categories)
    entries.extend(SitemapEntry(f"/alternatives/{a.id}", 0.7, "weekly") for a in alternatives)
    return entries


def format_lastmod(moment: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def render_sitemap(
    entries: Iterable[SitemapEntry],
    site_url: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Serialize entries as a urlset document.

    Every entry's lastmod is the generation time, not the entity's own
    updated_at.
    """
    site = site_url.rstrip("/")
    lastmod = format_lastmod(generated_at or datetime.now(timezone.utc))

    urls = "\n".join(
        f"""  <url>
    <loc>{html.escape(site + entry.path)}</loc>
    <lastmod>{lastmod}</lastmod>
    <changefreq>{entry.changefreq}</changefreq>
    <priority>{entry.priority:.1f}</priority>
  </url>"""
        for entry in entries
    )

    return f'''<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="{SITEMAP_NAMESPACE}">
{urls}
</urlset>'''


def generate_sitemap(
    categories: Iterable[CategoryRecord],
    alternatives: Iterable[AlternativeRecord],
    site_url: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """Build and render the sitemap for the given catalog."""
    return render_sitemap(build_sitemap_entries(categories, alternatives), site_url, generated_at)
