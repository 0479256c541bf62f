from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from xml.etree import ElementTree

from src.core.reference import BLOG_ARTICLES, City
from src.models.activity import CATEGORY_PATHS
from src.schemas.sitemap import ChangeFrequency, SitemapEntry
from src.services.slug import generate_slug

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, change frequency, priority)
OTHER_PAGES: tuple[tuple[str, ChangeFrequency, float], ...] = (
    ("/activites", ChangeFrequency.daily, 0.9),
    ("/faq", ChangeFrequency.monthly, 0.5),
)
BLOG_PAGES: tuple[tuple[str, ChangeFrequency, float], ...] = (
    ("/blog", ChangeFrequency.weekly, 0.7),
    *((f"/blog/{article.slug}", ChangeFrequency.monthly, 0.6) for article in BLOG_ARTICLES),
)


def activity_slug(activity_id: int, name: str) -> str:
    """Slug segment of a detail URL; names without any [a-z0-9] fall back to the id."""
    return generate_slug(name) or str(activity_id)


def activity_path(activity_id: int, name: str) -> str:
    return f"/activity/{activity_id}/{activity_slug(activity_id, name)}"


def format_lastmod(value: datetime) -> str:
    """W3C datetime in UTC. Naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="seconds") + "Z"


def build_sitemap_entries(
    base_url: str,
    activities: Iterable[tuple[int, str, datetime]],
    cities: Sequence[City],
    now: datetime,
) -> list[SitemapEntry]:
    """Assemble every addressable URL of the site.

    `activities` is the (id, name, updated_at) projection from the record store.
    Static pages carry `now` as their last-modified value.
    """
    base_url = base_url.rstrip("/")

    def static(path: str, frequency: ChangeFrequency, priority: float) -> SitemapEntry:
        return SitemapEntry(
            url=f"{base_url}{path}",
            last_modified=now,
            change_frequency=frequency,
            priority=priority,
        )

    entries = [static("", ChangeFrequency.daily, 1.0)]
    entries.extend(static(*page) for page in OTHER_PAGES)
    entries.extend(
        static(f"/{segment}", ChangeFrequency.daily, 0.9) for segment in CATEGORY_PATHS.values()
    )
    entries.extend(static(f"/ville/{city.slug}", ChangeFrequency.weekly, 0.8) for city in cities)
    entries.extend(static(*page) for page in BLOG_PAGES)
    entries.extend(
        SitemapEntry(
            url=f"{base_url}{activity_path(activity_id, name)}",
            last_modified=updated_at,
            change_frequency=ChangeFrequency.weekly,
            priority=0.8,
        )
        for activity_id, name, updated_at in activities
    )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for entry in entries:
        node = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(node, "loc").text = entry.url
        ElementTree.SubElement(node, "lastmod").text = format_lastmod(entry.last_modified)
        ElementTree.SubElement(node, "changefreq").text = entry.change_frequency.value
        ElementTree.SubElement(node, "priority").text = f"{entry.priority:.1f}"
    body = ElementTree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
