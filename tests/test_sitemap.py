from datetime import datetime, timedelta, timezone
from xml.etree import ElementTree

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError

from src.core.reference import CITIES
from src.db.session import get_db
from src.main import app
from src.schemas.sitemap import ChangeFrequency, SitemapEntry
from src.services.sitemap import (
    BLOG_PAGES,
    OTHER_PAGES,
    activity_path,
    build_sitemap_entries,
    format_lastmod,
    render_sitemap_xml,
)

from tests.conftest import BASE_URL, SEED_ACTIVITIES

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}
NOW = datetime(2026, 10, 1, 8, 30, 0)


def test_build_sitemap_entries_counts_and_uniqueness() -> None:
    activities = [
        (1, "Échiquier Toulousain", datetime(2026, 1, 5)),
        (2, "Basket Club Rangueil", datetime(2026, 2, 5)),
        (3, "Basket Club Rangueil", datetime(2026, 3, 5)),
    ]

    entries = build_sitemap_entries(BASE_URL, activities, CITIES, NOW)

    static_count = 1 + len(OTHER_PAGES)
    assert len(entries) == static_count + len(CITIES) + len(BLOG_PAGES) + 2 + len(activities)
    urls = [entry.url for entry in entries]
    assert len(urls) == len(set(urls))


def test_build_sitemap_entries_static_metadata() -> None:
    entries = build_sitemap_entries(BASE_URL + "/", [], CITIES, NOW)
    by_url = {entry.url: entry for entry in entries}

    home = by_url[BASE_URL]
    assert home.change_frequency == ChangeFrequency.daily
    assert home.priority == 1.0
    assert home.last_modified == NOW
    assert by_url[f"{BASE_URL}/sport"].priority == 0.9
    assert by_url[f"{BASE_URL}/intellectuel"].change_frequency == ChangeFrequency.daily
    assert by_url[f"{BASE_URL}/ville/saint-etienne"].change_frequency == ChangeFrequency.weekly
    assert by_url[f"{BASE_URL}/faq"].change_frequency == ChangeFrequency.monthly


def test_activity_entries_use_record_timestamp_and_slug() -> None:
    updated = datetime(2026, 4, 2, 10, 0, 0)

    entries = build_sitemap_entries(BASE_URL, [(42, "Échecs & Jeux", updated)], CITIES, NOW)
    activity_entry = entries[-1]

    assert activity_entry.url == f"{BASE_URL}/activity/42/echecs-jeux"
    assert activity_entry.last_modified == updated
    assert activity_entry.change_frequency == ChangeFrequency.weekly
    assert activity_entry.priority == 0.8


def test_sitemap_entry_rejects_out_of_range_priority() -> None:
    with pytest.raises(ValidationError):
        SitemapEntry(url=BASE_URL, last_modified=NOW, change_frequency=ChangeFrequency.daily, priority=1.5)


def test_render_sitemap_xml_document() -> None:
    entries = build_sitemap_entries(BASE_URL, [(7, "Club de Marche", NOW)], CITIES[:1], NOW)

    document = render_sitemap_xml(entries)

    assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    root = ElementTree.fromstring(document.split("\n", 1)[1])
    locs = [node.text for node in root.findall("sm:url/sm:loc", NS)]
    assert locs[-1] == f"{BASE_URL}/activity/7/club-de-marche"
    assert root.find("sm:url/sm:changefreq", NS).text == "daily"
    assert root.find("sm:url/sm:priority", NS).text == "1.0"
    lastmods = {node.text for node in root.findall("sm:url/sm:lastmod", NS)}
    assert lastmods == {"2026-10-01T08:30:00Z"}


def test_format_lastmod_is_utc_with_designator() -> None:
    assert format_lastmod(datetime(2026, 1, 1, 12, 0, 0, 662848)) == "2026-01-01T12:00:00Z"
    paris_summer = timezone(timedelta(hours=2))
    assert format_lastmod(datetime(2026, 4, 2, 12, 0, tzinfo=paris_summer)) == "2026-04-02T10:00:00Z"


def test_activity_path_falls_back_to_id_when_name_has_no_latin_characters() -> None:
    assert activity_path(12, "Шахматный клуб") == "/activity/12/12"
    assert activity_path(13, "& / !") == "/activity/13/13"
    assert activity_path(14, "Club d'Échecs") == "/activity/14/club-d-echecs"


def test_sitemap_route(client, activities) -> None:
    response = client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert response.headers["cache-control"] == "public, max-age=3600"
    root = ElementTree.fromstring(response.content)
    locs = [node.text for node in root.findall("sm:url/sm:loc", NS)]
    assert len(locs) == 3 + len(CITIES) + len(BLOG_PAGES) + 2 + len(SEED_ACTIVITIES)
    assert len(locs) == len(set(locs))
    aikido = activities["Aïkido Club Capitole"]
    assert f"{BASE_URL}/activity/{aikido.id}/aikido-club-capitole" in locs


class _UnavailableSession:
    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    execute = _fail
    scalars = _fail
    get = _fail


def test_sitemap_fails_whole_request_when_store_unavailable(client) -> None:
    app.dependency_overrides[get_db] = lambda: _UnavailableSession()

    response = client.get("/sitemap.xml")

    assert response.status_code == 503
    assert "<urlset" not in response.text


def test_robots_points_to_sitemap(client) -> None:
    response = client.get("/robots.txt")

    assert response.status_code == 200
    assert f"Sitemap: {BASE_URL}/sitemap.xml" in response.text
