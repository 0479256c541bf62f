from collections.abc import Sequence

from src.core.config import settings
from src.models.activity import Activity, ActivityCategory
from src.schemas.seo import PageMetadata

SCHEMA_CONTEXT = "https://schema.org"


def build_page_metadata(
    title: str,
    description: str,
    url: str,
    keywords: Sequence[str] = (),
) -> PageMetadata:
    full_title = f"{title} | {settings.site_name}"
    return PageMetadata(
        title=full_title,
        description=description,
        keywords=list(keywords),
        canonical_url=url,
        og_title=full_title,
        og_description=description,
        og_url=url,
        og_site_name=settings.site_name,
    )


def collection_page_json_ld(name: str, description: str, url: str, number_of_items: int) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": name,
        "description": description,
        "url": url,
        "numberOfItems": number_of_items,
    }


def activity_json_ld(activity: Activity, url: str) -> dict:
    data: dict = {
        "@context": SCHEMA_CONTEXT,
        "@type": (
            "SportsActivityLocation"
            if activity.category == ActivityCategory.sport
            else "LocalBusiness"
        ),
        "name": activity.name,
        "url": url,
        "address": {
            "@type": "PostalAddress",
            "streetAddress": activity.address,
            "addressLocality": "Toulouse",
            "addressCountry": "FR",
        },
    }
    if activity.description:
        data["description"] = activity.description
    if activity.phone:
        data["telephone"] = activity.phone
    if activity.website:
        data["sameAs"] = activity.website
    if activity.has_coordinates:
        data["geo"] = {
            "@type": "GeoCoordinates",
            "latitude": activity.latitude,
            "longitude": activity.longitude,
        }
    return data
