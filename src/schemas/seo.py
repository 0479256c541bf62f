from pydantic import BaseModel


class PageMetadata(BaseModel):
    title: str
    description: str
    keywords: list[str]
    canonical_url: str
    og_title: str
    og_description: str
    og_url: str
    og_site_name: str
    og_type: str = "website"
    locale: str = "fr_FR"
