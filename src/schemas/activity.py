from datetime import datetime

from pydantic import BaseModel


class ActivityRead(BaseModel):
    id: int
    name: str
    slug: str
    url: str
    category: str
    subcategory: str | None
    description: str | None
    address: str
    phone: str | None
    website: str | None
    email: str | None
    latitude: float | None
    longitude: float | None
    neighborhood: str | None
    updated_at: datetime


class SubcategoryGroupRead(BaseModel):
    label: str
    slug: str
    count: int
    activities: list[ActivityRead]


class CategoryGroupsRead(BaseModel):
    category: str
    total: int
    groups: list[SubcategoryGroupRead]


class PlaceRead(BaseModel):
    name: str
    slug: str
    url: str
