from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from src.core.config import settings
from src.core.reference import CITIES, NEIGHBORHOODS
from src.db.session import get_db
from src.models.activity import Activity, ActivityCategory
from src.schemas.activity import ActivityRead, CategoryGroupsRead, PlaceRead, SubcategoryGroupRead
from src.services.activity_service import get_activity, list_activities, list_activities_by_category
from src.services.categorize import group_by_subcategory
from src.services.sitemap import activity_path, activity_slug
from src.services.slug import generate_slug

router = APIRouter(tags=["activities"])


def to_activity_read(activity: Activity) -> ActivityRead:
    return ActivityRead(
        id=activity.id,
        name=activity.name,
        slug=activity_slug(activity.id, activity.name),
        url=f"{settings.public_base_url}{activity_path(activity.id, activity.name)}",
        category=activity.category.value,
        subcategory=activity.subcategory,
        description=activity.description,
        address=activity.address,
        phone=activity.phone,
        website=activity.website,
        email=activity.email,
        latitude=activity.latitude,
        longitude=activity.longitude,
        neighborhood=activity.neighborhood,
        updated_at=activity.updated_at,
    )


@router.get("/activities", response_model=list[ActivityRead])
def get_activities(
    category: ActivityCategory | None = None,
    neighborhood: str | None = None,
    db: Session = Depends(get_db),
) -> list[ActivityRead]:
    activities = list_activities(db, category=category, neighborhood=neighborhood)
    return [to_activity_read(activity) for activity in activities]


@router.get("/activities/{activity_id}", response_model=ActivityRead)
def get_activity_detail(activity_id: int, db: Session = Depends(get_db)) -> ActivityRead:
    activity = get_activity(db, activity_id)
    if activity is None:
        raise HTTPException(status_code=404, detail="Activity not found")
    return to_activity_read(activity)


@router.get("/categories/{category}/groups", response_model=CategoryGroupsRead)
def get_category_groups(
    category: ActivityCategory,
    db: Session = Depends(get_db),
) -> CategoryGroupsRead:
    activities = list_activities_by_category(db, category)
    grouped = group_by_subcategory(activities)
    return CategoryGroupsRead(
        category=category.value,
        total=len(activities),
        groups=[
            SubcategoryGroupRead(
                label=label,
                slug=generate_slug(label),
                count=len(grouped.groups[label]),
                activities=[to_activity_read(a) for a in grouped.groups[label]],
            )
            for label in grouped.labels
        ],
    )


@router.get("/neighborhoods", response_model=list[PlaceRead])
def get_neighborhoods() -> list[PlaceRead]:
    return [
        PlaceRead(name=item.name, slug=item.slug, url=f"{settings.public_base_url}/quartier/{item.slug}")
        for item in NEIGHBORHOODS
    ]


@router.get("/cities", response_model=list[PlaceRead])
def get_cities() -> list[PlaceRead]:
    return [
        PlaceRead(name=item.name, slug=item.slug, url=f"{settings.public_base_url}/ville/{item.slug}")
        for item in CITIES
    ]
