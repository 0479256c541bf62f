from datetime import datetime

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from src.core.logging import get_logger
from src.models.activity import Activity, ActivityCategory

logger = get_logger(__name__)


def _by_name(stmt: Select[tuple[Activity]]) -> Select[tuple[Activity]]:
    return stmt.order_by(Activity.name.asc(), Activity.id.asc())


def list_activities_by_category(db: Session, category: ActivityCategory) -> list[Activity]:
    stmt = _by_name(select(Activity).where(Activity.category == category))
    activities = list(db.scalars(stmt))
    logger.debug("category=%s activities=%d", category.value, len(activities))
    return activities


def list_activities_by_neighborhood(db: Session, neighborhood: str) -> list[Activity]:
    stmt = _by_name(select(Activity).where(Activity.neighborhood == neighborhood))
    activities = list(db.scalars(stmt))
    logger.debug("neighborhood=%s activities=%d", neighborhood, len(activities))
    return activities


def list_activities(
    db: Session,
    category: ActivityCategory | None = None,
    neighborhood: str | None = None,
) -> list[Activity]:
    stmt = select(Activity)
    if category is not None:
        stmt = stmt.where(Activity.category == category)
    if neighborhood:
        stmt = stmt.where(Activity.neighborhood == neighborhood)
    return list(db.scalars(_by_name(stmt)))


def list_sitemap_activities(db: Session) -> list[tuple[int, str, datetime]]:
    """Narrowed projection used by the sitemap: (id, name, updated_at)."""
    stmt = select(Activity.id, Activity.name, Activity.updated_at).order_by(Activity.id.asc())
    return [(row.id, row.name, row.updated_at) for row in db.execute(stmt)]


def get_activity(db: Session, activity_id: int) -> Activity | None:
    return db.get(Activity, activity_id)


def count_activities_by_category(db: Session) -> dict[ActivityCategory, int]:
    stmt = select(Activity.category, func.count(Activity.id)).group_by(Activity.category)
    counts = {category: 0 for category in ActivityCategory}
    for category, total in db.execute(stmt):
        counts[ActivityCategory(category)] = total
    return counts
