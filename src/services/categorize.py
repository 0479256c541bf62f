from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from src.models.activity import Activity, ActivityCategory

FALLBACK_SUBCATEGORY = "Autres"


@dataclass(slots=True)
class SubcategoryGroups:
    groups: dict[str, list[Activity]] = field(default_factory=dict)
    labels: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)


def subcategory_label(activity: Activity) -> str:
    return activity.subcategory or FALLBACK_SUBCATEGORY


def group_by_subcategory(activities: Iterable[Activity]) -> SubcategoryGroups:
    """Bucket activities by subcategory, keeping the input order inside each bucket.

    Records without a subcategory land in the "Autres" bucket, which is sorted
    together with the real labels.
    """
    groups: dict[str, list[Activity]] = {}
    for activity in activities:
        groups.setdefault(subcategory_label(activity), []).append(activity)
    return SubcategoryGroups(groups=groups, labels=sorted(groups))


def split_by_category(
    activities: Sequence[Activity],
) -> tuple[list[Activity], list[Activity]]:
    """Return (sport, intellectual) activities, order preserved."""
    sport = [a for a in activities if a.category == ActivityCategory.sport]
    intellectual = [a for a in activities if a.category == ActivityCategory.intellectual]
    return sport, intellectual
