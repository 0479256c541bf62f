from dataclasses import dataclass

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from src.api.templating import templates
from src.core.config import settings
from src.core.reference import BLOG_ARTICLES, NEIGHBORHOODS, find_blog_article, find_city, find_neighborhood
from src.db.session import get_db
from src.models.activity import CATEGORY_PATHS, ActivityCategory
from src.services.activity_service import (
    count_activities_by_category,
    get_activity,
    list_activities,
    list_activities_by_category,
    list_activities_by_neighborhood,
)
from src.services.categorize import group_by_subcategory, split_by_category
from src.services.seo import activity_json_ld, build_page_metadata, collection_page_json_ld
from src.services.sitemap import activity_path, activity_slug

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


@dataclass(frozen=True, slots=True)
class CategoryPage:
    label: str
    title: str
    description: str
    keywords: tuple[str, ...]
    heading: str
    collection_description: str
    intro: str


CATEGORY_PAGES: dict[ActivityCategory, CategoryPage] = {
    ActivityCategory.sport: CategoryPage(
        label="Sport",
        title="Activités Sportives à Toulouse - Tous les Clubs et Associations",
        description=(
            "Découvrez tous les clubs sportifs et associations à Toulouse : football, basketball, "
            "tennis, arts martiaux, yoga, danse et plus encore. Trouvez votre activité sportive idéale."
        ),
        keywords=(
            "sport Toulouse",
            "club sportif Toulouse",
            "activités sportives Toulouse",
            "football Toulouse",
            "basketball Toulouse",
            "tennis Toulouse",
            "arts martiaux Toulouse",
            "yoga Toulouse",
            "danse Toulouse",
        ),
        heading="Activités Sportives à Toulouse",
        collection_description="Trouvez tous les clubs sportifs et associations à Toulouse",
        intro="Du football au yoga, trouvez l'activité sportive qui vous correspond.",
    ),
    ActivityCategory.intellectual: CategoryPage(
        label="Intellectuel",
        title="Activités Intellectuelles à Toulouse - Clubs et Associations",
        description=(
            "Découvrez tous les clubs et associations d'activités intellectuelles à Toulouse : échecs, "
            "jeux de société, lecture, débats, langues et plus encore. Stimulez votre esprit."
        ),
        keywords=(
            "activités intellectuelles Toulouse",
            "club échecs Toulouse",
            "jeux de société Toulouse",
            "club lecture Toulouse",
            "cours langues Toulouse",
            "débats Toulouse",
            "club bridge Toulouse",
        ),
        heading="Activités Intellectuelles à Toulouse",
        collection_description="Trouvez tous les clubs et associations d'activités intellectuelles à Toulouse",
        intro="Des échecs aux langues, trouvez l'activité qui stimule votre esprit.",
    ),
}


def _url(path: str) -> str:
    return f"{settings.public_base_url}{path}"


def _render_category(request: Request, db: Session, category: ActivityCategory):
    page = CATEGORY_PAGES[category]
    url = _url(f"/{CATEGORY_PATHS[category]}")
    activities = list_activities_by_category(db, category)
    return templates.TemplateResponse(
        request,
        "category.html",
        {
            "metadata": build_page_metadata(page.title, page.description, url, page.keywords),
            "json_ld": collection_page_json_ld(page.heading, page.collection_description, url, len(activities)),
            "page": page,
            "total": len(activities),
            "grouped": group_by_subcategory(activities),
        },
    )


@router.get("/")
def home(request: Request, db: Session = Depends(get_db)):
    counts = count_activities_by_category(db)
    total = sum(counts.values())
    url = _url("/")
    description = (
        "Annuaire des clubs sportifs et des associations d'activités intellectuelles à Toulouse, "
        "classés par discipline et par quartier."
    )
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "metadata": build_page_metadata("Clubs et associations à Toulouse", description, url),
            "json_ld": collection_page_json_ld("Activités à Toulouse", description, url, total),
            "counts": counts,
            "category_pages": CATEGORY_PAGES,
            "total": total,
        },
    )


@router.get("/sport")
def sport(request: Request, db: Session = Depends(get_db)):
    return _render_category(request, db, ActivityCategory.sport)


@router.get("/intellectuel")
def intellectual(request: Request, db: Session = Depends(get_db)):
    return _render_category(request, db, ActivityCategory.intellectual)


@router.get("/activites")
def all_activities(request: Request, db: Session = Depends(get_db)):
    activities = list_activities(db)
    sport_activities, intellectual_activities = split_by_category(activities)
    url = _url("/activites")
    description = "Toutes les activités sportives et intellectuelles référencées à Toulouse."
    return templates.TemplateResponse(
        request,
        "activities.html",
        {
            "metadata": build_page_metadata("Toutes les activités à Toulouse", description, url),
            "json_ld": collection_page_json_ld("Toutes les activités à Toulouse", description, url, len(activities)),
            "total": len(activities),
            "sport_activities": sport_activities,
            "intellectual_activities": intellectual_activities,
        },
    )


@router.get("/quartier/{slug}")
def neighborhood(slug: str, request: Request, db: Session = Depends(get_db)):
    place = find_neighborhood(slug)
    if place is None:
        raise HTTPException(status_code=404, detail="Quartier introuvable")

    activities = list_activities_by_neighborhood(db, place.name)
    sport_activities, intellectual_activities = split_by_category(activities)
    url = _url(f"/quartier/{place.slug}")
    metadata = build_page_metadata(
        f"Activités au {place.name} - Toulouse",
        (
            f"Découvrez toutes les activités sportives et intellectuelles dans le quartier {place.name} "
            "à Toulouse. Clubs, associations et loisirs près de chez vous."
        ),
        url,
        (
            f"activités {place.name}",
            f"sport {place.name} Toulouse",
            f"club {place.name}",
            f"loisirs {place.name}",
            f"association {place.name}",
        ),
    )
    return templates.TemplateResponse(
        request,
        "neighborhood.html",
        {
            "metadata": metadata,
            "json_ld": collection_page_json_ld(
                f"Activités au {place.name}",
                f"Trouvez toutes les activités dans le quartier {place.name} à Toulouse",
                url,
                len(activities),
            ),
            "place": place,
            "total": len(activities),
            "sport_activities": sport_activities,
            "intellectual_activities": intellectual_activities,
            "other_neighborhoods": [item for item in NEIGHBORHOODS if item.slug != place.slug],
        },
    )


@router.get("/ville/{slug}")
def city(slug: str, request: Request, db: Session = Depends(get_db)):
    place = find_city(slug)
    if place is None:
        raise HTTPException(status_code=404, detail="Ville introuvable")

    counts = count_activities_by_category(db)
    url = _url(f"/ville/{place.slug}")
    description = f"Clubs sportifs et associations d'activités intellectuelles autour de {place.name}."
    return templates.TemplateResponse(
        request,
        "city.html",
        {
            "metadata": build_page_metadata(f"Activités à {place.name}", description, url),
            "json_ld": collection_page_json_ld(
                f"Activités à {place.name}", description, url, sum(counts.values())
            ),
            "place": place,
            "counts": counts,
            "category_pages": CATEGORY_PAGES,
        },
    )


@router.get("/activity/{activity_id}/{slug}")
def activity_detail(activity_id: int, slug: str, request: Request, db: Session = Depends(get_db)):
    activity = get_activity(db, activity_id)
    if activity is None:
        raise HTTPException(status_code=404, detail="Activité introuvable")

    canonical_path = activity_path(activity.id, activity.name)
    if slug != activity_slug(activity.id, activity.name):
        return RedirectResponse(canonical_path, status_code=308)

    url = _url(canonical_path)
    description = activity.description or (
        f"{activity.name} : {activity.subcategory or CATEGORY_PAGES[activity.category].label} à Toulouse, "
        f"{activity.address}."
    )
    return templates.TemplateResponse(
        request,
        "activity.html",
        {
            "metadata": build_page_metadata(activity.name, description, url),
            "json_ld": activity_json_ld(activity, url),
            "activity": activity,
            "category_page": CATEGORY_PAGES[activity.category],
        },
    )


@router.get("/faq")
def faq(request: Request):
    url = _url("/faq")
    return templates.TemplateResponse(
        request,
        "faq.html",
        {
            "metadata": build_page_metadata(
                "Questions fréquentes",
                "Comment fonctionne l'annuaire des activités à Toulouse et comment y figurer.",
                url,
            ),
            "json_ld": None,
        },
    )


@router.get("/blog")
def blog(request: Request):
    url = _url("/blog")
    description = "Conseils et sélections pour trouver son club de sport ou son activité intellectuelle à Toulouse."
    return templates.TemplateResponse(
        request,
        "blog.html",
        {
            "metadata": build_page_metadata("Le blog des activités à Toulouse", description, url),
            "json_ld": collection_page_json_ld("Le blog des activités à Toulouse", description, url, len(BLOG_ARTICLES)),
            "articles": BLOG_ARTICLES,
        },
    )


@router.get("/blog/{slug}")
def blog_article(slug: str, request: Request):
    article = find_blog_article(slug)
    if article is None:
        raise HTTPException(status_code=404, detail="Article introuvable")

    return templates.TemplateResponse(
        request,
        "blog_article.html",
        {
            "metadata": build_page_metadata(article.title, article.summary, _url(f"/blog/{article.slug}")),
            "json_ld": None,
            "article": article,
        },
    )
