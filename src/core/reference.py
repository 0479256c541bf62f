from typing import NamedTuple


class Neighborhood(NamedTuple):
    name: str
    slug: str


class City(NamedTuple):
    name: str
    slug: str


# Main Toulouse neighborhoods. `name` matches Activity.neighborhood values.
NEIGHBORHOODS: tuple[Neighborhood, ...] = (
    Neighborhood("Capitole", "capitole"),
    Neighborhood("Carmes", "carmes"),
    Neighborhood("Saint-Cyprien", "saint-cyprien"),
    Neighborhood("Compans-Caffarelli", "compans-caffarelli"),
    Neighborhood("Borderouge", "borderouge"),
    Neighborhood("Rangueil", "rangueil"),
    Neighborhood("Minimes", "minimes"),
    Neighborhood("Arnaud-Bernard", "arnaud-bernard"),
    Neighborhood("Jolimont", "jolimont"),
    Neighborhood("Empalot", "empalot"),
)

CITIES: tuple[City, ...] = (
    City("Toulouse", "toulouse"),
    City("Paris", "paris"),
    City("Lyon", "lyon"),
    City("Marseille", "marseille"),
    City("Bordeaux", "bordeaux"),
    City("Nantes", "nantes"),
    City("Lille", "lille"),
    City("Nice", "nice"),
    City("Strasbourg", "strasbourg"),
    City("Montpellier", "montpellier"),
    City("Rennes", "rennes"),
    City("Grenoble", "grenoble"),
    City("Reims", "reims"),
    City("Dijon", "dijon"),
    City("Angers", "angers"),
    City("Nîmes", "nimes"),
    City("Clermont-Ferrand", "clermont-ferrand"),
    City("Le Havre", "le-havre"),
    City("Saint-Étienne", "saint-etienne"),
    City("Perpignan", "perpignan"),
)

_NEIGHBORHOODS_BY_SLUG = {item.slug: item for item in NEIGHBORHOODS}
_CITIES_BY_SLUG = {item.slug: item for item in CITIES}


def find_neighborhood(slug: str) -> Neighborhood | None:
    return _NEIGHBORHOODS_BY_SLUG.get(slug)


def find_city(slug: str) -> City | None:
    return _CITIES_BY_SLUG.get(slug)


class BlogArticle(NamedTuple):
    slug: str
    title: str
    summary: str


BLOG_ARTICLES: tuple[BlogArticle, ...] = (
    BlogArticle(
        "top-10-clubs-echecs-toulouse",
        "Top 10 des clubs d'échecs à Toulouse",
        "Les clubs où progresser aux échecs, du débutant au joueur de compétition.",
    ),
    BlogArticle(
        "guide-debutant-arts-martiaux-toulouse",
        "Guide du débutant : les arts martiaux à Toulouse",
        "Judo, aïkido, karaté : comment choisir sa discipline et son club.",
    ),
    BlogArticle(
        "meilleurs-quartiers-sport-toulouse",
        "Les meilleurs quartiers de Toulouse pour faire du sport",
        "Où trouver le plus de clubs et d'équipements sportifs en ville.",
    ),
    BlogArticle(
        "activites-intellectuelles-toulouse",
        "Les activités intellectuelles à Toulouse",
        "Bridge, lecture, langues et débats : un tour des associations toulousaines.",
    ),
)

_BLOG_ARTICLES_BY_SLUG = {item.slug: item for item in BLOG_ARTICLES}


def find_blog_article(slug: str) -> BlogArticle | None:
    return _BLOG_ARTICLES_BY_SLUG.get(slug)
