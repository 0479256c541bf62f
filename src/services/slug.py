import re
import unicodedata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def generate_slug(value: str) -> str:
    """Turn a display name into a URL-safe identifier.

    "Échecs & Jeux" -> "echecs-jeux". Collisions between distinct names are not detected.
    """
    normalized = unicodedata.normalize("NFD", value.lower())
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    return _NON_ALNUM_RE.sub("-", normalized).strip("-")
