import pytest

from src.services.slug import generate_slug


def test_generate_slug_strips_accents_and_symbols() -> None:
    assert generate_slug("Échecs & Jeux") == "echecs-jeux"


def test_generate_slug_collapses_whitespace_and_trims() -> None:
    assert generate_slug("  multiple   spaces ") == "multiple-spaces"


def test_generate_slug_handles_punctuation_runs() -> None:
    assert generate_slug("--Club d'Aïkido (Saint-Cyprien)!!") == "club-d-aikido-saint-cyprien"


def test_generate_slug_keeps_digits() -> None:
    assert generate_slug("Top 10 Clubs") == "top-10-clubs"


def test_generate_slug_of_only_symbols_is_empty() -> None:
    assert generate_slug(" & / ") == ""


@pytest.mark.parametrize(
    "value",
    [
        "Échecs & Jeux",
        "  multiple   spaces ",
        "Arts martiaux",
        "Saint-Étienne",
        "Ça va, ça vient",
        "Œuvre ß straße",
        "",
        "already-a-slug",
    ],
)
def test_generate_slug_is_idempotent(value: str) -> None:
    once = generate_slug(value)
    assert generate_slug(once) == once
