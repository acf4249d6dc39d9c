import pytest

from app.utils.slug import create_slug

TITLES = [
    "Sample Hotel",
    "Duplicate Hotel",
    "  Hôtel  du Lac & Spa! ",
    "Sea--View___Apartments",
    "ÜBER Loft 42",
    "---",
]


def test_create_slug_simple():
    assert create_slug("Sample Hotel") == "sample-hotel"


def test_create_slug_transliterates_and_collapses():
    assert create_slug("  Hôtel  du Lac & Spa! ") == "hotel-du-lac-spa"
    assert create_slug("ÜBER Loft 42") == "uber-loft-42"


def test_create_slug_only_punctuation():
    assert create_slug("---") == ""


@pytest.mark.parametrize("title", TITLES)
def test_create_slug_is_deterministic(title):
    assert create_slug(title) == create_slug(title)


@pytest.mark.parametrize("title", TITLES)
def test_create_slug_is_idempotent(title):
    slug = create_slug(title)
    assert create_slug(slug) == slug
