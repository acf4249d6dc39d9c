from slugify import slugify


def create_slug(title: str) -> str:
    """
    Turn a hotel title into a URL-safe slug.

    "Hôtel  du Lac & Spa!" -> "hotel-du-lac-spa"
    """
    return slugify(title, lowercase=True)
