"""
Map raw provider (or catalog) type tags to a user-facing category.
"""
from typing import Iterable

from domain.models import Category

# Priority cascade, first match wins. Changing the order changes
# classification of multi-tag places.
_CATEGORY_RULES = (
    ({"tourist_attraction"}, Category.LANDMARK),
    ({"museum"}, Category.MUSEUM),
    ({"church", "place_of_worship"}, Category.RELIGIOUS),
    ({"park"}, Category.PARK),
    ({"point_of_interest"}, Category.LANDMARK),
    ({"establishment"}, Category.LANDMARK),
    ({"locality", "political"}, Category.CITY),
)


def classify_types(types: Iterable[str]) -> str:
    """Return the category for a set of raw tags.

    Unknown tag sets fall back to the first tag with every underscore turned
    into a space ("subway_train_station" -> "subway train station"; the web
    client this replaces only swapped the first one), and an empty set to
    "landmark".
    """
    tags = [t for t in (types or []) if t]
    present = set(tags)
    for keys, category in _CATEGORY_RULES:
        if present & keys:
            return category.value
    if tags:
        return tags[0].replace("_", " ")
    return Category.LANDMARK.value
