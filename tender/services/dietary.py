"""Dietary exclusion rules and ingredient matching.

Restrictions are expressed as keyword exclusion sets: recipes carry free-text
ingredient lines with no structured nutrition data, so a recipe violates a
restriction when any ingredient line contains one of the restriction's
keywords as a substring. Matching is deliberately loose ("breadcrumbs" is
caught by "bread") and can over-exclude.
"""

import re
from collections.abc import Iterable
from types import MappingProxyType

_MEAT_AND_SEAFOOD = (
    "chicken",
    "beef",
    "pork",
    "shrimp",
    "fish sauce",
    "clams",
    "duck",
    "sausage",
    "bacon",
    "spam",
    "ground beef",
    "pork shoulder",
    "pork belly",
    "steak",
    "sausage meat",
    "chicken breast",
    "chicken thighs",
    "duck legs",
    "duck fat",
)

_DAIRY = (
    "cheese",
    "milk",
    "cream",
    "butter",
    "yogurt",
    "cheddar",
    "mozzarella",
    "parmesan",
    "pecorino",
    "gruyere",
    "feta",
    "paneer",
    "ghee",
    "bechamel",
)

_PORK_PRODUCTS = ("pork", "bacon", "spam", "pork shoulder", "pork belly", "sausage meat")

# Restriction label -> disqualifying ingredient keywords. Loaded once, never mutated.
DIETARY_EXCLUSIONS: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        "gluten-free": frozenset(
            (
                "flour",
                "bread",
                "pasta",
                "spaghetti",
                "macaroni",
                "panko",
                "breadcrumbs",
                "tortillas",
                "tortilla",
                "tostada shells",
                "ramen noodles",
                "phyllo",
                "puff pastry",
                "wontons",
                "gnocchi",
                "rolls",
                "buns",
                "noodles",
            )
        ),
        "dairy-free": frozenset(_DAIRY),
        "vegetarian": frozenset(_MEAT_AND_SEAFOOD),
        "vegan": frozenset(_MEAT_AND_SEAFOOD + ("egg", "egg wash") + _DAIRY + ("honey", "dashi")),
        "keto": frozenset(
            (
                "pasta",
                "spaghetti",
                "macaroni",
                "rice",
                "basmati rice",
                "cooked rice",
                "bread",
                "potatoes",
                "noodles",
                "flour",
                "sugar",
                "tortillas",
                "tortilla",
                "tostada shells",
                "ramen noodles",
                "gnocchi",
                "grits",
                "rolls",
                "buns",
                "beans",
                "refried beans",
            )
        ),
        "halal": frozenset(_PORK_PRODUCTS + ("red wine", "wine", "mirin")),
        "kosher": frozenset(_PORK_PRODUCTS + ("shrimp", "clams")),
    }
)

_NEWLINE = re.compile(r"\r?\n")


def split_ingredients(text: str | None) -> list[str]:
    """Split stored ingredient text into trimmed, non-empty lines.

    Text containing a newline is split on newlines, otherwise on commas.
    """
    if not text:
        return []
    parts = _NEWLINE.split(text) if "\n" in text else text.split(",")
    return [part.strip() for part in parts if part.strip()]


def join_ingredients(ingredients: Iterable[str]) -> str:
    """Serialize an ingredient list for storage, one ingredient per line.

    A lone ingredient containing a comma gets a trailing newline so it is read
    back as one line rather than split on its commas.
    """
    lines = [_NEWLINE.sub(" ", item.strip()) for item in ingredients if item and item.strip()]
    text = "\n".join(lines)
    if len(lines) == 1 and "," in text:
        text += "\n"
    return text


def resolve_exclusions(restrictions: Iterable[str]) -> set[str]:
    """Union of the disqualifying keywords for every known restriction label.

    Unknown labels are ignored.
    """
    excluded: set[str] = set()
    for restriction in restrictions:
        excluded.update(DIETARY_EXCLUSIONS.get(restriction, ()))
    return excluded


def violates_dietary(ingredient_text: str | None, excluded: set[str] | frozenset[str]) -> bool:
    """Check whether any ingredient line contains an excluded keyword."""
    if not excluded:
        return False
    for ingredient in split_ingredients(ingredient_text):
        token = ingredient.lower()
        for keyword in excluded:
            if keyword in token:
                return True
    return False
