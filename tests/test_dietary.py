"""Tests for dietary exclusion rules and ingredient text handling."""

import pytest

from tender.models.enums import DietaryRestriction
from tender.services.dietary import (
    DIETARY_EXCLUSIONS,
    join_ingredients,
    resolve_exclusions,
    split_ingredients,
    violates_dietary,
)


def test_every_restriction_label_has_exclusions():
    assert set(DIETARY_EXCLUSIONS) == {label.value for label in DietaryRestriction}


def test_exclusion_table_is_read_only():
    with pytest.raises(TypeError):
        DIETARY_EXCLUSIONS["paleo"] = frozenset({"grain"})  # type: ignore[index]


def test_resolve_exclusions_empty():
    assert resolve_exclusions([]) == set()


def test_resolve_exclusions_is_union():
    combined = resolve_exclusions(["vegetarian", "gluten-free"])
    assert combined == DIETARY_EXCLUSIONS["vegetarian"] | DIETARY_EXCLUSIONS["gluten-free"]


def test_resolve_exclusions_ignores_unknown_labels():
    assert resolve_exclusions(["paleo", "keto"]) == set(DIETARY_EXCLUSIONS["keto"])


def test_resolve_exclusions_returns_fresh_set():
    excluded = resolve_exclusions(["halal"])
    excluded.add("water")
    assert "water" not in DIETARY_EXCLUSIONS["halal"]


def test_vegan_covers_vegetarian_and_dairy():
    vegan = DIETARY_EXCLUSIONS["vegan"]
    assert DIETARY_EXCLUSIONS["vegetarian"] <= vegan
    assert DIETARY_EXCLUSIONS["dairy-free"] <= vegan
    assert {"egg", "honey", "dashi"} <= vegan


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        (None, []),
        ("eggs, flour ,  milk", ["eggs", "flour", "milk"]),
        ("2 eggs\n1 cup flour, sifted\r\n\nmilk", ["2 eggs", "1 cup flour, sifted", "milk"]),
        ("salt,,pepper,", ["salt", "pepper"]),
    ],
)
def test_split_ingredients(text, expected):
    assert split_ingredients(text) == expected


def test_join_ingredients_one_per_line():
    assert join_ingredients(["2 eggs", " flour ", "", "milk"]) == "2 eggs\nflour\nmilk"


def test_join_ingredients_keeps_commas_inside_lines():
    stored = join_ingredients(["1 cup flour, sifted", "salt"])
    assert split_ingredients(stored) == ["1 cup flour, sifted", "salt"]


def test_join_single_ingredient_with_comma():
    stored = join_ingredients(["tomatoes, diced"])
    assert split_ingredients(stored) == ["tomatoes, diced"]


def test_violates_dietary_no_exclusions():
    assert violates_dietary("500g beef strips", set()) is False


def test_violates_dietary_case_insensitive():
    assert violates_dietary("500g BEEF strips,1 bell pepper", {"beef"}) is True


def test_violates_dietary_substring_match():
    # Loose matching: "bread" also catches breadcrumbs
    assert violates_dietary("1/2 cup breadcrumbs", {"bread"}) is True
    assert violates_dietary("2 eggs", {"egg"}) is True


def test_violates_dietary_clean_recipe():
    caesar = "2 romaine hearts,50g parmesan,1 cup croutons,1/3 cup caesar dressing,1 lemon"
    assert violates_dietary(caesar, resolve_exclusions(["vegetarian"])) is False
    assert violates_dietary(caesar, resolve_exclusions(["dairy-free"])) is True


def test_violates_dietary_empty_ingredients():
    assert violates_dietary("", resolve_exclusions(["vegan"])) is False
