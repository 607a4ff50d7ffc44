import pytest

from models import (
    Category,
    CategoryExistsError,
    Ingredient,
    IngredientExistsError,
    Recipe,
    RecipeExistsError,
)
from services.validation_service import ensure_name_available, name_conflict_exists


def test_no_conflict_in_empty_store(store):
    for kind in (Category, Recipe, Ingredient):
        assert not name_conflict_exists(store, kind, "Anything")


def test_conflict_is_exact_and_case_sensitive(store, make_category):
    make_category("Breakfast")

    assert name_conflict_exists(store, Category, "Breakfast")
    assert not name_conflict_exists(store, Category, "breakfast")
    assert not name_conflict_exists(store, Category, "Breakfast ")


def test_names_are_unique_per_kind_only(store, make_category):
    make_category("Dessert")

    assert not name_conflict_exists(store, Recipe, "Dessert")
    assert not name_conflict_exists(store, Ingredient, "Dessert")


def test_own_name_is_not_a_conflict_when_excluded(store, make_ingredient):
    flour = make_ingredient("Flour")
    make_ingredient("Sugar")

    assert not name_conflict_exists(store, Ingredient, "Flour", excluding_id=flour.IngredientId)
    assert name_conflict_exists(store, Ingredient, "Sugar", excluding_id=flour.IngredientId)


@pytest.mark.parametrize("kind, error", [
    (Category, CategoryExistsError),
    (Recipe, RecipeExistsError),
    (Ingredient, IngredientExistsError),
])
def test_ensure_name_available_raises_kind_error(store, kind, error):
    store.insert(kind(Name="Taken"))
    store.commit()

    with pytest.raises(error) as excinfo:
        ensure_name_available(store, kind, "Taken")
    assert excinfo.value.message.endswith("with this name already exists")

    ensure_name_available(store, kind, "Free")
