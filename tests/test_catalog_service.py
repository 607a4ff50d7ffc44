from controllers import IngredientForm
from services.catalog_service import MISSING_INGREDIENT_NAME, CatalogService


def test_list_categories_with_recipe_counts(db, make_category, make_recipe):
    breakfast = make_category("Breakfast")
    make_category("Dessert")
    make_recipe("Pancakes", category=breakfast)
    make_recipe("Toast", category=breakfast)
    make_recipe("Soup")

    summaries = CatalogService(db).list_categories()

    assert [(s.name, s.recipe_count) for s in summaries] == [("Breakfast", 2), ("Dessert", 0)]


def test_list_ingredients_with_usage_counts(db, make_ingredient, make_recipe):
    flour = make_ingredient("Flour")
    make_ingredient("Saffron")
    make_recipe("Pancakes", ingredients=[(flour, "2 cups")])
    make_recipe("Bread", ingredients=[(flour, "500 g")])

    summaries = CatalogService(db).list_ingredients()

    assert [(s.name, s.usage_count) for s in summaries] == [("Flour", 2), ("Saffron", 0)]


def test_list_recipes_filters_by_category(db, make_category, make_recipe):
    breakfast = make_category("Breakfast")
    make_recipe("Pancakes", category=breakfast, image_data=b"img")
    make_recipe("Soup")

    catalog = CatalogService(db)
    everything = catalog.list_recipes()
    filtered = catalog.list_recipes(breakfast.CategoryId)

    assert [r.name for r in everything] == ["Pancakes", "Soup"]
    assert [(r.name, r.category_name, r.has_image) for r in filtered] == [("Pancakes", "Breakfast", True)]
    assert everything[1].category_name is None
    assert not everything[1].has_image


def test_recipe_detail_keeps_deleted_ingredient_lines(store, db, make_ingredient, make_recipe):
    flour = make_ingredient("Flour")
    eggs = make_ingredient("Eggs")
    pancakes = make_recipe(
        "Pancakes",
        ingredients=[(flour, "2 cups"), (eggs, "2")],
        instructions="Mix and fry.",
    )
    IngredientForm.edit(store, flour).delete()

    detail = CatalogService(db).get_recipe_detail(pancakes.RecipeId)

    assert detail.name == "Pancakes"
    assert detail.instructions == "Mix and fry."
    assert [(line.ingredient_name, line.quantity, line.ingredient_id) for line in detail.ingredients] == [
        (MISSING_INGREDIENT_NAME, "2 cups", None),
        ("Eggs", "2", eggs.IngredientId),
    ]


def test_recipe_detail_for_unknown_id(db):
    assert CatalogService(db).get_recipe_detail(12345) is None
