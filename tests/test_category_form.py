import pytest
from sqlalchemy.exc import OperationalError

from controllers import CategoryForm, FormMode
from models import Category, CategoryExistsError, Recipe, UnknownError


def test_add_form_defaults(store):
    form = CategoryForm.add(store)

    assert form.mode is FormMode.ADD
    assert form.title == "Add Category"
    assert form.name == ""
    assert not form.can_save
    assert form.recipes() == []


def test_edit_form_loads_entity(store, make_category):
    breakfast = make_category("Breakfast")

    form = CategoryForm.edit(store, breakfast)

    assert form.is_editing
    assert form.title == "Edit Breakfast"
    assert form.name == "Breakfast"
    assert form.can_save


def test_edit_requires_an_entity(store):
    with pytest.raises(ValueError):
        CategoryForm.edit(store, None)


def test_save_creates_category(store):
    form = CategoryForm.add(store)
    form.name = "Breakfast"

    result = form.save()

    assert result.success
    assert form.done
    assert form.error is None
    assert result.entity.CategoryId is not None
    assert [c.Name for c in store.fetch_all(Category)] == ["Breakfast"]


def test_duplicate_name_is_rejected(store, make_category):
    make_category("Breakfast")

    form = CategoryForm.add(store)
    form.name = "Breakfast"
    result = form.save()

    assert not result.success
    assert isinstance(result.error, CategoryExistsError)
    assert form.error.message == "A category with this name already exists"
    assert not form.done
    assert store.count(Category) == 1


def test_name_differing_only_in_case_is_allowed(store, make_category):
    make_category("Breakfast")

    form = CategoryForm.add(store)
    form.name = "breakfast"

    assert form.save().success
    assert store.count(Category) == 2


def test_rename_to_own_name_succeeds(store, make_category):
    breakfast = make_category("Breakfast")

    form = CategoryForm.edit(store, breakfast)
    result = form.save()

    assert result.success
    assert store.get(Category, breakfast.CategoryId).Name == "Breakfast"


def test_rename_to_other_name_fails_and_keeps_name(store, make_category):
    make_category("Breakfast")
    lunch = make_category("Lunch")

    form = CategoryForm.edit(store, lunch)
    form.name = "Breakfast"
    result = form.save()

    assert isinstance(result.error, CategoryExistsError)
    assert store.get(Category, lunch.CategoryId).Name == "Lunch"


def test_delete_keeps_recipes(store, make_category, make_recipe):
    breakfast = make_category("Breakfast")
    make_recipe("Pancakes", category=breakfast)
    make_recipe("Toast", category=breakfast)

    form = CategoryForm.edit(store, breakfast)
    assert [r.Name for r in form.recipes()] == ["Pancakes", "Toast"]

    result = form.delete()

    assert result.success
    assert store.count(Category) == 0
    assert [r.Name for r in store.fetch_all(Recipe)] == ["Pancakes", "Toast"]
    assert all(r.category is None for r in store.fetch_all(Recipe))


def test_delete_in_add_mode_is_an_error(store):
    with pytest.raises(ValueError):
        CategoryForm.add(store).delete()


def test_commit_failure_reports_unknown_error_and_rolls_back(store, make_category, monkeypatch):
    lunch = make_category("Lunch")

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(store.db, "commit", failing_commit)
    form = CategoryForm.edit(store, lunch)
    form.name = "Dinner"
    result = form.save()

    assert not result.success
    assert isinstance(result.error, UnknownError)
    assert result.error.message == "An unknown error occurred"
    assert not form.done
    assert lunch.Name == "Lunch"


def test_delete_commit_failure_reports_unknown_error_and_rolls_back(
    store, make_category, make_recipe, monkeypatch
):
    breakfast = make_category("Breakfast")
    pancakes = make_recipe("Pancakes", category=breakfast)

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(store.db, "commit", failing_commit)
    form = CategoryForm.edit(store, breakfast)
    result = form.delete()

    assert not result.success
    assert isinstance(result.error, UnknownError)
    assert not form.done

    monkeypatch.undo()
    assert store.count(Category) == 1
    assert pancakes.category is breakfast
    assert store.recipes_for_category(breakfast) == [pancakes]


def test_deleting_unsaved_category_reports_unknown_error(store):
    form = CategoryForm.edit(store, Category(Name="Brunch"))

    result = form.delete()

    assert isinstance(result.error, UnknownError)
    assert not form.done
    assert store.count(Category) == 0
