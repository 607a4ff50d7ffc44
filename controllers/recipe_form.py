"""
Recipe Form Controller - add, edit and delete recipes.

Besides the scalar fields, the recipe form holds:
- the category the recipe is filed under (or None)
- an ordered list of ingredient lines, one per ingredient

On save the recipe's RecipeIngredient rows are rebuilt in lockstep with
the lines: rows for ingredients that are no longer listed are deleted,
rows for newly listed ingredients are created, and the remaining rows
get their quantity and position updated.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from controllers.form_controller import FormController
from models import Category, Ingredient, InvalidFieldError, Recipe, RecipeIngredient
from models.schemas import RecipeFields


@dataclass
class IngredientLine:
    """An ingredient and its free-form quantity as shown on the form."""
    ingredient: Ingredient
    quantity: str = ""


def _same_ingredient(a: Ingredient, b: Ingredient) -> bool:
    if a is b:
        return True
    return a.IngredientId is not None and a.IngredientId == b.IngredientId


class RecipeForm(FormController):
    """Controller for the recipe form."""

    kind = Recipe
    kind_label = "Recipe"

    def _load(self, recipe: Optional[Recipe]):
        self._fields: Optional[RecipeFields] = None
        if recipe is None:
            self.summary = ""
            self.category: Optional[Category] = None
            self.serving = 1
            self.time = 5
            self.instructions = ""
            self.image_data: Optional[bytes] = None
            self.ingredients: list[IngredientLine] = []
            return

        self.summary = recipe.Summary or ""
        self.category = recipe.category
        self.serving = recipe.Serving
        self.time = recipe.Time
        self.instructions = recipe.Instructions or ""
        self.image_data = recipe.ImageData
        # Lines whose ingredient was deleted cannot be edited and are not carried over
        self.ingredients = [
            IngredientLine(ingredient=ri.ingredient, quantity=ri.Quantity or "")
            for ri in recipe.ingredients
            if ri.ingredient is not None
        ]

    # ==========================================
    # Ingredient Lines
    # ==========================================

    def find_line(self, ingredient: Ingredient) -> Optional[IngredientLine]:
        for line in self.ingredients:
            if _same_ingredient(line.ingredient, ingredient):
                return line
        return None

    def add_ingredient(self, ingredient: Ingredient, quantity: str = "") -> IngredientLine:
        """
        Append an ingredient line.

        An ingredient appears at most once; adding it again only replaces
        the quantity of the existing line.
        """
        line = self.find_line(ingredient)
        if line:
            line.quantity = quantity
            return line
        line = IngredientLine(ingredient=ingredient, quantity=quantity)
        self.ingredients.append(line)
        return line

    def remove_ingredient(self, ingredient: Ingredient) -> bool:
        """Remove an ingredient's line. Returns False if it was not listed."""
        line = self.find_line(ingredient)
        if not line:
            return False
        self.ingredients.remove(line)
        return True

    def set_quantity(self, ingredient: Ingredient, quantity: str):
        line = self.find_line(ingredient)
        if not line:
            raise ValueError(f"{ingredient.Name} is not part of this recipe")
        line.quantity = quantity

    def move_ingredient(self, ingredient: Ingredient, position: int):
        """Move an ingredient's line to a new position (clamped to the list)."""
        line = self.find_line(ingredient)
        if not line:
            raise ValueError(f"{ingredient.Name} is not part of this recipe")
        self.ingredients.remove(line)
        position = max(0, min(position, len(self.ingredients)))
        self.ingredients.insert(position, line)

    def available_ingredients(self) -> list[Ingredient]:
        """Stored ingredients that are not listed on the form yet."""
        return [
            i for i in self.store.fetch_all(Ingredient)
            if self.find_line(i) is None
        ]

    # ==========================================
    # Save Hooks
    # ==========================================

    def _check_fields(self):
        try:
            self._fields = RecipeFields(
                name=self.name,
                summary=self.summary,
                serving=self.serving,
                time=self.time,
                instructions=self.instructions,
                image_data=self.image_data,
            )
        except ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "recipe"
            raise InvalidFieldError(field, f"{field.capitalize()}: {first['msg']}") from e

    def _build(self) -> Recipe:
        fields = self._fields
        recipe = Recipe(
            Name=fields.name,
            Summary=fields.summary,
            Serving=fields.serving,
            Time=fields.time,
            Instructions=fields.instructions,
            ImageData=fields.image_data,
        )
        recipe.category = self.category
        self._sync_lines(recipe)
        return recipe

    def _apply(self, recipe: Recipe) -> Recipe:
        fields = self._fields
        self.store.update(
            recipe,
            Name=fields.name,
            Summary=fields.summary,
            category=self.category,
            Serving=fields.serving,
            Time=fields.time,
            Instructions=fields.instructions,
            ImageData=fields.image_data,
        )
        self._sync_lines(recipe)
        return recipe

    def _sync_lines(self, recipe: Recipe):
        """Make recipe.ingredients mirror the form's lines, reusing rows where possible."""
        existing = {
            ri.IngredientId: ri
            for ri in recipe.ingredients
            if ri.IngredientId is not None
        }
        rows = []
        for index, line in enumerate(self.ingredients):
            row = None
            if line.ingredient.IngredientId is not None:
                row = existing.pop(line.ingredient.IngredientId, None)
            if row is None:
                row = RecipeIngredient(ingredient=line.ingredient)
            row.Quantity = line.quantity
            row.OrderIndex = index
            rows.append(row)
        # Rows left out of the new list are orphans and get deleted on flush
        recipe.ingredients = rows
