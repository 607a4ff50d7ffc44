"""
Ingredient Form Controller - add, rename and delete ingredients.

Deleting an ingredient that recipes still use is allowed: their lines
stay on the recipe with no ingredient attached, and are dropped the next
time that recipe is saved.
"""

from controllers.form_controller import FormController
from models import Ingredient


class IngredientForm(FormController):
    """Controller for the ingredient form."""

    kind = Ingredient
    kind_label = "Ingredient"

    def usage_count(self) -> int:
        """How many recipe lines reference the bound ingredient."""
        if not self.is_editing:
            return 0
        return len(self.store.recipe_ingredients_for(self.entity))
