"""
Category Form Controller - add, rename and delete categories.

Deleting a category keeps its recipes; they are left without a category.
"""

from controllers.form_controller import FormController
from models import Category, Recipe


class CategoryForm(FormController):
    """Controller for the category form."""

    kind = Category
    kind_label = "Category"

    def recipes(self) -> list[Recipe]:
        """Recipes currently filed under the bound category."""
        if not self.is_editing:
            return []
        return self.store.recipes_for_category(self.entity)
