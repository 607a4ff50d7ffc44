"""
Controllers layer - add/edit/delete flows for the catalog forms.
"""

from controllers.form_controller import FormController, FormMode, FormResult
from controllers.category_form import CategoryForm
from controllers.ingredient_form import IngredientForm
from controllers.recipe_form import IngredientLine, RecipeForm

__all__ = [
    "FormController",
    "FormMode",
    "FormResult",
    "CategoryForm",
    "IngredientForm",
    "IngredientLine",
    "RecipeForm",
]
