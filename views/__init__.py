"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView
from views.recipes_view import RecipesView
from views.categories_view import CategoriesView
from views.ingredients_view import IngredientsView

__all__ = ["HomeView", "RecipesView", "CategoriesView", "IngredientsView"]
