"""
Models Package - Database Entities, Errors and Schemas
"""

from models.entities import (
    Category,
    Recipe,
    RecipeIngredient,
    Ingredient,
)
from models.errors import (
    CatalogError,
    NameConflictError,
    CategoryExistsError,
    RecipeExistsError,
    IngredientExistsError,
    InvalidFieldError,
    UnknownError,
    StorageError,
)

__all__ = [
    # Entities
    "Category",
    "Recipe",
    "RecipeIngredient",
    "Ingredient",
    # Errors
    "CatalogError",
    "NameConflictError",
    "CategoryExistsError",
    "RecipeExistsError",
    "IngredientExistsError",
    "InvalidFieldError",
    "UnknownError",
    "StorageError",
]
