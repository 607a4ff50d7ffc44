"""
Catalog Service - read-side access for browsing the catalog.

Turns entities into pydantic summaries so views can render lists and
details without holding on to ORM objects. This service is pure Python
with no Streamlit dependencies.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from models import Category, Ingredient, Recipe, RecipeIngredient
from models.repositories import EntityStore
from models.schemas import (
    CategorySummary,
    IngredientSummary,
    RecipeDetail,
    RecipeIngredientLine,
    RecipeSummary,
)

MISSING_INGREDIENT_NAME = "(deleted ingredient)"


class CatalogService:
    """Service for listing and formatting catalog data."""

    def __init__(self, db: Session):
        self.db = db
        self.store = EntityStore(db)

    def list_categories(self) -> list[CategorySummary]:
        """All categories with the number of recipes in each."""
        counts = dict(self.db.execute(
            select(Recipe.CategoryId, func.count(Recipe.RecipeId))
            .where(Recipe.CategoryId.is_not(None))
            .group_by(Recipe.CategoryId)
        ).all())
        return [
            CategorySummary(
                category_id=c.CategoryId,
                name=c.Name,
                recipe_count=counts.get(c.CategoryId, 0),
            )
            for c in self.store.fetch_all(Category)
        ]

    def list_ingredients(self) -> list[IngredientSummary]:
        """All ingredients with the number of recipe lines using each."""
        counts = dict(self.db.execute(
            select(RecipeIngredient.IngredientId, func.count(RecipeIngredient.RecipeIngredientId))
            .where(RecipeIngredient.IngredientId.is_not(None))
            .group_by(RecipeIngredient.IngredientId)
        ).all())
        return [
            IngredientSummary(
                ingredient_id=i.IngredientId,
                name=i.Name,
                usage_count=counts.get(i.IngredientId, 0),
            )
            for i in self.store.fetch_all(Ingredient)
        ]

    def list_recipes(self, category_id: Optional[int] = None) -> list[RecipeSummary]:
        """
        Recipes in insertion order.

        Args:
            category_id: only recipes filed under this category
        """
        query = select(Recipe).options(joinedload(Recipe.category))
        if category_id is not None:
            query = query.where(Recipe.CategoryId == category_id)
        recipes = self.db.scalars(query.order_by(Recipe.RecipeId)).all()
        return [self._summarize(r) for r in recipes]

    def get_recipe_detail(self, recipe_id: int) -> Optional[RecipeDetail]:
        """Full recipe with ordered ingredient lines, or None if it does not exist."""
        recipe = self.db.scalars(
            select(Recipe)
            .options(
                joinedload(Recipe.category),
                joinedload(Recipe.ingredients).joinedload(RecipeIngredient.ingredient),
            )
            .where(Recipe.RecipeId == recipe_id)
        ).unique().first()
        if not recipe:
            return None

        lines = [
            RecipeIngredientLine(
                order_index=ri.OrderIndex,
                ingredient_id=ri.IngredientId,
                ingredient_name=ri.ingredient.Name if ri.ingredient else MISSING_INGREDIENT_NAME,
                quantity=ri.Quantity,
            )
            for ri in sorted(recipe.ingredients, key=lambda x: x.OrderIndex)
        ]

        return RecipeDetail(
            **self._summarize(recipe).model_dump(),
            instructions=recipe.Instructions,
            image_data=recipe.ImageData,
            ingredients=lines,
        )

    def _summarize(self, recipe: Recipe) -> RecipeSummary:
        return RecipeSummary(
            recipe_id=recipe.RecipeId,
            name=recipe.Name,
            summary=recipe.Summary or "",
            category_id=recipe.CategoryId,
            category_name=recipe.category.Name if recipe.category else None,
            serving=recipe.Serving,
            time=recipe.Time,
            has_image=recipe.ImageData is not None,
        )
