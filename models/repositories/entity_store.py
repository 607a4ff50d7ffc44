"""
Entity Store - Data access for the four catalog entity kinds.

This repository is the only place that writes catalog rows. It keeps the
references between kinds consistent when rows are deleted:

- Recipe     -> its RecipeIngredient lines are deleted with it
- Category   -> its recipes survive with no category
- Ingredient -> lines that used it survive with no ingredient

Name uniqueness is NOT checked here; callers run the validation service
first (see services.validation_service). The unique indexes on the Name
columns are the last line of defence and surface as StorageError.
"""

import logging
from contextlib import contextmanager
from typing import Optional, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.entities import Category, Ingredient, Recipe, RecipeIngredient
from models.errors import StorageError

logger = logging.getLogger(__name__)

Entity = TypeVar("Entity", Category, Recipe, RecipeIngredient, Ingredient)


def primary_key_of(kind: type) -> str:
    """Attribute name of a kind's primary key column (e.g. 'RecipeId')."""
    return inspect(kind).primary_key[0].key


def identity_of(entity) -> Optional[int]:
    """Primary key value of an entity, None until it has been flushed."""
    return getattr(entity, primary_key_of(type(entity)))


class EntityStore:
    """Repository for catalog database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    @contextmanager
    def _storage_errors(self, action: str):
        """Translate SQLAlchemy failures into StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Storage error while trying to {action}: {e}")
            raise StorageError(f"Could not {action}") from e

    def _flush(self):
        with self._storage_errors("flush pending changes"):
            self.db.flush()

    # ==========================================
    # Writes
    # ==========================================

    def insert(self, entity: Entity) -> Entity:
        """
        Add a new row and flush it so its id is assigned.

        Raises:
            StorageError: the database rejected the row (e.g. a duplicate name
                slipped past validation)
        """
        self.db.add(entity)
        with self._storage_errors(f"insert {type(entity).__name__}"):
            self.db.flush()
        return entity

    def update(self, entity: Entity, **fields) -> Entity:
        """
        Set fields on an existing entity in place.

        Changing a recipe's ``category`` needs no extra bookkeeping: the
        recipes of a category are always derived from Recipe.CategoryId.

        Raises:
            ValueError: a field is unknown or is the primary key
        """
        mapper = inspect(type(entity))
        pk = primary_key_of(type(entity))
        for name, value in fields.items():
            if name == pk or name not in mapper.attrs:
                raise ValueError(f"{type(entity).__name__} has no updatable field '{name}'")
            setattr(entity, name, value)
        return entity

    def delete(self, entity: Entity) -> None:
        """Delete a row, keeping references from other kinds consistent."""
        if isinstance(entity, Recipe):
            for line in list(entity.ingredients):
                self.db.delete(line)
        elif isinstance(entity, Category):
            for recipe in self.recipes_for_category(entity):
                recipe.category = None
        elif isinstance(entity, Ingredient):
            for line in self.recipe_ingredients_for(entity):
                line.ingredient = None
        elif isinstance(entity, RecipeIngredient):
            if entity.recipe is not None and entity in entity.recipe.ingredients:
                entity.recipe.ingredients.remove(entity)

        with self._storage_errors(f"delete {type(entity).__name__}"):
            self.db.delete(entity)
        logger.info(f"Deleted {entity!r}")

    def commit(self) -> None:
        """
        Write pending changes to the database.

        On failure the in-memory objects may still hold the attempted
        changes; call rollback() to discard them.
        """
        with self._storage_errors("commit changes"):
            self.db.commit()

    def rollback(self) -> None:
        """Discard pending changes and reload entities from the database."""
        self.db.rollback()

    # ==========================================
    # Reads
    # ==========================================

    def get(self, kind: type[Entity], entity_id: int) -> Optional[Entity]:
        """Get one entity by primary key."""
        with self._storage_errors(f"load {kind.__name__}"):
            return self.db.get(kind, entity_id)

    def fetch_all(self, kind: type[Entity]) -> list[Entity]:
        """All entities of a kind in insertion order."""
        pk = getattr(kind, primary_key_of(kind))
        with self._storage_errors(f"list {kind.__name__}"):
            return list(self.db.scalars(select(kind).order_by(pk)).all())

    def fetch_by_name(self, kind: type[Entity], name: str) -> list[Entity]:
        """All entities of a kind whose name matches exactly (case-sensitive)."""
        if not hasattr(kind, "Name"):
            raise ValueError(f"{kind.__name__} has no name")
        pk = getattr(kind, primary_key_of(kind))
        with self._storage_errors(f"find {kind.__name__} by name"):
            return list(self.db.scalars(
                select(kind).where(kind.Name == name).order_by(pk)
            ).all())

    def count(self, kind: type[Entity]) -> int:
        """Number of stored rows of a kind."""
        self._flush()
        with self._storage_errors(f"count {kind.__name__}"):
            return self.db.scalar(select(func.count()).select_from(kind))

    def recipes_for_category(self, category: Category) -> list[Recipe]:
        """The recipes that currently reference a category, in insertion order."""
        if category.CategoryId is None:
            return []
        self._flush()
        with self._storage_errors("list recipes for category"):
            return list(self.db.scalars(
                select(Recipe)
                .where(Recipe.CategoryId == category.CategoryId)
                .order_by(Recipe.RecipeId)
            ).all())

    def recipe_ingredients_for(self, ingredient: Ingredient) -> list[RecipeIngredient]:
        """The recipe lines that currently reference an ingredient."""
        if ingredient.IngredientId is None:
            return []
        self._flush()
        with self._storage_errors("list recipe lines for ingredient"):
            return list(self.db.scalars(
                select(RecipeIngredient)
                .where(RecipeIngredient.IngredientId == ingredient.IngredientId)
                .order_by(RecipeIngredient.RecipeIngredientId)
            ).all())
