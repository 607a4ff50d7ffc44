"""
SQLAlchemy ORM Entity Models

These models represent the catalog tables and the references between them.

Database Design Rationale:
- One table per entity kind, linked by integer foreign keys
- Unique index on every Name column (one name per kind across the store)
- Category -> Recipe has no stored reverse list; the recipes of a
  category are always queried from Recipe.CategoryId
- OrderIndex preserves the order of a recipe's ingredient lines

Table Relationships:
    Category (0..1) <── (*) Recipe (1) ──> (*) RecipeIngredient ──> (0..1) Ingredient
"""

from sqlalchemy import Column, Integer, String, ForeignKey, Text, LargeBinary
from sqlalchemy.orm import relationship

from config.database import Base


class Category(Base):
    """
    A named group of recipes (e.g. "Breakfast").

    Deleting a category never deletes its recipes; they simply lose
    their category (see EntityStore.delete).
    """
    __tablename__ = "Categories"

    CategoryId = Column(Integer, primary_key=True, autoincrement=True)
    Name = Column(String(200), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Category {self.CategoryId} {self.Name!r}>"


class Recipe(Base):
    """
    Recipe metadata and the central entity in the domain model.

    A recipe belongs to at most one category and owns an ordered list
    of ingredient lines, which are deleted together with the recipe.
    """
    __tablename__ = "Recipes"

    RecipeId = Column(Integer, primary_key=True, autoincrement=True)
    Name = Column(String(200), nullable=False, unique=True)
    Summary = Column(Text, nullable=False, default="")
    CategoryId = Column(
        Integer,
        ForeignKey("Categories.CategoryId", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    Serving = Column(Integer, nullable=False, default=1)
    Time = Column(Integer, nullable=False, default=5)  # Minutes
    Instructions = Column(Text, nullable=False, default="")
    ImageData = Column(LargeBinary, nullable=True)  # Opaque image bytes

    category = relationship("Category")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.OrderIndex"
    )

    def __repr__(self) -> str:
        return f"<Recipe {self.RecipeId} {self.Name!r}>"


class Ingredient(Base):
    """
    Normalized ingredient names.

    Ingredients are shared by every recipe that lists them, so the same
    "Flour" row is referenced from many RecipeIngredient lines.
    """
    __tablename__ = "Ingredients"

    IngredientId = Column(Integer, primary_key=True, autoincrement=True)
    Name = Column(String(200), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Ingredient {self.IngredientId} {self.Name!r}>"


class RecipeIngredient(Base):
    """
    Junction table linking recipes to ingredients with quantities.

    - Quantity is free-form text ("2 cups", "a pinch")
    - IngredientId becomes NULL when the ingredient itself is deleted;
      the line stays on the recipe until the recipe is saved again
    """
    __tablename__ = "RecipeIngredients"

    RecipeIngredientId = Column(Integer, primary_key=True, autoincrement=True)
    RecipeId = Column(
        Integer,
        ForeignKey("Recipes.RecipeId", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    IngredientId = Column(
        Integer,
        ForeignKey("Ingredients.IngredientId", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    Quantity = Column(String(100), nullable=False, default="")
    OrderIndex = Column(Integer, nullable=False, default=0)

    recipe = relationship("Recipe", back_populates="ingredients")
    ingredient = relationship("Ingredient")

    def __repr__(self) -> str:
        return f"<RecipeIngredient {self.RecipeIngredientId} {self.Quantity!r}>"
