"""
Pydantic Schemas (Data Transfer Objects)

These schemas define the data flowing between the catalog and the
presentation layer:
- *Fields: form values checked before a save touches the store
- *Summary: condensed view for list pages
- *Detail: full view for a single recipe

Views never receive ORM entities from the catalog service, so a page can
render after its session has been closed.
"""

from pydantic import BaseModel, Field


# ============================================
# Form Input
# ============================================

class RecipeFields(BaseModel):
    """
    Scalar recipe fields as entered on the recipe form.

    Names are not checked here: emptiness is gated by the form and
    uniqueness by the validation service.
    """
    name: str
    summary: str = ""
    serving: int = Field(1, ge=1, description="Number of servings")
    time: int = Field(5, ge=0, description="Total time in minutes")
    instructions: str = ""
    image_data: bytes | None = Field(None, description="Opaque image bytes")


# ============================================
# Read Models
# ============================================

class CategorySummary(BaseModel):
    """Category with the number of recipes filed under it."""
    category_id: int
    name: str
    recipe_count: int


class IngredientSummary(BaseModel):
    """Ingredient with the number of recipe lines that use it."""
    ingredient_id: int
    name: str
    usage_count: int


class RecipeSummary(BaseModel):
    """Condensed recipe view for list pages."""
    recipe_id: int
    name: str
    summary: str
    category_id: int | None
    category_name: str | None
    serving: int
    time: int
    has_image: bool


class RecipeIngredientLine(BaseModel):
    """
    One ingredient line of a recipe.

    ingredient_id is None when the ingredient has been deleted since the
    recipe was last saved.
    """
    order_index: int
    ingredient_id: int | None
    ingredient_name: str
    quantity: str


class RecipeDetail(RecipeSummary):
    """Complete recipe with instructions, image and ingredient lines."""
    instructions: str
    image_data: bytes | None
    ingredients: list[RecipeIngredientLine]
