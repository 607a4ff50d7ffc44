"""
Catalog errors.

Every error carries a user-facing message that the presentation layer
can show as-is. StorageError is the exception: it wraps database
failures and is translated to UnknownError before reaching the user.
"""


class CatalogError(Exception):
    """Base class for errors surfaced by the catalog."""

    message = "An unknown error occurred"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NameConflictError(CatalogError):
    """Another entity of the same kind already uses the name."""


class CategoryExistsError(NameConflictError):
    message = "A category with this name already exists"


class RecipeExistsError(NameConflictError):
    message = "A recipe with this name already exists"


class IngredientExistsError(NameConflictError):
    message = "An ingredient with this name already exists"


class InvalidFieldError(CatalogError):
    """A form field holds a value the catalog cannot store."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class UnknownError(CatalogError):
    """Catch-all for failures that are not classified above."""


class StorageError(Exception):
    """The entity store could not read or write the database."""
