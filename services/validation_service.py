"""
Validation Service - name uniqueness checks for catalog saves.

This is a pure decision function: it reads from the entity store and
never changes it. Form controllers call it once per save, before any
mutation (validate-then-mutate).

The check-then-act sequence is only safe because the catalog has a
single writer: one user, one process, one thread of control. Nothing can
insert a conflicting name between the check and the write. With more
than one concurrent writer, the unique indexes on the Name columns would
have to become the primary check instead.
"""

from typing import Optional

from models.entities import Category, Ingredient, Recipe
from models.errors import (
    CategoryExistsError,
    IngredientExistsError,
    NameConflictError,
    RecipeExistsError,
)
from models.repositories import EntityStore, identity_of

# Error raised for a name conflict, per named entity kind
CONFLICT_ERRORS: dict[type, type[NameConflictError]] = {
    Category: CategoryExistsError,
    Recipe: RecipeExistsError,
    Ingredient: IngredientExistsError,
}


def name_conflict_exists(
    store: EntityStore,
    kind: type,
    name: str,
    excluding_id: Optional[int] = None
) -> bool:
    """
    Check whether another entity of ``kind`` already uses ``name``.

    Matching is exact and case-sensitive. When ``excluding_id`` is given
    (edit mode), the entity with that id does not count as a conflict, so
    saving an entity under its own current name is allowed.
    """
    matches = store.fetch_by_name(kind, name)
    if excluding_id is None:
        return len(matches) > 0
    return any(identity_of(match) != excluding_id for match in matches)


def ensure_name_available(
    store: EntityStore,
    kind: type,
    name: str,
    excluding_id: Optional[int] = None
) -> None:
    """Raise the kind's ``<Kind>ExistsError`` if the name is taken."""
    if name_conflict_exists(store, kind, name, excluding_id):
        raise CONFLICT_ERRORS[kind]()
