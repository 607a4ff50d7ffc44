"""
Form Controller - shared add/edit/delete flow for catalog forms.

A form is opened in one of two modes:
- add: empty fields, save() inserts a new entity
- edit: fields loaded from an existing entity, save() mutates it and
  delete() removes it

The presentation layer binds its widgets to the controller's fields,
calls save() or delete(), then closes the form once ``done`` is set or
shows ``error.message`` otherwise.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from models.errors import CatalogError, StorageError, UnknownError
from models.repositories import EntityStore, identity_of
from services.validation_service import ensure_name_available

logger = logging.getLogger(__name__)


class FormMode(Enum):
    ADD = "add"
    EDIT = "edit"


@dataclass
class FormResult:
    """Outcome of a save or delete."""
    success: bool
    entity: Optional[Any] = None
    error: Optional[CatalogError] = None


class FormController:
    """Base controller for a form over one named entity kind."""

    kind: type = None
    kind_label: str = ""

    def __init__(self, store: EntityStore, entity: Optional[Any] = None):
        self.store = store
        self.entity = entity
        self.mode = FormMode.ADD if entity is None else FormMode.EDIT
        self.name: str = "" if entity is None else entity.Name
        self.error: Optional[CatalogError] = None
        self.done = False
        if self.mode is FormMode.ADD:
            self.title = f"Add {self.kind_label}"
        else:
            self.title = f"Edit {entity.Name}"
        self._load(entity)

    @classmethod
    def add(cls, store: EntityStore):
        """Open the form for a new entity."""
        return cls(store)

    @classmethod
    def edit(cls, store: EntityStore, entity: Any):
        """Open the form on an existing entity."""
        if entity is None:
            raise ValueError(f"Cannot edit a missing {cls.kind_label.lower()}")
        return cls(store, entity)

    @property
    def is_editing(self) -> bool:
        return self.mode is FormMode.EDIT

    @property
    def can_save(self) -> bool:
        """Save is offered only once a name has been entered."""
        return bool(self.name)

    # ==========================================
    # Actions
    # ==========================================

    def save(self) -> FormResult:
        """
        Validate, then insert or update, then commit.

        A name conflict or invalid field leaves the store and the bound
        entity untouched. A storage failure rolls the session back and is
        reported as UnknownError.
        """
        self.error = None
        try:
            excluding_id = identity_of(self.entity) if self.is_editing else None
            ensure_name_available(self.store, self.kind, self.name, excluding_id)
            self._check_fields()

            if self.is_editing:
                entity = self._apply(self.entity)
            else:
                entity = self.store.insert(self._build())
            self.store.commit()
        except CatalogError as e:
            logger.warning(f"{self.kind_label} '{self.name}' not saved: {e.message}")
            return self._fail(e)
        except StorageError:
            self.store.rollback()
            return self._fail(UnknownError())

        if not self.is_editing:
            logger.info(f"Created {entity!r}")
        self.entity = entity
        self.done = True
        return FormResult(success=True, entity=entity)

    def delete(self) -> FormResult:
        """Delete the entity bound to an edit form and commit."""
        if not self.is_editing:
            raise ValueError(f"Only an existing {self.kind_label.lower()} can be deleted")

        self.error = None
        try:
            self.store.delete(self.entity)
            self.store.commit()
        except StorageError:
            self.store.rollback()
            return self._fail(UnknownError())

        self.done = True
        return FormResult(success=True, entity=self.entity)

    def _fail(self, error: CatalogError) -> FormResult:
        self.error = error
        return FormResult(success=False, error=error)

    # ==========================================
    # Hooks for concrete forms
    # ==========================================

    def _load(self, entity: Optional[Any]) -> None:
        """Copy extra fields from the entity (or defaults) onto the form."""

    def _check_fields(self) -> None:
        """Raise InvalidFieldError for values that cannot be stored."""

    def _build(self) -> Any:
        """Create a new entity from the form fields."""
        return self.kind(Name=self.name)

    def _apply(self, entity: Any) -> Any:
        """Write the form fields onto an existing entity."""
        return self.store.update(entity, Name=self.name)
