"""
Ingredients View - UI for adding, renaming and deleting ingredients.
"""

import streamlit as st

from config.database import SessionLocal
from controllers.ingredient_form import IngredientForm
from models import Ingredient
from models.repositories import EntityStore
from services.catalog_service import CatalogService
from views.components import (
    SidebarEntry,
    render_entity_sidebar,
    render_form_error,
    render_name_form,
)


class IngredientsView:
    """View for ingredient management."""

    def __init__(self):
        if "ingredients" not in st.session_state:
            st.session_state.ingredients = {"selected_id": None}

    def _select(self, ingredient_id):
        st.session_state.ingredients["selected_id"] = ingredient_id

    def render(self):
        """Main render method."""
        st.title("Ingredients")

        db = SessionLocal()
        try:
            store = EntityStore(db)
            catalog = CatalogService(db)

            selected_id = st.session_state.ingredients["selected_id"]
            render_entity_sidebar(
                title="Ingredients",
                items=[
                    SidebarEntry(id=i.ingredient_id, label=i.name)
                    for i in catalog.list_ingredients()
                ],
                selected_id=selected_id,
                on_select=self._select,
                on_new=lambda: self._select(None),
                new_label="New Ingredient",
            )

            ingredient = store.get(Ingredient, selected_id) if selected_id else None
            if ingredient:
                form = IngredientForm.edit(store, ingredient)
                used_by = form.usage_count()
                if used_by:
                    st.info(
                        f"Used in {used_by} recipe line(s). Deleting it leaves those "
                        "lines without an ingredient."
                    )
            else:
                form = IngredientForm.add(store)

            result = render_name_form(form, key=f"ingredient_{selected_id or 'new'}")
            if result and result.success:
                self._select(None)
                st.rerun()
            render_form_error(result)
        finally:
            db.close()
