"""
Categories View - UI for adding, renaming and deleting categories.

This view handles:
- Listing categories with their recipe counts
- The add/edit category form
- Showing which recipes are filed under the open category
"""

import streamlit as st

from config.database import SessionLocal
from controllers.category_form import CategoryForm
from models import Category
from models.repositories import EntityStore
from services.catalog_service import CatalogService
from views.components import (
    SidebarEntry,
    render_entity_sidebar,
    render_form_error,
    render_name_form,
)


class CategoriesView:
    """View for category management."""

    def __init__(self):
        if "categories" not in st.session_state:
            st.session_state.categories = {"selected_id": None}

    def _select(self, category_id):
        st.session_state.categories["selected_id"] = category_id

    def render(self):
        """Main render method."""
        st.title("Categories")

        db = SessionLocal()
        try:
            store = EntityStore(db)
            catalog = CatalogService(db)

            selected_id = st.session_state.categories["selected_id"]
            render_entity_sidebar(
                title="Categories",
                items=[
                    SidebarEntry(id=c.category_id, label=f"{c.name} ({c.recipe_count})")
                    for c in catalog.list_categories()
                ],
                selected_id=selected_id,
                on_select=self._select,
                on_new=lambda: self._select(None),
                new_label="New Category",
            )

            category = store.get(Category, selected_id) if selected_id else None
            if category:
                form = CategoryForm.edit(store, category)
            else:
                form = CategoryForm.add(store)

            result = render_name_form(form, key=f"category_{selected_id or 'new'}")
            if result and result.success:
                self._select(None)
                st.rerun()
            render_form_error(result)

            if form.is_editing:
                self._render_recipes(form)
        finally:
            db.close()

    def _render_recipes(self, form: CategoryForm):
        st.markdown("---")
        st.markdown("#### Recipes in this category")
        recipes = form.recipes()
        if not recipes:
            st.caption("No recipes yet.")
            return
        for recipe in recipes:
            st.markdown(f"- {recipe.Name}")
        st.caption("Deleting the category keeps these recipes; they will have no category.")
