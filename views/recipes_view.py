"""
Recipes View - UI for browsing and editing recipes.

This view handles:
- Browsing recipes, optionally filtered by category
- Showing a recipe's ingredients, instructions and image
- The add/edit recipe form, including ingredient lines
"""

import streamlit as st

from config.database import SessionLocal
from controllers.recipe_form import RecipeForm
from models import Category, Ingredient, Recipe
from models.repositories import EntityStore
from models.schemas import RecipeDetail
from services.catalog_service import CatalogService
from views.components import render_form_error


class RecipesView:
    """View for recipe browsing and editing."""

    def __init__(self):
        if "recipes" not in st.session_state:
            st.session_state.recipes = {
                "mode": "browse",  # browse, add, edit
                "selected_id": None,
                "category_filter": None,
            }

    def _open(self, mode: str, recipe_id=None):
        st.session_state.recipes["mode"] = mode
        st.session_state.recipes["selected_id"] = recipe_id

    def render(self):
        """Main render method."""
        st.title("Recipes")

        db = SessionLocal()
        try:
            store = EntityStore(db)
            catalog = CatalogService(db)
            categories = store.fetch_all(Category)

            self._render_sidebar(categories)

            if st.session_state.recipes["mode"] == "browse":
                self._render_browse(catalog)
            else:
                self._render_form(store, categories)
        finally:
            db.close()

    # ==========================================
    # Browsing
    # ==========================================

    def _render_sidebar(self, categories: list[Category]):
        with st.sidebar:
            st.markdown("### Filter")
            options = [None] + [c.CategoryId for c in categories]
            names = {c.CategoryId: c.Name for c in categories}
            current = st.session_state.recipes["category_filter"]
            st.session_state.recipes["category_filter"] = st.selectbox(
                "Category",
                options,
                index=options.index(current) if current in options else 0,
                format_func=lambda cid: "All categories" if cid is None else names[cid],
            )
            st.markdown("---")
            if st.button("New Recipe", type="primary", use_container_width=True):
                self._open("add")
                st.rerun()

    def _render_browse(self, catalog: CatalogService):
        recipes = catalog.list_recipes(st.session_state.recipes["category_filter"])
        if not recipes:
            st.info("No recipes yet. Use **New Recipe** in the sidebar to add one.")
            return

        for summary in recipes:
            label = f"{summary.name} · {summary.time} min · serves {summary.serving}"
            with st.expander(label):
                detail = catalog.get_recipe_detail(summary.recipe_id)
                if detail:
                    self._render_detail(detail)
                if st.button("Edit", key=f"edit_recipe_{summary.recipe_id}"):
                    self._open("edit", summary.recipe_id)
                    st.rerun()

    def _render_detail(self, detail: RecipeDetail):
        if detail.image_data:
            st.image(detail.image_data)
        if detail.summary:
            st.markdown(f"*{detail.summary}*")
        st.caption(f"Category: {detail.category_name or 'None'}")

        st.markdown("**Ingredients**")
        if detail.ingredients:
            for line in detail.ingredients:
                text = f"{line.quantity} {line.ingredient_name}".strip()
                st.markdown(f"- {text}")
        else:
            st.caption("No ingredients listed.")

        if detail.instructions:
            st.markdown("**Instructions**")
            st.markdown(detail.instructions)

    # ==========================================
    # Add / Edit Form
    # ==========================================

    def _render_form(self, store: EntityStore, categories: list[Category]):
        selected_id = st.session_state.recipes["selected_id"]
        recipe = store.get(Recipe, selected_id) if selected_id else None
        if st.session_state.recipes["mode"] == "edit" and recipe is None:
            st.error("Recipe not found")
            self._open("browse")
            return

        form = RecipeForm.edit(store, recipe) if recipe else RecipeForm.add(store)
        key = f"recipe_{selected_id or 'new'}"

        st.subheader(form.title)
        form.name = st.text_input("Name", value=form.name, key=f"{key}_name")
        form.summary = st.text_area("Summary", value=form.summary, key=f"{key}_summary")

        category_ids = [None] + [c.CategoryId for c in categories]
        by_id = {c.CategoryId: c for c in categories}
        current = form.category.CategoryId if form.category else None
        chosen = st.selectbox(
            "Category",
            category_ids,
            index=category_ids.index(current) if current in category_ids else 0,
            format_func=lambda cid: "None" if cid is None else by_id[cid].Name,
            key=f"{key}_category",
        )
        form.category = by_id.get(chosen)

        col_serving, col_time = st.columns(2)
        with col_serving:
            form.serving = st.number_input("Servings", min_value=1, value=form.serving, step=1, key=f"{key}_serving")
        with col_time:
            form.time = st.number_input("Time (minutes)", min_value=0, value=form.time, step=5, key=f"{key}_time")

        self._render_ingredient_lines(form, store, key)

        form.instructions = st.text_area("Instructions", value=form.instructions, height=200, key=f"{key}_instructions")
        self._render_image_input(form, key)

        col_save, col_cancel, col_delete = st.columns(3)
        result = None
        with col_save:
            if st.button("Save", type="primary", disabled=not form.can_save, key=f"{key}_save", use_container_width=True):
                result = form.save()
        with col_cancel:
            if st.button("Cancel", key=f"{key}_cancel", use_container_width=True):
                self._open("browse")
                st.rerun()
        with col_delete:
            if form.is_editing and st.button("Delete Recipe", key=f"{key}_delete", use_container_width=True):
                result = form.delete()

        if result and result.success:
            self._open("browse")
            st.rerun()
        render_form_error(result)

    def _render_ingredient_lines(self, form: RecipeForm, store: EntityStore, key: str):
        """Pick ingredients in order and enter a quantity for each."""
        st.markdown("**Ingredients**")
        ingredients = store.fetch_all(Ingredient)
        by_id = {i.IngredientId: i for i in ingredients}

        chosen_ids = st.multiselect(
            "Ingredients",
            list(by_id),
            default=[line.ingredient.IngredientId for line in form.ingredients],
            format_func=lambda iid: by_id[iid].Name,
            label_visibility="collapsed",
            key=f"{key}_ingredients",
        )
        if not ingredients:
            st.caption("Add ingredients on the Ingredients page first.")

        for line in list(form.ingredients):
            if line.ingredient.IngredientId not in chosen_ids:
                form.remove_ingredient(line.ingredient)

        for position, ingredient_id in enumerate(chosen_ids):
            ingredient = by_id[ingredient_id]
            existing = form.find_line(ingredient)
            quantity = st.text_input(
                f"Quantity of {ingredient.Name}",
                value=existing.quantity if existing else "",
                placeholder="e.g. 2 cups",
                key=f"{key}_qty_{ingredient_id}",
            )
            form.add_ingredient(ingredient, quantity)
            form.move_ingredient(ingredient, position)

    def _render_image_input(self, form: RecipeForm, key: str):
        if form.image_data:
            st.image(form.image_data, width=200)
            if st.checkbox("Remove image", key=f"{key}_remove_image"):
                form.image_data = None
        upload = st.file_uploader("Image", type=["png", "jpg", "jpeg", "gif", "webp"], key=f"{key}_image")
        if upload is not None:
            form.image_data = upload.getvalue()
