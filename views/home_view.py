"""
Home View - Landing page for the Recipe Catalog.

Displays catalog counts and navigation to the three catalog pages.
"""

import streamlit as st

from config.database import SessionLocal
from models import Category, Ingredient, Recipe
from models.repositories import EntityStore


class HomeView:
    """View for the home/landing page."""

    def render(self, title: str) -> None:
        """Render the home page."""
        st.title(title)
        st.markdown("Your recipes, their categories and ingredients in one place")

        st.markdown("---")

        db = SessionLocal()
        try:
            store = EntityStore(db)
            counts = {kind: store.count(kind) for kind in (Recipe, Category, Ingredient)}
        finally:
            db.close()

        col1, col2, col3 = st.columns(3)

        with col1:
            self._render_card(
                "Recipes", counts[Recipe],
                "Browse, add and edit recipes with their ingredient lists.",
                "pages/1_📖_Recipes.py",
            )

        with col2:
            self._render_card(
                "Categories", counts[Category],
                "Group recipes into categories such as Breakfast or Dessert.",
                "pages/2_🗂️_Categories.py",
            )

        with col3:
            self._render_card(
                "Ingredients", counts[Ingredient],
                "Keep one shared list of ingredients for all recipes.",
                "pages/3_🧂_Ingredients.py",
            )

        st.markdown("---")
        st.markdown("*Use the sidebar to navigate between pages.*")

    def _render_card(self, name: str, count: int, blurb: str, page: str) -> None:
        """Render one navigation card."""
        st.markdown(f"### {name}")
        st.metric(name, count, label_visibility="collapsed")
        st.markdown(blurb)
        if st.button(f"Open {name} →", type="primary", use_container_width=True):
            st.switch_page(page)
