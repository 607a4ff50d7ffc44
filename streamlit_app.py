"""
Recipe Catalog - Home Page

Manage recipes, the categories they are filed under and the
ingredients they use.
"""

import streamlit as st

from config.settings import get_settings

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title=get_settings().app_title,
    page_icon="📖",
    layout="wide"
)

from views.bootstrap import bootstrap
from views.home_view import HomeView

bootstrap()
HomeView().render(get_settings().app_title)
