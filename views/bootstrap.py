"""
One-time application setup shared by every page.
"""

import streamlit as st

from config import configure_logging, init_db


@st.cache_resource
def bootstrap() -> bool:
    """Configure logging and create missing tables once per server process."""
    configure_logging()
    init_db()
    return True
