"""
Reusable UI components.
"""

from views.components.entity_sidebar import SidebarEntry, render_entity_sidebar
from views.components.name_form import render_form_error, render_name_form

__all__ = [
    "SidebarEntry",
    "render_entity_sidebar",
    "render_form_error",
    "render_name_form",
]
