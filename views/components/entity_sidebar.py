"""
Entity list sidebar component.
"""

import streamlit as st
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class SidebarEntry:
    """One selectable line in the sidebar."""
    id: int
    label: str


def render_entity_sidebar(
    title: str,
    items: list[SidebarEntry],
    selected_id: Optional[int],
    on_select: Callable[[int], None],
    on_new: Callable[[], None],
    new_label: str,
):
    """
    Render a selectable list of catalog entries in the sidebar.

    Args:
        title: Heading shown above the list
        items: Entries to list, in display order
        selected_id: Id of the entry currently open in the form
        on_select: Callback when an entry is selected
        on_new: Callback for the "new" button
        new_label: Text of the "new" button
    """
    with st.sidebar:
        st.markdown(f"### {title}")
        if st.button(new_label, key=f"new_{title}", type="primary", use_container_width=True):
            on_new()
            st.rerun()
        st.markdown("---")

        if not items:
            st.caption("Nothing here yet.")
            return

        for item in items:
            button_type = "primary" if item.id == selected_id else "secondary"
            if st.button(item.label, key=f"select_{title}_{item.id}", type=button_type, use_container_width=True):
                on_select(item.id)
                st.rerun()
