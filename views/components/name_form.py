"""
Name-only form component, shared by the category and ingredient pages.
"""

import streamlit as st
from typing import Optional

from controllers.form_controller import FormController, FormResult


def render_name_form(form: FormController, key: str) -> Optional[FormResult]:
    """
    Render the name field with Save (and Delete when editing).

    Returns the result of the action the user took, or None.
    """
    st.subheader(form.title)

    with st.form(key=f"{key}_form"):
        form.name = st.text_input("Name", value=form.name, key=f"{key}_name")
        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        # Save is only offered for a non-empty name
        if not form.can_save:
            st.warning("Enter a name before saving.")
            return None
        return form.save()

    if form.is_editing:
        if st.button(f"Delete {form.kind_label}", key=f"{key}_delete", use_container_width=True):
            return form.delete()

    return None


def render_form_error(result: Optional[FormResult]) -> None:
    """Show the user-facing message of a failed save or delete."""
    if result is not None and not result.success:
        st.error(result.error.message)
