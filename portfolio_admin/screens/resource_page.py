"""Generic resource page - one per tab, driven by the resource schema."""

import streamlit as st

from portfolio_admin.session import get_screen
from portfolio_admin.core.models import ModalMode, ScreenStatus
from portfolio_admin.core.screen import ResourceScreen
from portfolio_admin.components.form_modal import render_form_modal, bump_form_revision
from portfolio_admin.components.resource_view import render_document


def render_resource_page(key: str) -> None:
    """Render the management page for one resource."""
    screen = get_screen(key)
    title = screen.schema.title

    if not screen.mounted:
        with st.spinner(f"Loading {title}..."):
            screen.mount()

    st.header(f"{title} Management")
    _render_actions(screen)

    if screen.modal_open:
        render_form_modal(screen)

    if screen.status == ScreenStatus.LOADING:
        st.info(f"Loading {title}...")
    elif screen.status == ScreenStatus.LOADED:
        render_document(screen.schema, screen.document)
    else:
        _render_empty_state(screen)


def _render_actions(screen: ResourceScreen) -> None:
    """Refresh / Create / Edit / Delete action bar."""
    key = screen.schema.key
    has_document = screen.document is not None
    cols = st.columns(4)

    with cols[0]:
        if st.button("Refresh", key=f"{key}_refresh", disabled=screen.refreshing, width="stretch"):
            with st.spinner("Refreshing..."):
                screen.refresh()
            st.rerun()
    with cols[1]:
        if st.button("Create", key=f"{key}_create", width="stretch"):
            _open(screen, ModalMode.CREATE)
    if has_document:
        with cols[2]:
            if st.button("Edit", key=f"{key}_edit", width="stretch"):
                _open(screen, ModalMode.EDIT)
        with cols[3]:
            if st.button("Delete", key=f"{key}_delete", width="stretch"):
                _open(screen, ModalMode.DELETE)


def _open(screen: ResourceScreen, mode: ModalMode) -> None:
    screen.open_modal(mode)
    bump_form_revision(screen)
    st.rerun()


def _render_empty_state(screen: ResourceScreen) -> None:
    """Render UI when no document exists yet."""
    title = screen.schema.title
    key = screen.schema.key

    with st.container(border=True):
        st.subheader(f"No {title} Data Found")
        st.write(
            f"The {title.lower()} section doesn't exist yet or has been deleted. "
            "Create a new one to get started."
        )
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Retry", key=f"{key}_retry", width="stretch"):
                with st.spinner(f"Loading {title}..."):
                    screen.load()
                st.rerun()
        with col2:
            if st.button("Create New", key=f"{key}_create_new", type="primary", width="stretch"):
                _open(screen, ModalMode.CREATE)
