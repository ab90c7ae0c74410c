"""Sidebar component with connection status and settings."""

import streamlit as st

from portfolio_admin.config import get_config
from portfolio_admin.session import get_session, set_api_connected, set_photo_library_access
from portfolio_admin.api_client import get_client


def render_sidebar() -> None:
    """Render the sidebar with API status and settings."""
    config = get_config()
    state = get_session()

    with st.sidebar:
        st.title(config.page_title)

        _render_api_status(state.api_connected)
        st.divider()

        _render_settings(config, state)


def _render_api_status(connected: bool) -> None:
    """Render API connection status."""
    st.subheader("Status")

    col1, col2 = st.columns([3, 1])
    with col1:
        if connected:
            st.success("API Connected")
        else:
            st.error("API Disconnected")

    with col2:
        if st.button("↻", key="refresh_connection", help="Refresh connection"):
            set_api_connected(get_client().health_check())
            st.rerun()


def _render_settings(config, state) -> None:
    """Render settings section."""
    with st.expander("Settings", expanded=False):
        st.caption(f"**API URL:** {config.api_base_url}")
        st.caption(f"**Timeout:** {config.api_timeout_sec}s")
        st.caption(f"**Image host:** {config.cloudinary_cloud_name}")

        allowed = st.toggle(
            "Allow photo library access",
            value=state.photo_library_access,
            key="settings_photo_library_access",
            help="Image uploads are refused while access is off.",
        )
        set_photo_library_access(allowed)
