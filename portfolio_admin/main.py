"""
Main entry point for the Portfolio Admin Streamlit app.

A tabbed front-end for the photographer portfolio API: one tab per resource
(About, Portfolio, Services, Testimonials, Clients).
Run with: streamlit run portfolio_admin/main.py
"""

import logging
from pathlib import Path
import sys

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from portfolio_admin.config import get_config
from portfolio_admin.session import pop_notifications, set_api_connected
from portfolio_admin.api_client import get_client
from portfolio_admin.core.schemas import list_schemas
from portfolio_admin.components.sidebar import render_sidebar
from portfolio_admin.screens.resource_page import render_resource_page

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_api_connection() -> bool:
    """Check if API is available."""
    client = get_client()
    connected = client.health_check()
    set_api_connected(connected)
    return connected


def show_notifications() -> None:
    """Display any pending notifications."""
    for notif in pop_notifications():
        msg, type_ = notif["message"], notif["type"]
        {"success": st.success, "error": st.error, "warning": st.warning}.get(type_, st.info)(msg)


def render_app() -> None:
    """Main app rendering orchestration."""
    config = get_config()

    st.set_page_config(page_title=config.page_title, page_icon=config.page_icon, layout=config.layout)

    if "initialized" not in st.session_state:
        if not check_api_connection():
            logger.warning(f"API not reachable at {config.api_base_url}")
        st.session_state.initialized = True

    show_notifications()
    render_sidebar()

    schemas = list_schemas()
    tabs = st.tabs([schema.title for schema in schemas])
    for tab, schema in zip(tabs, schemas):
        with tab:
            render_resource_page(schema.key)


def main() -> None:
    """Application entry point."""
    render_app()


def run() -> None:
    """Console script: launch the app through the Streamlit CLI."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
