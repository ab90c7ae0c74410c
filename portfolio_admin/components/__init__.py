"""Reusable Streamlit UI components."""

from .sidebar import render_sidebar
from .resource_view import (
    render_document,
    render_item_card,
    render_stars,
)
from .form_modal import (
    render_form_modal,
    bump_form_revision,
)

__all__ = [
    # Sidebar
    "render_sidebar",
    # Document view
    "render_document",
    "render_item_card",
    "render_stars",
    # Form modal
    "render_form_modal",
    "bump_form_revision",
]
