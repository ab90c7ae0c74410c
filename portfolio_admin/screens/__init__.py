"""Streamlit screens package - one generic screen per resource tab."""

from .resource_page import render_resource_page

__all__ = [
    "render_resource_page",
]
