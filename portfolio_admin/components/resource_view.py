"""Read-only rendering of a loaded resource document."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import streamlit as st
from streamlit.runtime.media_file_storage import MediaFileStorageError

from portfolio_admin.core.draft import parse_rating, RATING_MAX
from portfolio_admin.core.models import FieldKind
from portfolio_admin.core.schemas import ResourceSchema, SubEntitySpec

logger = logging.getLogger(__name__)

CARDS_PER_ROW = 2


def is_image_url(value: Any) -> bool:
    """True for absolute http(s) URLs; anything else would be read as a local path."""
    if not isinstance(value, str) or not value.strip():
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def render_image_preview(value: Any, width: Optional[int] = None, caption: Optional[str] = None) -> None:
    """Show an image, or the raw value as text when it cannot be previewed."""
    if not is_image_url(value):
        if value:
            st.caption(str(value))
        return
    kwargs = {"caption": caption}
    if width is not None:
        kwargs["width"] = width
    try:
        st.image(value.strip(), **kwargs)
    except MediaFileStorageError as e:
        logger.warning(f"Cannot preview image {value}: {e}")
        st.caption(value)


def render_document(schema: ResourceSchema, document: Dict[str, Any]) -> None:
    """Render a document: top-level fields first, then sub-entity cards."""
    for spec in schema.fields:
        value = document.get(spec.name)
        if not value:
            continue
        if spec.kind == FieldKind.IMAGE:
            render_image_preview(value, caption=document.get("title"))
        elif spec.name == "title":
            st.subheader(value)
        else:
            st.write(value)

    sub = schema.sub_entity
    rows = _rows(schema, document)
    st.markdown(f"#### {sub.label}")
    if not rows:
        st.caption(f"No {sub.label.lower()} yet.")
        return

    for start in range(0, len(rows), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, row in zip(cols, rows[start:start + CARDS_PER_ROW]):
            with col:
                render_item_card(sub, row)


def _rows(schema: ResourceSchema, document: Dict[str, Any]) -> List[Dict[str, Any]]:
    first = schema.sub_entity.fields[0].name
    return [row if isinstance(row, dict) else {first: row} for row in schema.document_rows(document)]


def render_item_card(sub: SubEntitySpec, row: Dict[str, Any]) -> None:
    """Render one sub-entity as a bordered card."""
    with st.container(border=True):
        for spec in sub.fields:
            value = row.get(spec.name)
            if not value:
                value = next((row.get(alias) for alias, target in sub.read_aliases if target == spec.name), None)
            if not value:
                continue

            if spec.kind == FieldKind.IMAGE:
                render_image_preview(value, width=120)
            elif spec.kind == FieldKind.IMAGE_LIST:
                images = value if isinstance(value, list) else [value]
                for image in images:
                    render_image_preview(image, width=120)
            elif spec.kind == FieldKind.RATING:
                st.write(render_stars(value))
            elif spec.kind == FieldKind.URL:
                st.markdown(f"[Visit Website]({value})")
            elif spec.name in ("title", "name"):
                st.markdown(f"**{value}**")
            else:
                st.caption(value)


def render_stars(value: Any) -> str:
    """Text star rating, e.g. 3 -> '★★★☆☆'."""
    rating = parse_rating(value) or 0
    return "★" * rating + "☆" * (RATING_MAX - rating)


__all__ = ["render_document", "render_item_card", "render_stars", "render_image_preview", "is_image_url"]
