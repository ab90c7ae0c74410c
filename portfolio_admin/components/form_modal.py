"""Form modal component: draft editing, image picking and delete confirmation."""

import streamlit as st

from portfolio_admin.core.models import FieldKind, ImageTarget, ModalMode
from portfolio_admin.core.schemas import FieldSpec
from portfolio_admin.core.screen import ResourceScreen
from portfolio_admin.components.resource_view import render_image_preview

IMAGE_TYPES = ["jpg", "jpeg", "png", "webp", "gif"]


def _rev_key(screen: ResourceScreen) -> str:
    return f"{screen.schema.key}_form_rev"


def bump_form_revision(screen: ResourceScreen) -> None:
    """Rotate widget keys so inputs re-seed from the draft.

    Needed whenever rows are added or removed, or a new draft is opened,
    since Streamlit otherwise keeps stale widget values keyed by index.
    """
    key = _rev_key(screen)
    st.session_state[key] = int(st.session_state.get(key, 0)) + 1


def _wkey(screen: ResourceScreen, *parts) -> str:
    rev = st.session_state.get(_rev_key(screen), 0)
    return "_".join([screen.schema.key, "form", str(rev)] + [str(p) for p in parts])


def render_form_modal(screen: ResourceScreen) -> None:
    """Render the open modal for a screen (create, edit or delete)."""
    modal = screen.modal
    if modal is None:
        return

    with st.container(border=True):
        if modal.mode == ModalMode.DELETE:
            _render_delete_confirmation(screen)
        else:
            _render_draft_form(screen)


def _render_delete_confirmation(screen: ResourceScreen) -> None:
    title = screen.schema.title
    st.subheader(f"Delete {title}")
    st.warning(f"Are you sure you want to delete this {title.lower()} section? This action cannot be undone.")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Cancel", key=_wkey(screen, "delete_cancel"), width="stretch"):
            screen.close_modal()
            st.rerun()
    with col2:
        label = "Deleting..." if screen.busy else "Delete"
        if st.button(label, type="primary", key=_wkey(screen, "delete_confirm"),
                     disabled=screen.busy, width="stretch"):
            screen.confirm_delete()
            st.rerun()


def _render_draft_form(screen: ResourceScreen) -> None:
    modal = screen.modal
    draft = modal.draft
    schema = screen.schema
    sub = schema.sub_entity

    st.subheader(modal.title)
    if screen.modal_error:
        st.error(screen.modal_error)

    for spec in schema.fields:
        value = _render_field(screen, spec, draft.fields.get(spec.name, ""), ImageTarget(spec.name))
        draft.set_field(spec.name, value)

    st.markdown(f"##### {sub.label}")
    for index, row in enumerate(draft.items):
        with st.container(border=True):
            head, remove = st.columns([5, 1])
            with head:
                st.caption(f"{sub.item_label} {index + 1}")
            with remove:
                if len(draft.items) > 1 and st.button("Remove", key=_wkey(screen, "remove", index)):
                    draft.remove_item(index)
                    bump_form_revision(screen)
                    st.rerun()

            for spec in sub.fields:
                if spec.kind == FieldKind.IMAGE_LIST:
                    _render_image_list(screen, index, spec)
                    continue
                target = ImageTarget(spec.name, index=index)
                value = _render_field(screen, spec, row.get(spec.name, ""), target)
                draft.set_item_field(index, spec.name, value)

    if st.button(f"Add {sub.item_label}", key=_wkey(screen, "add_item")):
        draft.append_item()
        bump_form_revision(screen)
        st.rerun()

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Cancel", key=_wkey(screen, "cancel"), width="stretch"):
            screen.close_modal()
            st.rerun()
    with col2:
        if screen.busy:
            label = "Saving..."
        else:
            label = "Create" if modal.mode == ModalMode.CREATE else "Update"
        if st.button(label, type="primary", key=_wkey(screen, "submit"),
                     disabled=screen.busy or modal.uploading, width="stretch"):
            if screen.submit():
                bump_form_revision(screen)
            st.rerun()


def _render_field(screen: ResourceScreen, spec: FieldSpec, value: str, target: ImageTarget) -> str:
    """Render one scalar field and return its current value."""
    label = f"{spec.label} *" if spec.required else spec.label
    key = _wkey(screen, target.field, target.index, target.image_index)

    if spec.kind == FieldKind.TEXTAREA:
        return st.text_area(label, value=value, placeholder=spec.placeholder, key=key)
    if spec.kind == FieldKind.RATING:
        return st.text_input(label, value=value, placeholder="1-5", max_chars=1, key=key)
    if spec.kind == FieldKind.IMAGE:
        return _render_image_field(screen, label, value, target, key)
    return st.text_input(label, value=value, placeholder=spec.placeholder, key=key)


def _render_image_field(screen: ResourceScreen, label: str, value: str,
                        target: ImageTarget, key: str) -> str:
    """Image URL input with an upload picker beside it."""
    url = st.text_input(label, value=value, placeholder="https://", key=key)
    render_image_preview(url, width=160)
    _render_image_picker(screen, target, key)
    return url


def _render_image_list(screen: ResourceScreen, index: int, spec: FieldSpec) -> None:
    draft = screen.modal.draft
    images = draft.items[index][spec.name]
    st.caption(spec.label)
    for image_index, image in enumerate(list(images)):
        target = ImageTarget(spec.name, index=index, image_index=image_index)
        key = _wkey(screen, spec.name, index, image_index)
        col1, col2 = st.columns([5, 1])
        with col1:
            url = st.text_input(f"Image {image_index + 1}", value=image, placeholder="https://", key=key)
            draft.set_item_image(index, spec.name, image_index, url)
        with col2:
            if len(images) > 1 and st.button("Remove", key=f"{key}_remove"):
                draft.remove_item_image(index, spec.name, image_index)
                bump_form_revision(screen)
                st.rerun()
        _render_image_picker(screen, target, key)

    if st.button("Add Image", key=_wkey(screen, "add_image", index)):
        draft.append_item_image(index, spec.name)
        bump_form_revision(screen)
        st.rerun()


def _render_image_picker(screen: ResourceScreen, target: ImageTarget, key: str) -> None:
    """File picker plus upload button; writes the uploaded URL into the draft."""
    uploading = screen.modal is not None and screen.modal.uploading
    picked = st.file_uploader("Pick an image", type=IMAGE_TYPES, key=f"{key}_file",
                              label_visibility="collapsed")
    if picked is None:
        return
    if st.button("Upload Image", key=f"{key}_upload", disabled=uploading):
        with st.spinner("Uploading..."):
            url = screen.upload_image(target, picked.getvalue(), picked.name)
        if url:
            bump_form_revision(screen)
        st.rerun()


__all__ = ["render_form_modal", "bump_form_revision"]
