"""Core data models for the application."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScreenStatus(str, Enum):
    """Resource screen status."""
    LOADING = "loading"
    EMPTY = "empty"
    LOADED = "loaded"


class ModalMode(str, Enum):
    """Form modal modes."""
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


class FieldKind(str, Enum):
    """Widget kind for a schema field."""
    TEXT = "text"
    TEXTAREA = "textarea"
    IMAGE = "image"
    IMAGE_LIST = "image_list"
    RATING = "rating"
    URL = "url"


@dataclass(frozen=True)
class ImageTarget:
    """Address of a single image slot inside a draft.

    - ``ImageTarget("image")``: top-level image field
    - ``ImageTarget("logo", index=2)``: image field of sub-entity row 2
    - ``ImageTarget("images", index=0, image_index=1)``: second image of row 0
    """
    field: str
    index: Optional[int] = None
    image_index: Optional[int] = None

    @property
    def is_top_level(self) -> bool:
        return self.index is None


@dataclass
class Notification:
    """A message to show the user."""
    message: str
    type: str = "info"  # info, success, warning, error
