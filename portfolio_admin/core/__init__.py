"""Core business logic - framework-agnostic.

Resource schemas, draft editing and the resource screen state machine.
Nothing in this package imports Streamlit.
"""

from .exceptions import (
    AppError,
    NotFound,
    ValidationError,
    RequestFailed,
    PermissionDenied,
    UploadFailed,
)
from .models import ScreenStatus, ModalMode, FieldKind, ImageTarget, Notification
from .schemas import FieldSpec, SubEntitySpec, ResourceSchema, RESOURCES, get_schema, list_schemas
from .draft import Draft, FormModal
from .screen import ResourceScreen

__all__ = [
    "AppError",
    "NotFound",
    "ValidationError",
    "RequestFailed",
    "PermissionDenied",
    "UploadFailed",
    "ScreenStatus",
    "ModalMode",
    "FieldKind",
    "ImageTarget",
    "Notification",
    "FieldSpec",
    "SubEntitySpec",
    "ResourceSchema",
    "RESOURCES",
    "get_schema",
    "list_schemas",
    "Draft",
    "FormModal",
    "ResourceScreen",
]
