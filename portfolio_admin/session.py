"""Session state management for Streamlit app."""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
import streamlit as st

from .api_client import get_client
from .config import get_config
from .core.models import Notification
from .core.schemas import get_schema
from .core.screen import ResourceScreen
from .uploader import ImageUploader


@dataclass
class SessionState:
    """Centralized session state container."""

    # One screen per resource key; screens never share state
    screens: Dict[str, ResourceScreen] = field(default_factory=dict)

    # Notifications
    notifications: List[Notification] = field(default_factory=list)

    # API connection
    api_connected: bool = False

    # Photo-library access for uploads in this browser session; starts from the env default
    photo_library_access: bool = field(default_factory=lambda: get_config().photo_library_access)
    uploader: Optional[ImageUploader] = None


def get_session() -> SessionState:
    """Get or create session state."""
    if "app_state" not in st.session_state:
        st.session_state.app_state = SessionState()
    return st.session_state.app_state


def reset_session() -> None:
    """Reset session state to defaults."""
    st.session_state.app_state = SessionState()


def get_screen(key: str) -> ResourceScreen:
    """Get or create the screen controller for a resource."""
    state = get_session()
    if key not in state.screens:
        schema = get_schema(key)
        state.screens[key] = ResourceScreen(
            schema,
            client=get_client().resource(schema),
            uploader=get_uploader(),
            notify=add_notification,
        )
    return state.screens[key]


def get_uploader() -> ImageUploader:
    """Get this session's uploader, gated on the session's photo-library setting."""
    state = get_session()
    if state.uploader is None:
        state.uploader = ImageUploader(permission_check=lambda: state.photo_library_access)
    return state.uploader


def set_photo_library_access(allowed: bool) -> None:
    """Grant or revoke photo-library access for this session only."""
    get_session().photo_library_access = allowed


def add_notification(message: str, type: str = "info") -> None:
    """Add a notification to show the user.

    Args:
        message: The notification message
        type: One of 'info', 'success', 'warning', 'error'
    """
    state = get_session()
    state.notifications.append(Notification(message=message, type=type))


def pop_notifications() -> List[Dict[str, Any]]:
    """Get and clear all notifications."""
    state = get_session()
    notifications = [{"message": n.message, "type": n.type} for n in state.notifications]
    state.notifications = []
    return notifications


def set_api_connected(connected: bool) -> None:
    """Set API connection status."""
    state = get_session()
    state.api_connected = connected
