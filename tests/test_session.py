"""Tests for per-session screen registry and notification queue."""

from unittest.mock import MagicMock, patch

import pytest

from portfolio_admin import session as session_module
from portfolio_admin.config import AppConfig


class _SessionStateStub(dict):
    """Attribute access over a dict, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def fake_st():
    with patch.object(session_module, "st") as st:
        st.session_state = _SessionStateStub()
        yield st


def test_notifications_are_popped_once(fake_st):
    session_module.add_notification("About created successfully", "success")
    session_module.add_notification("Heads up")

    assert session_module.pop_notifications() == [
        {"message": "About created successfully", "type": "success"},
        {"message": "Heads up", "type": "info"},
    ]
    assert session_module.pop_notifications() == []


def test_screens_are_per_resource(fake_st):
    client = MagicMock()
    with patch.object(session_module, "get_client", return_value=client), \
            patch.object(session_module, "get_uploader", return_value=MagicMock()):
        about = session_module.get_screen("about")
        clients = session_module.get_screen("clients")

        assert session_module.get_screen("about") is about
    assert about is not clients
    assert about.schema.key == "about"
    assert clients.schema.key == "clients"


def test_screen_notifications_reach_queue(fake_st):
    with patch.object(session_module, "get_client", return_value=MagicMock()), \
            patch.object(session_module, "get_uploader", return_value=MagicMock()):
        screen = session_module.get_screen("about")

    screen.notify("Failed to load about data: boom", "error")

    assert session_module.pop_notifications() == [
        {"message": "Failed to load about data: boom", "type": "error"},
    ]


def test_reset_session_clears_state(fake_st):
    session_module.set_api_connected(True)
    session_module.add_notification("x")

    session_module.reset_session()

    state = session_module.get_session()
    assert state.api_connected is False
    assert state.notifications == []


def test_photo_library_access_is_per_session(fake_st):
    with patch.object(session_module, "get_client", return_value=MagicMock()):
        first = session_module.get_screen("about")
        session_module.set_photo_library_access(False)

        fake_st.session_state = _SessionStateStub()
        second = session_module.get_screen("about")

    assert first.uploader is not second.uploader
    assert first.uploader.permission_check() is False
    assert second.uploader.permission_check() is True


def test_session_access_starts_from_config(fake_st):
    config = AppConfig(photo_library_access=False)
    with patch.object(session_module, "get_config", return_value=config):
        assert session_module.get_session().photo_library_access is False
        assert session_module.get_uploader().permission_check() is False

    session_module.set_photo_library_access(True)

    assert session_module.get_uploader().permission_check() is True
