"""Tests for the image uploader."""

import pytest
import requests

from portfolio_admin.core.exceptions import PermissionDenied, UploadFailed
from portfolio_admin.uploader import ImageUploader

from conftest import make_response

UPLOAD_URL = "https://api.cloudinary.com/v1_1/dqfum2awz/image/upload"


@pytest.fixture
def uploader(config, session):
    return ImageUploader(config=config, session=session)


def test_upload_returns_secure_url(uploader, session):
    session.post.return_value = make_response(200, {"secure_url": "https://res.cloudinary.com/x.jpg"})

    url = uploader.upload(b"\xff\xd8bytes", "photo.png")

    assert url == "https://res.cloudinary.com/x.jpg"
    args, kwargs = session.post.call_args
    assert args[0] == UPLOAD_URL
    assert kwargs["files"] == {"file": ("photo.png", b"\xff\xd8bytes", "image/png")}
    assert kwargs["data"] == {"upload_preset": "shivbandhan"}
    assert kwargs["timeout"] == 60


def test_permission_denied_sends_nothing(config, session):
    uploader = ImageUploader(config=config, permission_check=lambda: False, session=session)

    with pytest.raises(PermissionDenied) as exc:
        uploader.upload(b"bytes")

    assert exc.value.message == "Please allow access to your photo library."
    session.post.assert_not_called()


def test_default_permission_follows_config(config, session):
    config.photo_library_access = False
    uploader = ImageUploader(config=config, session=session)

    with pytest.raises(PermissionDenied):
        uploader.upload(b"bytes")

    session.post.assert_not_called()


def test_missing_secure_url_fails(uploader, session):
    session.post.return_value = make_response(200, {"public_id": "abc"})

    with pytest.raises(UploadFailed) as exc:
        uploader.upload(b"bytes")

    assert exc.value.message == "No image URL returned by the image host"


def test_host_error_message_is_surfaced(uploader, session):
    session.post.return_value = make_response(400, {"error": {"message": "Upload preset not found"}})

    with pytest.raises(UploadFailed) as exc:
        uploader.upload(b"bytes")

    assert exc.value.message == "Upload preset not found"


def test_connection_error_wrapped(uploader, session):
    session.post.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(UploadFailed) as exc:
        uploader.upload(b"bytes")

    assert "Connection error" in exc.value.message
