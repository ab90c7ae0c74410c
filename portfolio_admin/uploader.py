"""Image upload to the third-party image host."""

import logging
import mimetypes
from typing import Callable, Optional

import requests

from .config import get_config, AppConfig
from .core.exceptions import PermissionDenied, UploadFailed

logger = logging.getLogger(__name__)

PermissionCheck = Callable[[], bool]


class ImageUploader:
    """Uploads picked images and returns their public URL.

    Photo-library access is checked before every upload; when it is denied
    no request is sent.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        permission_check: Optional[PermissionCheck] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or get_config()
        self.permission_check = permission_check or (lambda: self.config.photo_library_access)
        self.session = session or requests.Session()

    def upload(self, data: bytes, filename: str = "image.jpg") -> str:
        """Upload image bytes.

        Args:
            data: Raw image bytes
            filename: Name sent with the multipart file part

        Returns:
            The image host's ``secure_url``

        Raises:
            PermissionDenied: If photo-library access is not granted
            UploadFailed: If the host does not return a usable URL
        """
        if not self.permission_check():
            logger.warning("Photo library access denied, skipping upload")
            raise PermissionDenied()

        content_type = mimetypes.guess_type(filename)[0] or "image/jpeg"
        try:
            response = self.session.post(
                self.config.upload_url,
                files={"file": (filename, data, content_type)},
                data={"upload_preset": self.config.cloudinary_upload_preset},
                timeout=self.config.upload_timeout_sec,
            )
        except requests.exceptions.RequestException as e:
            raise UploadFailed(f"Connection error: {e}") from e

        try:
            result = response.json()
        except ValueError:
            result = {}

        url = result.get("secure_url") if isinstance(result, dict) else None
        if not url:
            logger.error(f"Upload of {filename} failed with status {response.status_code}: {result}")
            error = result.get("error") if isinstance(result, dict) else None
            if isinstance(error, dict) and error.get("message"):
                raise UploadFailed(error["message"])
            raise UploadFailed("No image URL returned by the image host")

        logger.info(f"Uploaded {filename} -> {url}")
        return url

