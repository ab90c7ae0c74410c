"""Resource screen controller - framework-agnostic.

One ``ResourceScreen`` owns one singleton resource: it fetches the document,
tracks loading/empty/loaded state, opens the form modal and turns every
failure into a user notification. The Streamlit page only reads its state
and forwards user actions.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .draft import FormModal
from .exceptions import AppError, PermissionDenied, RequestFailed, UploadFailed, ValidationError
from .models import ImageTarget, ModalMode, ScreenStatus
from .schemas import ResourceSchema

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]


def _log_notification(message: str, type: str = "info") -> None:
    logger.info(f"[{type}] {message}")


class ResourceScreen:
    """State machine for a single resource screen.

    Transitions:
        LOADING -> LOADED | EMPTY
        LOADED  -> LOADING (refresh) | EMPTY (after delete)
        EMPTY   -> LOADING (refresh or retry)
    """

    def __init__(self, schema: ResourceSchema, client, uploader=None, notify: Optional[Notifier] = None):
        self.schema = schema
        self.client = client
        self.uploader = uploader
        self.notify: Notifier = notify or _log_notification

        self.status = ScreenStatus.LOADING
        self.document: Optional[Dict[str, Any]] = None
        self.refreshing = False
        self.busy = False
        self.mounted = False
        self.modal: Optional[FormModal] = None
        self.modal_error: Optional[str] = None

    # Fetching
    def mount(self) -> None:
        """Fetch once on first display."""
        if not self.mounted:
            self.mounted = True
            self.load()

    def load(self) -> None:
        """Blocking fetch: shows the loading state until the request resolves."""
        self.status = ScreenStatus.LOADING
        self._fetch()

    def refresh(self, keep_on_error: bool = False) -> None:
        """Non-blocking fetch: the current content stays visible meanwhile.

        With ``keep_on_error`` a failed fetch leaves the current document in place.
        """
        self.refreshing = True
        try:
            self._fetch(keep_on_error)
        finally:
            self.refreshing = False

    def _fetch(self, keep_on_error: bool = False) -> None:
        try:
            document = self.client.get()
        except AppError as e:
            logger.error(f"Failed to load {self.schema.key}: {e}")
            if not (keep_on_error and self.document is not None):
                self._set_document(None)
            self.notify(f"Failed to load {self.schema.title.lower()} data: {e}", "error")
            return

        if document is None:
            logger.info(f"No {self.schema.key} document yet")
        self._set_document(document)

    def _set_document(self, document: Optional[Dict[str, Any]]) -> None:
        self.document = document
        self.status = ScreenStatus.LOADED if document is not None else ScreenStatus.EMPTY

    # Modal
    @property
    def modal_open(self) -> bool:
        return self.modal is not None

    def open_modal(self, mode) -> FormModal:
        """Open the form modal. Does not change the screen state."""
        mode = ModalMode(mode)
        if mode == ModalMode.EDIT and self.document is None:
            raise AppError(f"No {self.schema.title.lower()} document to edit")
        self.modal = FormModal(self.schema, mode, self.document)
        self.modal_error = None
        logger.debug(f"Opened {mode.value} modal for {self.schema.key}")
        return self.modal

    def close_modal(self) -> None:
        """Discard the draft."""
        self.modal = None
        self.modal_error = None

    # Mutations
    def submit(self) -> bool:
        """Submit the open draft. Returns True on success."""
        if self.modal is None or self.modal.draft is None:
            return False
        if self.busy:
            logger.warning(f"Ignoring submit for {self.schema.key}: request already in flight")
            return False

        verb = "create" if self.modal.mode == ModalMode.CREATE else "update"
        self.busy = True
        try:
            response = self.modal.submit(self.client)
        except ValidationError as e:
            self.modal_error = e.message
            self.notify(e.message, "error")
            return False
        except AppError as e:
            logger.error(f"Failed to {verb} {self.schema.key}: {e}")
            self.modal_error = str(e)
            self.notify(f"Failed to {verb} {self.schema.title.lower()}: {e}", "error")
            return False
        finally:
            self.busy = False

        self.close_modal()
        self.notify(f"{self.schema.title} {verb}d successfully", "success")
        if response:
            self._set_document(response)
        # Keep the saved document if the re-fetch fails
        self.refresh(keep_on_error=True)
        return True

    def confirm_delete(self) -> bool:
        """Delete the document. Returns True on success."""
        if self.busy:
            logger.warning(f"Ignoring delete for {self.schema.key}: request already in flight")
            return False

        self.busy = True
        try:
            self.client.delete()
        except AppError as e:
            logger.error(f"Failed to delete {self.schema.key}: {e}")
            self.notify(f"Failed to delete {self.schema.title.lower()}: {e}", "error")
            return False
        finally:
            self.busy = False

        self._set_document(None)
        self.close_modal()
        self.notify(f"{self.schema.title} deleted successfully", "success")
        return True

    def upload_image(self, target: ImageTarget, data: bytes, filename: str) -> Optional[str]:
        """Upload an image into the open draft. Returns the URL, or None on failure."""
        if self.modal is None or self.uploader is None:
            return None
        try:
            return self.modal.upload_image(self.uploader, target, data, filename)
        except PermissionDenied as e:
            self.notify(e.message, "warning")
        except (UploadFailed, RequestFailed) as e:
            logger.error(f"Image upload failed for {self.schema.key}: {e}")
            self.notify(f"Failed to upload image: {e}", "error")
        return None


__all__ = ["ResourceScreen", "Notifier"]
