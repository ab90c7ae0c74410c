"""Custom exceptions for the application."""

from typing import List, Optional


class AppError(Exception):
    """Base exception for application errors."""
    pass


class ValidationError(AppError):
    """Raised when a draft fails client-side validation."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return " ".join(self.problems)


class RequestFailed(AppError):
    """Raised for any non-2xx response other than a GET 404."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class NotFound(RequestFailed):
    """Raised on HTTP 404. For a GET this means the document does not exist yet."""

    def __init__(self, message: str = "Not found"):
        super().__init__(404, message)


class PermissionDenied(AppError):
    """Raised when photo-library access is refused."""

    def __init__(self, message: Optional[str] = None):
        self.message = message or "Please allow access to your photo library."
        super().__init__(self.message)


class UploadFailed(AppError):
    """Raised when the image host does not return a usable URL."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
