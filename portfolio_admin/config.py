"""Streamlit app configuration."""

from dataclasses import dataclass
from typing import Optional
import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    """Configuration for the portfolio admin app."""

    # API settings
    api_base_url: str = "https://photographer-protfolio.vercel.app"
    api_timeout_sec: int = 30

    # Image host settings
    cloudinary_cloud_name: str = "dqfum2awz"
    cloudinary_upload_preset: str = "shivbandhan"
    upload_timeout_sec: int = 60
    photo_library_access: bool = True

    # UI settings
    page_title: str = "Portfolio Admin"
    page_icon: str = ":camera:"
    layout: str = "wide"

    @property
    def upload_url(self) -> str:
        return f"https://api.cloudinary.com/v1_1/{self.cloudinary_cloud_name}/image/upload"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        return cls(
            api_base_url=os.getenv("API_BASE_URL", "https://photographer-protfolio.vercel.app"),
            api_timeout_sec=int(os.getenv("API_TIMEOUT_SEC", "30")),
            cloudinary_cloud_name=os.getenv("CLOUDINARY_CLOUD_NAME", "dqfum2awz"),
            cloudinary_upload_preset=os.getenv("CLOUDINARY_UPLOAD_PRESET", "shivbandhan"),
            upload_timeout_sec=int(os.getenv("UPLOAD_TIMEOUT_SEC", "60")),
            photo_library_access=_env_flag("PHOTO_LIBRARY_ACCESS", True),
            page_title=os.getenv("PAGE_TITLE", "Portfolio Admin"),
        )


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig) -> None:
    """Set the global config instance."""
    global _config
    _config = config
