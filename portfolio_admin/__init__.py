"""Portfolio Admin - Streamlit front-end for the photographer portfolio API.

The app talks to the backend exclusively over HTTP. Resource schemas, draft
handling and screen state live in ``portfolio_admin.core`` and do not
depend on Streamlit.
"""

from .config import get_config, AppConfig
from .api_client import get_client, ApiClient, ResourceClient
from .uploader import ImageUploader

__all__ = [
    "get_config",
    "AppConfig",
    "get_client",
    "ApiClient",
    "ResourceClient",
    "ImageUploader",
]
