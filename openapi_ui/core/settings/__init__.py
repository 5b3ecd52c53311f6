"""Domain-specific configuration models."""

from openapi_ui.core.settings.app_config import AppConfig
from openapi_ui.core.settings.assets_config import AssetsConfig
from openapi_ui.core.settings.docs_config import DocsConfig
from openapi_ui.core.settings.server_config import ServerConfig

__all__ = [
    "AppConfig",
    "AssetsConfig",
    "DocsConfig",
    "ServerConfig",
]
