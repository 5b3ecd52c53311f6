"""Registration settings for the documentation middleware."""

from openapi_ui.schemas.oauth2_settings import OAuth2ClientSettings
from openapi_ui.schemas.openapi_settings import OpenApiSettings, PostProcessor
from openapi_ui.schemas.redoc_settings import ReDocSettings
from openapi_ui.schemas.swagger_ui_settings import SwaggerUiSettings
from openapi_ui.schemas.ui_settings import (
    PathTransform,
    UiSettingsBase,
    forwarded_prefix_transform,
    identity_transform,
)

__all__ = [
    "OAuth2ClientSettings",
    "OpenApiSettings",
    "PathTransform",
    "PostProcessor",
    "ReDocSettings",
    "SwaggerUiSettings",
    "UiSettingsBase",
    "forwarded_prefix_transform",
    "identity_transform",
]
