"""OpenAPI document generation, Swagger UI and ReDoc for FastAPI/Starlette apps."""

from openapi_ui.core.bundles import UiFlavor
from openapi_ui.core.pipeline import PipelineStage, install
from openapi_ui.extensions import use_openapi, use_redoc, use_swagger_ui
from openapi_ui.schemas import (
    OAuth2ClientSettings,
    OpenApiSettings,
    ReDocSettings,
    SwaggerUiSettings,
    forwarded_prefix_transform,
)
from openapi_ui.services.composition_service import (
    DocumentSource,
    compose_openapi,
    compose_ui,
)
from openapi_ui.services.controller_discovery import (
    get_controller_routers,
    resolve_controllers,
)

__all__ = [
    "DocumentSource",
    "OAuth2ClientSettings",
    "OpenApiSettings",
    "PipelineStage",
    "ReDocSettings",
    "SwaggerUiSettings",
    "UiFlavor",
    "compose_openapi",
    "compose_ui",
    "forwarded_prefix_transform",
    "get_controller_routers",
    "install",
    "resolve_controllers",
    "use_openapi",
    "use_redoc",
    "use_swagger_ui",
]
