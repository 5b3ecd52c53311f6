"""Settings shared by the documentation UIs."""

from collections.abc import Callable
from typing import Any

from pydantic import Field
from starlette.requests import Request

from openapi_ui.core.config import settings
from openapi_ui.core.pipeline import join_path
from openapi_ui.schemas.openapi_settings import OpenApiSettings

PathTransform = Callable[[str, Request], str]


def identity_transform(route: str, request: Request) -> str:
    """Serve routes exactly as they are registered."""
    return route


def forwarded_prefix_transform(route: str, request: Request) -> str:
    """Prefix routes with the ``X-Forwarded-Prefix`` set by a reverse proxy."""
    prefix = request.headers.get("x-forwarded-prefix", "")
    return join_path(prefix, route)


class UiSettingsBase(OpenApiSettings):
    """Routes and page customization common to Swagger UI and ReDoc."""

    ui_path: str
    document_title: str = Field(
        default_factory=lambda: f"{settings.docs.title} documentation"
    )
    transform_to_external_path: PathTransform = identity_transform

    asset_base_url: str
    custom_stylesheet_path: str | None = None
    custom_javascript_path: str | None = None
    custom_head_content: str = ""

    @property
    def actual_ui_path(self) -> str:
        return join_path(self.middleware_base_path, self.ui_path)

    @property
    def index_path(self) -> str:
        return self.actual_ui_path + "/index.html"

    def external_document_url(self, request: Request) -> str:
        """Document URL as seen by the browser for this request."""
        return self.transform_to_external_path(self.actual_document_path, request)

    def ui_config(self, request: Request) -> dict[str, Any]:
        """Options handed to the UI library's initializer."""
        return {"url": self.external_document_url(request)}

    def template_context(self, request: Request) -> dict[str, Any]:
        """Values available to the bundle's ``index.html`` template."""
        return {
            "title": self.document_title,
            "document_url": self.external_document_url(request),
            "asset_base_url": self.asset_base_url.rstrip("/"),
            "custom_stylesheet_path": self.custom_stylesheet_path,
            "custom_javascript_path": self.custom_javascript_path,
            "custom_head_content": self.custom_head_content,
            "config": self.ui_config(request),
        }
