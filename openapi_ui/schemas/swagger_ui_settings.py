"""Swagger UI settings."""

from typing import Any, Literal

from pydantic import Field
from starlette.requests import Request

from openapi_ui.core.config import settings
from openapi_ui.schemas.oauth2_settings import OAuth2ClientSettings
from openapi_ui.schemas.ui_settings import UiSettingsBase


class SwaggerUiSettings(UiSettingsBase):
    """Swagger UI route, assets, and ``SwaggerUIBundle`` options."""

    ui_path: str = Field(default_factory=lambda: settings.docs.swagger_ui_path)
    asset_base_url: str = Field(
        default_factory=lambda: settings.assets.swagger_ui_cdn_url
    )

    doc_expansion: Literal["list", "full", "none"] = "list"
    deep_linking: bool = True
    enable_try_it_out: bool = False
    persist_authorization: bool = False
    query_config_enabled: bool = False
    tags_sorter: Literal["alpha"] | None = None
    operations_sorter: Literal["alpha", "method"] | None = None
    validator_url: str | None = None
    oauth2_client: OAuth2ClientSettings | None = None
    additional_settings: dict[str, Any] = Field(default_factory=dict)

    def ui_config(self, request: Request) -> dict[str, Any]:
        config: dict[str, Any] = {
            "url": self.external_document_url(request),
            "dom_id": "#swagger-ui",
            "deepLinking": self.deep_linking,
            "docExpansion": self.doc_expansion,
            "tryItOutEnabled": self.enable_try_it_out,
            "persistAuthorization": self.persist_authorization,
            "queryConfigEnabled": self.query_config_enabled,
            "validatorUrl": self.validator_url,
        }
        if self.tags_sorter:
            config["tagsSorter"] = self.tags_sorter
        if self.operations_sorter:
            config["operationsSorter"] = self.operations_sorter
        config.update(self.additional_settings)
        return config

    def template_context(self, request: Request) -> dict[str, Any]:
        context = super().template_context(request)
        context["oauth2"] = (
            self.oauth2_client.to_init_oauth() if self.oauth2_client else None
        )
        return context
