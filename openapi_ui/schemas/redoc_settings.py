"""ReDoc settings."""

from typing import Any

from pydantic import Field
from starlette.requests import Request

from openapi_ui.core.config import settings
from openapi_ui.schemas.ui_settings import UiSettingsBase


class ReDocSettings(UiSettingsBase):
    """ReDoc route, assets, theme, and ``Redoc.init`` options."""

    ui_path: str = Field(default_factory=lambda: settings.docs.redoc_path)
    asset_base_url: str = Field(default_factory=lambda: settings.assets.redoc_cdn_url)

    theme: dict[str, Any] | None = None
    additional_settings: dict[str, Any] = Field(default_factory=dict)

    def ui_config(self, request: Request) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.theme:
            options["theme"] = self.theme
        options.update(self.additional_settings)
        return {"url": self.external_document_url(request), "options": options}
