"""Settings for serving a generated OpenAPI document."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field
from starlette.requests import Request

from openapi_ui.core.config import settings
from openapi_ui.core.pipeline import join_path

PostProcessor = Callable[[dict[str, Any], Request], None]


class OpenApiSettings(BaseModel):
    """Document route and generator metadata.

    Defaults come from the environment-backed configuration; the
    ``configure`` callback passed at registration may change any field.
    """

    document_path: str = Field(default_factory=lambda: settings.docs.document_path)
    middleware_base_path: str | None = Field(
        default_factory=lambda: settings.docs.base_path
    )

    title: str = Field(default_factory=lambda: settings.docs.title)
    version: str = Field(default_factory=lambda: settings.docs.version)
    openapi_version: str = Field(default_factory=lambda: settings.docs.openapi_version)
    description: str | None = None
    summary: str | None = None
    tags: list[dict[str, Any]] | None = None
    server_url: str | None = None

    post_process: PostProcessor | None = None
    exception_cache_seconds: float = Field(
        default_factory=lambda: settings.docs.exception_cache_seconds
    )

    @property
    def actual_document_path(self) -> str:
        return join_path(self.middleware_base_path, self.document_path)
