"""Documentation routes configuration."""

from pydantic import BaseModel


class DocsConfig(BaseModel, frozen=True):
    """Documentation route and document metadata settings."""

    base_path: str | None
    document_path: str
    swagger_ui_path: str
    redoc_path: str
    title: str
    version: str
    openapi_version: str
    exception_cache_seconds: float
