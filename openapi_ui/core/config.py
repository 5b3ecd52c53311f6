"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from openapi_ui.core.settings import (
    AppConfig,
    AssetsConfig,
    DocsConfig,
    ServerConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.docs.ui_path).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = Field(
        default="openapi-ui-mount",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )

    # Document metadata
    api_title: str = Field(
        default="API",
        description="Title of the generated OpenAPI document",
    )
    api_version: str = Field(
        default="1.0.0",
        description="Version of the generated OpenAPI document",
    )
    openapi_version: str = Field(
        default="3.1.0",
        description="OpenAPI specification version of the generated document",
    )

    # Documentation paths
    docs_base_path: str | None = Field(
        default=None,
        description="Base path prefixed to every documentation route",
    )
    docs_document_path: str = Field(
        default="/swagger/v1/swagger.json",
        description="Route serving the generated document",
    )
    swagger_ui_path: str = Field(
        default="/swagger",
        description="Root route of Swagger UI",
    )
    redoc_path: str = Field(
        default="/redoc",
        description="Root route of ReDoc",
    )
    document_exception_cache_seconds: float = Field(
        default=10.0,
        ge=0,
        description="Seconds a document generation failure is replayed",
    )

    # UI assets
    swagger_ui_cdn_url: str = Field(
        default="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5",
        description="Base URL of the swagger-ui-dist bundle",
    )
    redoc_cdn_url: str = Field(
        default="https://cdn.jsdelivr.net/npm/redoc@2/bundles",
        description="Base URL of the ReDoc standalone bundle",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port",
    )

    # --- Domain properties ---

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
        )

    @cached_property
    def docs(self) -> DocsConfig:
        """Documentation route and document metadata configuration."""
        return DocsConfig(
            base_path=self.docs_base_path,
            document_path=self.docs_document_path,
            swagger_ui_path=self.swagger_ui_path,
            redoc_path=self.redoc_path,
            title=self.api_title,
            version=self.api_version,
            openapi_version=self.openapi_version,
            exception_cache_seconds=self.document_exception_cache_seconds,
        )

    @cached_property
    def assets(self) -> AssetsConfig:
        """UI asset location configuration."""
        return AssetsConfig(
            swagger_ui_cdn_url=self.swagger_ui_cdn_url,
            redoc_cdn_url=self.redoc_cdn_url,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
        )

    # --- Convenience properties (delegate to domain configs) ---

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app.is_development


# Global settings instance
settings = Settings()
