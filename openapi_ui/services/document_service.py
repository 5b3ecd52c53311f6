"""OpenAPI document generation and serialization."""

import json
import time
from collections.abc import Callable, Iterable
from typing import Any

import structlog
import yaml
from fastapi import APIRouter
from fastapi.openapi.utils import get_openapi
from starlette.requests import Request

from openapi_ui.core.exceptions import DocumentGenerationError
from openapi_ui.schemas.openapi_settings import OpenApiSettings

logger = structlog.get_logger()

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
YAML_MEDIA_TYPE = "application/yaml; charset=utf-8"


def media_type_for(path: str) -> str:
    """Pick the serialization format from the document route's extension."""
    if path.lower().endswith((".yaml", ".yml")):
        return YAML_MEDIA_TYPE
    return JSON_MEDIA_TYPE


def serialize_document(document: dict[str, Any], media_type: str) -> bytes:
    if media_type == YAML_MEDIA_TYPE:
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True).encode()
    return json.dumps(document, ensure_ascii=False).encode()


def build_document(
    controllers: Iterable[APIRouter],
    settings: OpenApiSettings,
    servers: list[dict[str, str]] | None = None,
) -> dict[str, Any]:
    """Run the FastAPI generator over the routes of ``controllers``.

    Paths are taken as the routers hold them: a router's own ``prefix`` is
    included, a prefix given later to ``include_router`` is not.
    """
    routes = [route for router in controllers for route in router.routes]
    return get_openapi(
        title=settings.title,
        version=settings.version,
        openapi_version=settings.openapi_version,
        summary=settings.summary,
        description=settings.description,
        routes=routes,
        tags=settings.tags,
        servers=servers,
    )


class OpenApiDocumentService:
    """Generates the document once and serves the cached bytes afterwards.

    A failed generation is replayed for ``exception_cache_seconds`` before
    the next request retries it.
    """

    def __init__(
        self,
        controllers: Iterable[APIRouter] | None,
        settings: OpenApiSettings,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._controllers = list(controllers or [])
        self._settings = settings
        self._clock = clock
        self.media_type = media_type_for(settings.actual_document_path)

        self._document: bytes | None = None
        self._error: DocumentGenerationError | None = None
        self._error_at = 0.0

    def _servers(self, request: Request) -> list[dict[str, str]] | None:
        if self._settings.server_url:
            return [{"url": self._settings.server_url}]
        root_path = request.scope.get("root_path", "")
        if root_path:
            return [{"url": root_path}]
        return None

    def generate(self, request: Request) -> dict[str, Any]:
        """Build a fresh document for ``request`` and apply post-processing."""
        document = build_document(
            self._controllers, self._settings, servers=self._servers(request)
        )
        if self._settings.post_process is not None:
            self._settings.post_process(document, request)
        return document

    def render(self, request: Request) -> bytes:
        """Return the serialized document, generating it on first use."""
        if self._error is not None:
            if self._clock() - self._error_at < self._settings.exception_cache_seconds:
                # A new instance per request keeps tracebacks from accumulating.
                raise DocumentGenerationError(self._error.message)
            self._error = None

        if self._document is None:
            try:
                document = self.generate(request)
                self._document = serialize_document(document, self.media_type)
            except Exception as exc:
                self._error = DocumentGenerationError(
                    f"OpenAPI document generation failed: {exc}"
                )
                self._error_at = self._clock()
                logger.exception(
                    "OpenAPI document generation failed",
                    path=self._settings.actual_document_path,
                )
                raise self._error from exc

            logger.info(
                "OpenAPI document generated",
                path=self._settings.actual_document_path,
                controllers=len(self._controllers),
                size=len(self._document),
            )
        return self._document
