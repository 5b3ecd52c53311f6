"""ASGI middleware serving the OpenAPI document and documentation UIs."""

import posixpath
import stat
from collections.abc import Iterable
from functools import cached_property
from urllib.parse import quote

import anyio
import structlog
from fastapi import APIRouter
from jinja2 import Environment, PackageLoader, TemplateNotFound, select_autoescape
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from openapi_ui.core.bundles import UiBundle
from openapi_ui.core.config import settings as app_settings
from openapi_ui.core.exceptions import AppException, UiTemplateNotFoundError
from openapi_ui.core.pipeline import normalize_route
from openapi_ui.schemas.openapi_settings import OpenApiSettings
from openapi_ui.schemas.response_schema import error_response
from openapi_ui.schemas.ui_settings import PathTransform, UiSettingsBase
from openapi_ui.services.document_service import OpenApiDocumentService

logger = structlog.get_logger()

READ_METHODS = ("GET", "HEAD")


def _is_read_request(scope: Scope) -> bool:
    return scope["type"] == "http" and scope.get("method", "GET") in READ_METHODS


def _matches(scope: Scope, route: str) -> bool:
    return normalize_route(scope["path"]) == normalize_route(route)


async def send_error(send: Send, exc: AppException) -> None:
    """Send a JSON error response directly."""
    message = exc.message if app_settings.app.expose_error_details else exc.code
    body = error_response(exc.status_code, message, exc.code)

    await send(
        {
            "type": "http.response.start",
            "status": exc.status_code,
            "headers": [
                [b"content-type", b"application/json"],
                [b"content-length", str(len(body)).encode()],
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


class OpenApiDocumentMiddleware:
    """Serve the generated OpenAPI document at ``path``."""

    def __init__(
        self,
        app: ASGIApp,
        path: str,
        controllers: Iterable[APIRouter] | None,
        settings: OpenApiSettings,
    ) -> None:
        self.app = app
        self.path = path
        self.service = OpenApiDocumentService(controllers, settings)
        # Serializes generation so concurrent first requests build the document once.
        self._lock = anyio.Lock()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not (_is_read_request(scope) and _matches(scope, self.path)):
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        try:
            async with self._lock:
                body = await run_in_threadpool(self.service.render, request)
        except AppException as exc:
            await send_error(send, exc)
            return

        response = Response(body, media_type=self.service.media_type)
        await response(scope, receive, send)


class RedirectToIndexMiddleware:
    """Redirect requests for the UI root to its index page."""

    def __init__(
        self,
        app: ASGIApp,
        ui_path: str,
        document_path: str | None,
        transform_to_external_path: PathTransform,
    ) -> None:
        self.app = app
        self.ui_path = ui_path
        self.document_path = document_path
        self.transform = transform_to_external_path

    def location(self, request: Request) -> str:
        """Index URL the browser is sent to, as seen through any proxy."""
        location = self.transform(self.ui_path, request).rstrip("/") + "/index.html"
        if self.document_path:
            document_url = self.transform(self.document_path, request)
            location += "?url=" + quote(document_url, safe="/:")
        return location

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not (_is_read_request(scope) and _matches(scope, self.ui_path)):
            await self.app(scope, receive, send)
            return

        location = self.location(Request(scope, receive))
        response = RedirectResponse(location, status_code=302)
        await response(scope, receive, send)


class UiIndexMiddleware:
    """Render the bundle's index template at ``path``."""

    def __init__(
        self,
        app: ASGIApp,
        path: str,
        settings: UiSettingsBase,
        bundle: UiBundle,
    ) -> None:
        self.app = app
        self.path = path
        self.settings = settings
        self.bundle = bundle

    @cached_property
    def environment(self) -> Environment:
        return Environment(
            loader=PackageLoader(self.bundle.package, self.bundle.templates_directory),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, request: Request) -> str:
        try:
            template = self.environment.get_template(self.bundle.template)
        except (TemplateNotFound, ValueError) as exc:
            # PackageLoader raises ValueError when the templates directory is missing
            raise UiTemplateNotFoundError(
                f"{self.bundle.templates_directory}/{self.bundle.template}"
            ) from exc
        return template.render(**self.settings.template_context(request))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not (_is_read_request(scope) and _matches(scope, self.path)):
            await self.app(scope, receive, send)
            return

        try:
            html = self.render(Request(scope, receive))
        except UiTemplateNotFoundError as exc:
            logger.error("UI index template missing", template=exc.template)
            await send_error(send, exc)
            return

        response = HTMLResponse(html)
        await response(scope, receive, send)


class StaticFilesMiddleware:
    """Serve the bundle's files under ``request_path``.

    Requests for files the bundle does not contain continue down the
    pipeline, so the host application decides how to answer them.
    """

    def __init__(self, app: ASGIApp, request_path: str, bundle: UiBundle) -> None:
        self.app = app
        self.prefix = normalize_route(request_path)
        self.bundle = bundle
        self.files = StaticFiles(packages=[(bundle.package, bundle.assets_directory)])

    def relative_path(self, path: str) -> str | None:
        """Path inside the bundle, or ``None`` when outside ``request_path``."""
        stripped = posixpath.normpath("/" + path).strip("/")
        if not self.prefix:
            return stripped or None
        if not stripped.lower().startswith(self.prefix + "/"):
            return None
        return stripped[len(self.prefix) + 1 :] or None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        relative = self.relative_path(scope["path"]) if _is_read_request(scope) else None
        if relative is None:
            await self.app(scope, receive, send)
            return

        _, stat_result = await run_in_threadpool(self.files.lookup_path, relative)
        if stat_result is None or not stat.S_ISREG(stat_result.st_mode):
            await self.app(scope, receive, send)
            return

        child_scope = dict(scope)
        child_scope["path"] = "/" + relative
        child_scope["root_path"] = ""
        await self.files(child_scope, receive, send)
