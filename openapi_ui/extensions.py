"""Register OpenAPI document generation, Swagger UI and ReDoc on an app."""

from collections.abc import Callable, Iterable, Sequence

import structlog
from fastapi import APIRouter
from starlette.applications import Starlette

from openapi_ui.core.bundles import UiFlavor
from openapi_ui.core.pipeline import PipelineStage, install
from openapi_ui.schemas.openapi_settings import OpenApiSettings
from openapi_ui.schemas.redoc_settings import ReDocSettings
from openapi_ui.schemas.swagger_ui_settings import SwaggerUiSettings
from openapi_ui.schemas.ui_settings import UiSettingsBase
from openapi_ui.services.composition_service import (
    DocumentSource,
    build_settings,
    compose_openapi,
    compose_ui,
)
from openapi_ui.services.controller_discovery import ModuleRef, resolve_controllers

logger = structlog.get_logger()


def use_openapi(
    app: Starlette,
    controllers: Iterable[APIRouter] | None = None,
    *,
    module: ModuleRef | None = None,
    modules: Sequence[ModuleRef] | None = None,
    settings: OpenApiSettings | None = None,
    configure: Callable[[OpenApiSettings], None] | None = None,
) -> Starlette:
    """Serve the OpenAPI document generated for the given controllers.

    Operations are documented under the paths their routers declare. A
    prefix added with ``app.include_router(router, prefix=...)`` is not part
    of the router, so pass routers that carry their full prefix themselves.
    """
    resolved = resolve_controllers(controllers, module=module, modules=modules)
    document_settings = build_settings(OpenApiSettings, settings, configure)

    install(app, compose_openapi(resolved, document_settings), PipelineStage.MAP_HANDLER)
    logger.info(
        "OpenAPI document registered",
        document_path=document_settings.actual_document_path,
        controllers=len(resolved or []),
    )
    return app


def _use_ui(
    app: Starlette,
    flavor: UiFlavor,
    controllers: list[APIRouter] | None,
    settings: UiSettingsBase,
) -> Starlette:
    composition = compose_ui(flavor, controllers, settings)
    install(app, composition.middleware, PipelineStage.MAP_HANDLER)

    if composition.document_source is DocumentSource.EXTERNALLY_HOSTED:
        logger.info(
            "No controllers supplied, UI expects an externally hosted document",
            flavor=flavor,
            document_path=settings.actual_document_path,
        )
    logger.info(
        "Documentation UI registered",
        flavor=flavor,
        ui_path=settings.actual_ui_path,
        document_path=settings.actual_document_path,
        document_source=composition.document_source,
        middleware=[m.cls.__name__ for m in composition.middleware],
    )
    return app


def use_swagger_ui(
    app: Starlette,
    controllers: Iterable[APIRouter] | None = None,
    *,
    module: ModuleRef | None = None,
    modules: Sequence[ModuleRef] | None = None,
    settings: SwaggerUiSettings | None = None,
    configure: Callable[[SwaggerUiSettings], None] | None = None,
) -> Starlette:
    """Serve Swagger UI, plus the generated document when controllers are given.

    Without controllers only the UI is served; it then loads the document
    from ``document_path``, which something else must host. Generated paths
    follow the routers as declared; see ``use_openapi`` about
    ``include_router`` prefixes.
    """
    resolved = resolve_controllers(controllers, module=module, modules=modules)
    ui_settings = build_settings(SwaggerUiSettings, settings, configure)
    return _use_ui(app, UiFlavor.SWAGGER_UI, resolved, ui_settings)


def use_redoc(
    app: Starlette,
    controllers: Iterable[APIRouter] | None = None,
    *,
    module: ModuleRef | None = None,
    modules: Sequence[ModuleRef] | None = None,
    settings: ReDocSettings | None = None,
    configure: Callable[[ReDocSettings], None] | None = None,
) -> Starlette:
    """Serve ReDoc, plus the generated document when controllers are given.

    Like ``use_openapi``, paths come from the routers themselves and miss any
    prefix added by ``include_router``.
    """
    resolved = resolve_controllers(controllers, module=module, modules=modules)
    ui_settings = build_settings(ReDocSettings, settings, configure)
    return _use_ui(app, UiFlavor.REDOC, resolved, ui_settings)
