"""Composition of the documentation middleware for each registration flow."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from fastapi import APIRouter
from starlette.middleware import Middleware

from openapi_ui.core.bundles import UiFlavor, bundle_for
from openapi_ui.core.middleware import (
    OpenApiDocumentMiddleware,
    RedirectToIndexMiddleware,
    StaticFilesMiddleware,
    UiIndexMiddleware,
)
from openapi_ui.schemas.openapi_settings import OpenApiSettings
from openapi_ui.schemas.ui_settings import UiSettingsBase

S = TypeVar("S", bound=OpenApiSettings)


class DocumentSource(StrEnum):
    """Where the document referenced by a UI comes from."""

    GENERATED = "generated"
    EXTERNALLY_HOSTED = "externally_hosted"


@dataclass(frozen=True)
class UiComposition:
    """Ordered middleware for one UI registration."""

    flavor: UiFlavor
    document_source: DocumentSource
    middleware: list[Middleware]


def build_settings(
    settings_cls: type[S],
    settings: S | None = None,
    configure: Callable[[S], None] | None = None,
) -> S:
    """Start from ``settings`` (or the defaults) and apply ``configure``.

    The caller's object is copied so later changes to it cannot leak into
    the registered middleware. Exceptions raised by ``configure`` propagate.
    """
    result = settings.model_copy(deep=True) if settings is not None else settings_cls()
    if configure is not None:
        configure(result)
    return result


def compose_openapi(
    controllers: Sequence[APIRouter] | None,
    settings: OpenApiSettings,
) -> list[Middleware]:
    """Middleware serving the generated document; always present."""
    return [
        Middleware(
            OpenApiDocumentMiddleware,
            path=settings.actual_document_path,
            controllers=controllers or [],
            settings=settings,
        )
    ]


def compose_ui(
    flavor: UiFlavor,
    controllers: Sequence[APIRouter] | None,
    settings: UiSettingsBase,
) -> UiComposition:
    """Middleware for a UI: document, redirect, index page, static files.

    The document middleware is left out when ``controllers`` is ``None``;
    the UI then points at a document hosted elsewhere.
    """
    bundle = bundle_for(flavor)
    middleware: list[Middleware] = []

    if controllers is not None:
        source = DocumentSource.GENERATED
        middleware.extend(compose_openapi(controllers, settings))
    else:
        source = DocumentSource.EXTERNALLY_HOSTED

    middleware.extend(
        [
            Middleware(
                RedirectToIndexMiddleware,
                ui_path=settings.actual_ui_path,
                document_path=settings.actual_document_path,
                transform_to_external_path=settings.transform_to_external_path,
            ),
            Middleware(
                UiIndexMiddleware,
                path=settings.index_path,
                settings=settings,
                bundle=bundle,
            ),
            Middleware(
                StaticFilesMiddleware,
                request_path=settings.actual_ui_path,
                bundle=bundle,
            ),
        ]
    )
    return UiComposition(flavor=flavor, document_source=source, middleware=middleware)
