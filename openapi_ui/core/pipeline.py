"""Pipeline stage placement and route joining for documentation middleware."""

import posixpath
from collections.abc import Sequence
from enum import StrEnum

from starlette.applications import Starlette
from starlette.middleware import Middleware


class PipelineStage(StrEnum):
    """Where documentation middleware is placed in the application stack."""

    # After middleware already registered, right before routing.
    MAP_HANDLER = "map_handler"
    # Ahead of every middleware registered so far.
    OUTERMOST = "outermost"


def join_path(base_path: str | None, path: str) -> str:
    """Prefix ``path`` with ``base_path`` without doubling the separator."""
    if not base_path:
        return path
    return base_path.rstrip("/") + path


def normalize_route(path: str) -> str:
    """Canonical form used when comparing request paths with routes.

    Dot segments and repeated separators are collapsed, so
    ``/swagger/./index.html`` and ``/swagger/index.html`` compare equal.
    """
    return posixpath.normpath("/" + path).strip("/").lower()


def install(
    app: Starlette,
    descriptors: Sequence[Middleware],
    stage: PipelineStage = PipelineStage.MAP_HANDLER,
) -> Starlette:
    """Install middleware descriptors so they execute in the given order.

    ``user_middleware[0]`` is the outermost layer, so appending keeps the
    descriptors behind everything registered earlier while preserving their
    relative order.
    """
    if app.middleware_stack is not None:
        raise RuntimeError("Cannot add middleware after an application has started")

    if stage is PipelineStage.MAP_HANDLER:
        app.user_middleware.extend(descriptors)
    else:
        app.user_middleware[0:0] = list(descriptors)
    return app
