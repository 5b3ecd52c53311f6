"""Tests for pipeline placement and route joining."""

import pytest
from fastapi import FastAPI
from starlette.middleware import Middleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from openapi_ui.core.pipeline import PipelineStage, install, join_path, normalize_route


class _Marker:
    def __init__(self, app, name: str) -> None:  # type: ignore[no-untyped-def]
        self.app = app
        self.name = name

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        await self.app(scope, receive, send)


class TestJoinPath:
    """Base path joining."""

    def test_without_base(self) -> None:
        assert join_path(None, "/swagger") == "/swagger"
        assert join_path("", "/swagger") == "/swagger"

    def test_with_base(self) -> None:
        assert join_path("/api", "/swagger") == "/api/swagger"

    def test_trailing_separator_not_doubled(self) -> None:
        assert join_path("/api/", "/swagger") == "/api/swagger"


class TestNormalizeRoute:
    """Route comparison form."""

    def test_ignores_slashes_and_case(self) -> None:
        assert normalize_route("/Swagger/") == normalize_route("swagger")

    def test_collapses_dot_segments(self) -> None:
        assert normalize_route("/swagger/./index.html") == "swagger/index.html"
        assert normalize_route("/swagger/js/../index.html") == "swagger/index.html"
        assert normalize_route("//swagger//index.html") == "swagger/index.html"

    def test_root(self) -> None:
        assert normalize_route("/") == ""
        assert normalize_route("") == ""


class TestInstall:
    """Descriptor placement in the middleware stack."""

    def test_map_handler_appends_after_existing(self) -> None:
        app = FastAPI()
        app.add_middleware(GZipMiddleware)
        descriptors = [Middleware(_Marker, name="a"), Middleware(_Marker, name="b")]

        install(app, descriptors)

        assert [m.cls for m in app.user_middleware] == [GZipMiddleware, _Marker, _Marker]
        assert [m.kwargs["name"] for m in app.user_middleware[1:]] == ["a", "b"]

    def test_middleware_added_later_stays_outside(self) -> None:
        app = FastAPI()
        install(app, [Middleware(_Marker, name="a")])
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=["*"])
        assert app.user_middleware[-1].cls is _Marker

    def test_outermost_prepends_in_order(self) -> None:
        app = FastAPI()
        app.add_middleware(GZipMiddleware)
        descriptors = [Middleware(_Marker, name="a"), Middleware(_Marker, name="b")]

        install(app, descriptors, PipelineStage.OUTERMOST)

        assert [m.cls for m in app.user_middleware] == [_Marker, _Marker, GZipMiddleware]
        assert app.user_middleware[0].kwargs["name"] == "a"

    def test_returns_app(self) -> None:
        app = FastAPI()
        assert install(app, []) is app

    def test_after_startup_raises(self) -> None:
        app = FastAPI()
        app.middleware_stack = app.build_middleware_stack()
        with pytest.raises(RuntimeError):
            install(app, [Middleware(_Marker, name="late")])
