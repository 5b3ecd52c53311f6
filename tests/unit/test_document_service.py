"""Tests for OpenAPI document generation."""

import json

import pytest
import yaml
from fastapi import FastAPI

from openapi_ui.core.exceptions import DocumentGenerationError
from openapi_ui.schemas.openapi_settings import OpenApiSettings
from openapi_ui.services.document_service import (
    JSON_MEDIA_TYPE,
    YAML_MEDIA_TYPE,
    OpenApiDocumentService,
    build_document,
    media_type_for,
)
from tests.conftest import make_request
from tests.sample_controllers import orders


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestBuildDocument:
    """Generator delegation."""

    def test_paths_from_all_controllers(self, controllers: list) -> None:
        document = build_document(controllers, OpenApiSettings(title="Pets"))
        assert document["info"]["title"] == "Pets"
        assert set(document["paths"]) == {"/orders/{order_id}", "/pets", "/owners"}
        assert set(document["paths"]["/pets"]) == {"get", "post"}

    def test_paths_as_declared_by_router(self, host_app: FastAPI) -> None:
        host_app.include_router(orders.router, prefix="/api")
        document = build_document([orders.router], OpenApiSettings())
        assert set(document["paths"]) == {"/orders/{order_id}"}

    def test_excluded_routes_skipped(self, controllers: list) -> None:
        document = build_document(controllers, OpenApiSettings())
        assert "/owners/internal" not in document["paths"]

    def test_no_controllers(self) -> None:
        document = build_document([], OpenApiSettings())
        assert document.get("paths", {}) == {}
        assert document["openapi"] == "3.1.0"

    def test_servers(self, controllers: list) -> None:
        document = build_document(
            controllers, OpenApiSettings(), servers=[{"url": "/gateway"}]
        )
        assert document["servers"] == [{"url": "/gateway"}]


class TestMediaType:
    """Serialization format selection."""

    def test_json_by_default(self) -> None:
        assert media_type_for("/swagger/v1/swagger.json") == JSON_MEDIA_TYPE

    @pytest.mark.parametrize("path", ["/openapi.yaml", "/openapi.YML"])
    def test_yaml_extensions(self, path: str) -> None:
        assert media_type_for(path) == YAML_MEDIA_TYPE


class TestOpenApiDocumentService:
    """Caching, post-processing and failure replay."""

    def test_render_json(self, controllers: list) -> None:
        service = OpenApiDocumentService(controllers, OpenApiSettings())
        document = json.loads(service.render(make_request()))
        assert "/pets" in document["paths"]

    def test_render_yaml(self, controllers: list) -> None:
        settings = OpenApiSettings(document_path="/openapi.yaml")
        service = OpenApiDocumentService(controllers, settings)
        document = yaml.safe_load(service.render(make_request()))
        assert service.media_type == YAML_MEDIA_TYPE
        assert "/orders/{order_id}" in document["paths"]

    def test_document_cached(self, controllers: list) -> None:
        calls: list[str] = []
        settings = OpenApiSettings(
            post_process=lambda doc, req: calls.append(req.url.path)
        )
        service = OpenApiDocumentService(controllers, settings)

        first = service.render(make_request("/a"))
        second = service.render(make_request("/b"))

        assert first is second
        assert calls == ["/a"]

    def test_post_process_mutates_document(self, controllers: list) -> None:
        def add_contact(document: dict, request: object) -> None:
            document["info"]["contact"] = {"name": "API team"}

        service = OpenApiDocumentService(
            controllers, OpenApiSettings(post_process=add_contact)
        )
        document = json.loads(service.render(make_request()))
        assert document["info"]["contact"] == {"name": "API team"}

    def test_server_url_setting_wins(self, controllers: list) -> None:
        settings = OpenApiSettings(server_url="https://api.example.com")
        service = OpenApiDocumentService(controllers, settings)
        document = json.loads(service.render(make_request(root_path="/gateway")))
        assert document["servers"] == [{"url": "https://api.example.com"}]

    def test_root_path_becomes_server(self, controllers: list) -> None:
        service = OpenApiDocumentService(controllers, OpenApiSettings())
        document = json.loads(service.render(make_request(root_path="/gateway")))
        assert document["servers"] == [{"url": "/gateway"}]

    def test_failure_replayed_until_expiry(self, controllers: list) -> None:
        attempts: list[int] = []

        def failing(document: dict, request: object) -> None:
            attempts.append(1)
            if len(attempts) < 3:
                raise KeyError("components")

        clock = _Clock()
        settings = OpenApiSettings(post_process=failing, exception_cache_seconds=10)
        service = OpenApiDocumentService(controllers, settings, clock=clock)

        with pytest.raises(DocumentGenerationError) as first:
            service.render(make_request())
        clock.now += 5
        with pytest.raises(DocumentGenerationError) as replayed:
            service.render(make_request())
        assert replayed.value is not first.value
        assert replayed.value.message == first.value.message
        assert len(attempts) == 1

        clock.now += 6
        with pytest.raises(DocumentGenerationError):
            service.render(make_request())
        assert len(attempts) == 2

        clock.now += 11
        assert json.loads(service.render(make_request()))["openapi"] == "3.1.0"
        assert len(attempts) == 3

    def test_failure_message_carries_cause(self, controllers: list) -> None:
        def failing(document: dict, request: object) -> None:
            raise ValueError("bad schema")

        service = OpenApiDocumentService(
            controllers, OpenApiSettings(post_process=failing)
        )
        with pytest.raises(DocumentGenerationError, match="bad schema"):
            service.render(make_request())
