"""Pytest configuration and fixtures."""

from collections.abc import Callable

import anyio
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from tests.sample_controllers import orders, pets

# --- Host application ---


def build_host() -> FastAPI:
    """A FastAPI app with its built-in documentation routes disabled."""
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "healthy"}

    return app


@pytest.fixture
def host_app() -> FastAPI:
    return build_host()


ClientFactory = Callable[..., AsyncClient]


@pytest.fixture
def make_client() -> ClientFactory:
    """Create async test clients bound to an app."""

    def _make(app: FastAPI, root_path: str = "", **kwargs: object) -> AsyncClient:
        transport = ASGITransport(app=app, root_path=root_path)
        return AsyncClient(
            transport=transport, base_url="http://test", **kwargs  # type: ignore[arg-type]
        )

    return _make


# --- Controllers ---


@pytest.fixture
def controllers() -> list:
    """Routers of ``tests.sample_controllers`` in discovery order."""
    return [orders.router, pets.pets, pets.owners]


# --- Requests ---


def make_request(
    path: str = "/",
    headers: dict[str, str] | None = None,
    root_path: str = "",
) -> Request:
    """Build a bare HTTP request for code that only reads scope data."""
    raw_headers = [
        (key.lower().encode(), value.encode()) for key, value in (headers or {}).items()
    ]
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "root_path": root_path,
            "query_string": b"",
            "headers": raw_headers,
        }
    )


async def send_raw(app: FastAPI, path: str, method: str = "GET") -> tuple[int, bytes]:
    """Call ``app`` with ``path`` exactly as given.

    HTTP clients collapse dot segments before sending; servers pass the path
    through untouched, so this drives the ASGI app directly.
    """
    messages: list[dict] = []
    body_sent = False

    async def receive() -> dict:
        # Like a real server: deliver the (empty) body once, then block until
        # the client disconnects, which never happens during the call.
        nonlocal body_sent
        if body_sent:
            await anyio.sleep_forever()
        body_sent = True
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message: dict) -> None:
        messages.append(message)

    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"test")],
        "server": ("test", 80),
        "client": ("127.0.0.1", 50000),
    }
    await app(scope, receive, send)

    status = next(m["status"] for m in messages if m["type"] == "http.response.start")
    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    return status, body
