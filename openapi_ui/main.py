"""Demo FastAPI host with the documentation middleware mounted."""

import structlog
import uvicorn
from fastapi import FastAPI

from openapi_ui.api.v1.status_router import router as status_router
from openapi_ui.core.config import settings
from openapi_ui.extensions import use_redoc, use_swagger_ui

logger = structlog.get_logger()


def create_app() -> FastAPI:
    """Build the demo app; FastAPI's own docs routes are disabled."""
    application = FastAPI(
        title=settings.docs.title,
        version=settings.docs.version,
        debug=settings.app.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @application.get("/health", include_in_schema=False)
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    application.include_router(status_router)

    # Swagger UI generates and hosts the document; ReDoc reuses it.
    use_swagger_ui(application, module="openapi_ui.api.v1.status_router")
    use_redoc(application)
    return application


app = create_app()


if __name__ == "__main__":
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.app.env,
        url=settings.server.base_url,
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
