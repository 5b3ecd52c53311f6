"""Status API router of the demo host."""

from fastapi import APIRouter
from pydantic import BaseModel

from openapi_ui.core.config import settings

router = APIRouter(prefix="/api/v1/status", tags=["status"])


class StatusResponse(BaseModel):
    """Running application metadata."""

    app: str
    environment: str
    version: str


@router.get("", response_model=StatusResponse)
async def get_status() -> StatusResponse:
    """Report the application name, environment and API version."""
    return StatusResponse(
        app=settings.app.name,
        environment=settings.app.env,
        version=settings.docs.version,
    )
