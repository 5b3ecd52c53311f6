"""UI asset configuration."""

from pydantic import BaseModel


class AssetsConfig(BaseModel, frozen=True):
    """Locations of the third-party UI bundles."""

    swagger_ui_cdn_url: str
    redoc_cdn_url: str
