"""UI flavors and the packaged asset bundles that implement them."""

from dataclasses import dataclass
from enum import StrEnum


class UiFlavor(StrEnum):
    SWAGGER_UI = "swagger_ui"
    REDOC = "redoc"


@dataclass(frozen=True)
class UiBundle:
    """Static assets and index template shipped as package data.

    Templates live outside the served assets directory, so the static file
    server can never hand out an unrendered index page.
    """

    package: str
    assets_directory: str
    templates_directory: str
    template: str = "index.html"


def _packaged(name: str) -> UiBundle:
    return UiBundle(
        package="openapi_ui",
        assets_directory=f"resources/{name}/assets",
        templates_directory=f"resources/{name}/templates",
    )


BUNDLES: dict[UiFlavor, UiBundle] = {
    UiFlavor.SWAGGER_UI: _packaged("swagger_ui"),
    UiFlavor.REDOC: _packaged("redoc"),
}


def bundle_for(flavor: UiFlavor) -> UiBundle:
    return BUNDLES[flavor]
