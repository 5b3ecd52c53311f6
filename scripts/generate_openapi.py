"""Export the OpenAPI document generated for the routers of one or more modules.

Usage:
    python -m scripts.generate_openapi openapi_ui.api.v1.status_router -o openapi.json
    python -m scripts.generate_openapi myapp.api --title "My API" -o openapi.yaml
"""

import argparse
from pathlib import Path

from openapi_ui.schemas.openapi_settings import OpenApiSettings
from openapi_ui.services.controller_discovery import resolve_controllers
from openapi_ui.services.document_service import (
    build_document,
    media_type_for,
    serialize_document,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Export an OpenAPI document")
    parser.add_argument("modules", nargs="+", help="Modules or packages to scan")
    parser.add_argument("-o", "--output", default="openapi.json", help="Output file")
    parser.add_argument("--title", default=None, help="Document title")
    parser.add_argument("--version", default=None, help="Document version")
    args = parser.parse_args()

    settings = OpenApiSettings()
    if args.title:
        settings.title = args.title
    if args.version:
        settings.version = args.version

    controllers = resolve_controllers(modules=args.modules) or []
    document = build_document(controllers, settings)

    output = Path(args.output)
    output.write_bytes(serialize_document(document, media_type_for(output.name)) + b"\n")
    print(f"Generated {output} ({len(document.get('paths', {}))} endpoints)")


if __name__ == "__main__":
    main()
