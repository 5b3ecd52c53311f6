"""Application exception classes."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# --- Internal Server Error (500) ---


class DocumentGenerationError(AppException):
    """The OpenAPI document could not be generated."""

    def __init__(self, message: str = "OpenAPI document generation failed") -> None:
        super().__init__(
            message=message,
            code="DOCUMENT_GENERATION_FAILED",
            status_code=500,
        )


class UiTemplateNotFoundError(AppException):
    """The UI bundle does not ship the requested index template."""

    def __init__(self, template: str) -> None:
        super().__init__(
            message=f"UI index template not found: {template}",
            code="UI_TEMPLATE_NOT_FOUND",
            status_code=500,
        )
        self.template = template
