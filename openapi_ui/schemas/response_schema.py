"""Error response schema shared by the documentation middleware."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response with status, message, and error code."""

    status: int
    message: str
    code: str


def error_response(status: int, message: str, code: str) -> bytes:
    """Serialize an error body ready to be written to the wire."""
    body = ErrorResponse(status=status, message=message, code=code)
    return body.model_dump_json().encode()
