"""
Response envelopes shared by every endpoint.

Successful responses carry ``success: true`` and a ``data`` payload;
failures carry ``success: false`` and an ``error`` message.
"""

from fastapi.responses import JSONResponse

from up_real_estate.db.models import CamelModel


class ErrorResponse(CamelModel):
    """Failure envelope."""

    success: bool = False
    error: str


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )
