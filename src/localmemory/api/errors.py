"""HTTP translation of errors.

Every error leaves the API with the same JSON body, built by
``error_body``. ``detail`` and ``error`` both repeat the message because
clients of the memory service read one or the other. Exceptions built
here carry the ``X-LocalMemory-Error: 1`` header, which tells the app's
handler to return the body as-is instead of nesting it under ``detail``.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from localmemory.api.schemas.errors import ErrorResponse
from localmemory.core.domain.errors import LocalMemoryError

ERROR_HEADER = "X-LocalMemory-Error"


def error_body(
    code: str, message: str, details: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Render the standard error payload."""
    return ErrorResponse(
        code=code, message=message, details=details, detail=message, error=message
    ).model_dump(exclude_none=True)


def http_exception(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> HTTPException:
    """Build a tagged HTTPException for a route to raise."""
    return HTTPException(
        status_code=status_code,
        detail=error_body(code, message, details),
        headers={ERROR_HEADER: "1"},
    )


def domain_http_exception(exc: LocalMemoryError) -> HTTPException:
    """Translate a domain error into its HTTP counterpart.

    Errors without a status of their own (such as ``ConfigError``) become 500.
    """
    return http_exception(
        status_code=exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=exc.code,
        message=exc.message,
        details=exc.details or None,
    )
