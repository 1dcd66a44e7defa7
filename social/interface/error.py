"""Interface layer error mapping.

Domain errors are rendered as ``{"kind", "message", "errors"}`` with the
status code matching their kind.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from social.domain.error import DomainError, ErrorKind, InvalidInputError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as JSON."""
    status_code = STATUS_BY_KIND[exc.kind]
    errors = exc.errors if isinstance(exc, InvalidInputError) else {}

    if status_code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, kind=exc.kind.value, error=exc.message
        )
    else:
        logfire.info(
            "Request rejected", path=request.url.path, kind=exc.kind.value, error=exc.message
        )

    return JSONResponse(
        status_code=status_code,
        content={"kind": exc.kind.value, "message": exc.message, "errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
