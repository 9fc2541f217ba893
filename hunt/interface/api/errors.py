"""Mapping of domain errors onto HTTP responses.

Every procedure shares the same mapping, so it is registered once on the
app instead of being repeated in each route.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hunt.domain.error import ConflictError, DomainError, NotFoundError


def _procedure(request: Request) -> str:
    return request.url.path.strip("/") or "request"


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found",
        procedure=_procedure(request),
        resource=exc.resource,
        identifier=exc.identifier,
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    logfire.warn("Conflict", procedure=_procedure(request), error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Domain error", procedure=_procedure(request), error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    procedure = _procedure(request)
    logfire.error(
        "Unexpected error in {procedure}",
        procedure=procedure,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Failed to {procedure}"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on the app."""
    app.add_exception_handler(NotFoundError, handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(ConflictError, handle_conflict)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
