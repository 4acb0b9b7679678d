"""Interface layer errors and the domain error to HTTP mapping."""

from fastapi import Request, status
from fastapi.responses import JSONResponse
import logfire

from cradle.domain.error import (
    AlreadyGrantedError,
    CannotRemoveOwnerError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthenticatedError(InterfaceError):
    """Request needs a session but carried none (or an invalid one)."""

    pass


# Most specific class wins; looked up along the error's MRO
STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AlreadyGrantedError: status.HTTP_409_CONFLICT,
    CannotRemoveOwnerError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error, 400 when nothing more specific applies."""
    for cls in type(error).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError as ``{"detail": message, "code": code}``.

    Registered for DomainError only, so ``exc`` is always one.
    """
    status_code = status_for(exc)
    logfire.info(
        "Domain error response",
        path=request.url.path,
        code=exc.code,
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def unauthenticated_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc) or "Not authenticated", "code": "unauthenticated"},
    )
