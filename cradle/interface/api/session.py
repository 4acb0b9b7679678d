"""Session resolution for routes.

The session token is read from the ``auth_token`` cookie, or from an
``Authorization: Bearer`` header for non-browser clients.
"""

from cradle.domain.service import JWTService
from cradle.domain.value import Principal
from cradle.interface.error import UnauthenticatedError

COOKIE_NAME = "auth_token"


def _bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credentials:
        return None
    return credentials.strip()


def optional_principal(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> Principal | None:
    """Principal for the request, or None when not signed in."""
    return jwt_service.get_principal(auth_token or _bearer(authorization))


def require_principal(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> Principal:
    """Principal for the request.

    Raises:
        UnauthenticatedError: If there is no valid session
    """
    principal = optional_principal(jwt_service, auth_token, authorization)
    if principal is None:
        raise UnauthenticatedError("Not authenticated")
    return principal
