"""JWT token domain service."""

import logfire

from cradle.config import AuthSettings
from cradle.domain.value import Principal
from cradle.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations.

    Sessions are issued by the external authentication provider; this
    service verifies them and turns them into a Principal.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str) -> str:
        """Issue a session token (development login and tests)."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("JWT token rejected", error=str(e))
                raise
            return payload

    def get_principal(self, token: str | None) -> Principal | None:
        """Resolve an optional session token to a Principal.

        Missing or invalid tokens mean "not signed in" rather than an error,
        which is what the accept-invite surface needs.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            return self.verify_token(token).to_principal()
        except JWTError:
            return None
