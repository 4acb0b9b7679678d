"""Session token encoding.

Sessions are HS256 JWTs with the account id in ``sub`` and the account
email in ``email``. Both claims are required, as is ``exp``.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cradle.config import AuthSettings
from cradle.domain.value import Principal, UserId

REQUIRED_CLAIMS = ["sub", "email", "exp"]


class TokenPayload(BaseModel):
    """Decoded session claims."""

    sub: UUID
    email: str
    iat: datetime | None = None
    exp: datetime

    def to_principal(self) -> Principal:
        return Principal(user_id=UserId(self.sub), email=self.email)


class JWTError(Exception):
    """Session token could not be trusted."""

    pass


def create_token(
    user_id: str, email: str, settings: AuthSettings, now: datetime | None = None
) -> str:
    """Issue a session token.

    Args:
        user_id: Account id, stored in ``sub``
        email: Account email
        settings: Authentication settings
        now: Issue time (defaults to current UTC time)

    Returns:
        Encoded JWT
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a session token and decode its claims.

    Raises:
        JWTError: If the token is expired, badly signed, or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload(**claims)
    except PydanticValidationError as e:
        raise JWTError("Malformed token claims") from e
