"""Development login use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cradle.domain.error import InvalidInputError
from cradle.domain.service import JWTService, UserService
from cradle.domain.value import Email


class DevLoginRequest(BaseModel):
    """Development login request."""

    email: str
    full_name: str | None = None


class DevLoginResponse(BaseModel):
    """Development login response."""

    user_id: str
    email: str
    token: str


class DevLoginUseCase:
    """Issue a session for an email without an external auth provider.

    Only wired to a route when ``auth.dev_login_enabled`` is set; production
    sessions come from the authentication provider.
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize dev login use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: DevLoginRequest) -> DevLoginResponse:
        """Execute dev login flow.

        Steps:
        1. Normalize the email
        2. Register the user when absent
        3. Issue a JWT for the user

        Raises:
            InvalidInputError: If the email is not plausible
        """
        try:
            email = Email(root=request.email)
        except PydanticValidationError as e:
            raise InvalidInputError("Please enter a valid email") from e

        with logfire.span("dev_login.execute", email=email.root):
            user = await self.user_service.register_user(email, request.full_name)
            token = self.jwt_service.create_token(str(user.id), user.email.root)
            return DevLoginResponse(
                user_id=str(user.id), email=user.email.root, token=token
            )
