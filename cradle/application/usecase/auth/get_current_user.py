"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from cradle.domain.service import UserService
from cradle.domain.value import Principal


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    principal: Principal


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    full_name: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the account behind the session.

        Raises:
            NotFoundError: If the session user has no account
        """
        user = await self.user_service.get_by_id(request.principal.user_id)
        return GetCurrentUserResponse(
            user_id=str(user.id),
            email=user.email.root,
            full_name=user.full_name,
            created_at=user.created_at,
        )
