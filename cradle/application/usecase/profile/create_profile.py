"""Create profile use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from cradle.application.usecase.base import BaseUseCase
from cradle.domain.service import ProfileService
from cradle.domain.value import Role, UserId


class CreateProfileRequest(BaseModel):
    """Request to create a profile."""

    actor_id: str
    name: str = Field(min_length=1, max_length=255)


class CreateProfileResponse(BaseModel):
    """Response after creating a profile."""

    profile_id: str
    name: str
    role: Role
    created_at: datetime


class CreateProfileUseCase(BaseUseCase):
    """Use case for creating a profile owned by the actor."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> CreateProfileResponse:
        """Create the profile and its owner grant."""
        owner_id = UserId(UUID(request.actor_id))
        with logfire.span("create_profile.execute", owner_id=str(owner_id)):
            profile, grant = await self.profile_service.create_profile(
                owner_id, request.name.strip()
            )
            return CreateProfileResponse(
                profile_id=str(profile.id),
                name=profile.name,
                role=grant.role,
                created_at=profile.created_at,
            )
