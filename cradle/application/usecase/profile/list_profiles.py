"""List profiles use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.domain.service import ProfileService
from cradle.domain.value import Role, UserId


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    actor_id: str


class ProfileItem(BaseModel):
    """Profile item with the viewer's role."""

    profile_id: str
    name: str
    role: Role
    created_at: datetime


class ListProfilesResponse(BaseModel):
    """List profiles response."""

    profiles: list[ProfileItem]


class ListProfilesUseCase(BaseUseCase):
    """Use case for listing the profiles a user can see, newest first."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        actor_id = UserId(UUID(request.actor_id))
        with logfire.span("list_profiles.execute", actor_id=str(actor_id)):
            visible = await self.profile_service.list_visible(actor_id)
            visible.sort(key=lambda pair: pair[0].created_at, reverse=True)
            return ListProfilesResponse(
                profiles=[
                    ProfileItem(
                        profile_id=str(profile.id),
                        name=profile.name,
                        role=grant.role,
                        created_at=profile.created_at,
                    )
                    for profile, grant in visible
                ]
            )
