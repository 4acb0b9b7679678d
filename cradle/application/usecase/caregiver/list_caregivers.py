"""List caregivers use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.domain.service import (
    AccessGrantService,
    AuthorizationService,
    UserService,
)
from cradle.domain.value import ProfileId, Role, UserId


class ListCaregiversRequest(BaseModel):
    """List caregivers request."""

    actor_id: str
    profile_id: str


class CaregiverItem(BaseModel):
    """One person with access to the profile."""

    grant_id: str
    user_id: str
    email: str
    full_name: str | None
    role: Role
    granted_at: datetime
    granted_by: str | None


class ListCaregiversResponse(BaseModel):
    """List caregivers response."""

    caregivers: list[CaregiverItem]
    is_owner: bool  # Whether the viewer may manage this list


class ListCaregiversUseCase(BaseUseCase):
    """Use case for listing everyone with access to a profile, owner first."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        access_grant_service: AccessGrantService,
        user_service: UserService,
    ) -> None:
        self.authorization_service = authorization_service
        self.access_grant_service = access_grant_service
        self.user_service = user_service

    async def execute(self, request: ListCaregiversRequest) -> ListCaregiversResponse:
        """List caregivers.

        Raises:
            ForbiddenError: If the actor has no access to the profile
        """
        actor_id = UserId(UUID(request.actor_id))
        profile_id = ProfileId(UUID(request.profile_id))

        with logfire.span(
            "list_caregivers.execute",
            actor_id=str(actor_id),
            profile_id=str(profile_id),
        ):
            await self.authorization_service.require_act(actor_id, profile_id)

            grants = await self.access_grant_service.list_for_profile(profile_id)
            users = await self.user_service.get_users([g.user_id for g in grants])

            caregivers = []
            for grant in grants:
                user = users.get(grant.user_id)
                caregivers.append(
                    CaregiverItem(
                        grant_id=str(grant.id),
                        user_id=str(grant.user_id),
                        email=user.email.root if user else "Unknown",
                        full_name=user.full_name if user else None,
                        role=grant.role,
                        granted_at=grant.granted_at,
                        granted_by=str(grant.granted_by) if grant.granted_by else None,
                    )
                )

            is_owner = any(
                grant.user_id == actor_id and grant.is_owner for grant in grants
            )
            return ListCaregiversResponse(caregivers=caregivers, is_owner=is_owner)
