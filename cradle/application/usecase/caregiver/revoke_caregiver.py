"""Revoke caregiver use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.domain.service import AccessGrantService, AuthorizationService
from cradle.domain.value import ProfileId, UserId


class RevokeCaregiverRequest(BaseModel):
    """Revoke caregiver request."""

    actor_id: str
    profile_id: str
    user_id: str


class RevokeCaregiverResponse(BaseModel):
    """Revoke caregiver response."""

    profile_id: str
    user_id: str


class RevokeCaregiverUseCase(BaseUseCase):
    """Use case for removing a caregiver's access.

    Invitation history is left untouched.
    """

    def __init__(
        self,
        authorization_service: AuthorizationService,
        access_grant_service: AccessGrantService,
    ) -> None:
        self.authorization_service = authorization_service
        self.access_grant_service = access_grant_service

    async def execute(
        self, request: RevokeCaregiverRequest
    ) -> RevokeCaregiverResponse:
        """Revoke a caregiver grant.

        Raises:
            ForbiddenError: If the actor does not own the profile
            NotFoundError: If the target has no grant on the profile
            CannotRemoveOwnerError: If the target is the owner
        """
        actor_id = UserId(UUID(request.actor_id))
        profile_id = ProfileId(UUID(request.profile_id))
        target_id = UserId(UUID(request.user_id))

        with logfire.span(
            "revoke_caregiver.execute",
            actor_id=str(actor_id),
            profile_id=str(profile_id),
            target_id=str(target_id),
        ):
            await self.authorization_service.require_manage_grants(
                actor_id, profile_id, action="remove caregivers"
            )
            revoked = await self.access_grant_service.revoke(profile_id, target_id)
            return RevokeCaregiverResponse(
                profile_id=str(revoked.profile_id), user_id=str(revoked.user_id)
            )
