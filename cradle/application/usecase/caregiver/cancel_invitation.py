"""Cancel invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.domain.model.common import utcnow
from cradle.domain.service import AuthorizationService, InvitationService
from cradle.domain.value import InvitationId, InvitationStatus, UserId


class CancelInvitationRequest(BaseModel):
    """Cancel invitation request."""

    actor_id: str
    invitation_id: str


class CancelInvitationResponse(BaseModel):
    """Cancel invitation response."""

    invitation_id: str
    status: InvitationStatus


class CancelInvitationUseCase(BaseUseCase):
    """Use case for withdrawing a pending invitation."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        invitation_service: InvitationService,
    ) -> None:
        self.authorization_service = authorization_service
        self.invitation_service = invitation_service

    async def execute(
        self, request: CancelInvitationRequest
    ) -> CancelInvitationResponse:
        """Cancel an invitation.

        Cancelling an invitation that is no longer pending changes nothing
        and reports its current status.

        Raises:
            NotFoundError: If the invitation does not exist
            ForbiddenError: If the actor does not own the invitation's profile
        """
        actor_id = UserId(UUID(request.actor_id))
        invitation_id = InvitationId(UUID(request.invitation_id))
        now = utcnow()

        with logfire.span(
            "cancel_invitation.execute",
            actor_id=str(actor_id),
            invitation_id=str(invitation_id),
        ):
            invitation = await self.invitation_service.get_by_id(invitation_id)
            await self.authorization_service.require_manage_grants(
                actor_id, invitation.profile_id, action="cancel invitations"
            )
            result = await self.invitation_service.cancel(invitation, now)
            return CancelInvitationResponse(
                invitation_id=str(result.id), status=result.effective_status(now)
            )
