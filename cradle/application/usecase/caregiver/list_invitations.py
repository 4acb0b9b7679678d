"""List invitations use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.config import Settings
from cradle.domain.model.common import utcnow
from cradle.domain.service import AuthorizationService, InvitationService
from cradle.domain.value import InvitationStatus, ProfileId, UserId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    actor_id: str
    profile_id: str
    status: InvitationStatus | None = None


class InvitationItem(BaseModel):
    """Invitation item in response."""

    invitation_id: str
    invited_email: str
    status: InvitationStatus  # Effective status, expiry applied
    accept_url: str
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationItem]


class ListInvitationsUseCase(BaseUseCase):
    """Use case for the owner's view of a profile's invitations."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        invitation_service: InvitationService,
        settings: Settings,
    ) -> None:
        self.authorization_service = authorization_service
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: ListInvitationsRequest
    ) -> ListInvitationsResponse:
        actor_id = UserId(UUID(request.actor_id))
        profile_id = ProfileId(UUID(request.profile_id))
        now = utcnow()

        with logfire.span(
            "list_invitations.execute",
            actor_id=str(actor_id),
            profile_id=str(profile_id),
        ):
            await self.authorization_service.require_manage_grants(
                actor_id, profile_id, action="view invitations"
            )
            invitations = await self.invitation_service.list_for_profile(
                profile_id, request.status
            )
            return ListInvitationsResponse(
                invitations=[
                    InvitationItem(
                        invitation_id=str(inv.id),
                        invited_email=inv.invited_email.root,
                        status=inv.effective_status(now),
                        accept_url=self.settings.accept_url(inv.token.root),
                        created_at=inv.created_at,
                        expires_at=inv.expires_at,
                        accepted_at=inv.accepted_at,
                    )
                    for inv in invitations
                ]
            )
