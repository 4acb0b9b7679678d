"""Validate invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from cradle.application.usecase.invitation.acceptance import (
    AcceptanceFlow,
    AcceptanceState,
    load_invitation,
)
from cradle.config import Settings
from cradle.domain.model.common import utcnow
from cradle.domain.service import InvitationService, ProfileService, UserService


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    token: str | None = None


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    state: AcceptanceState
    reason: str | None = None
    message: str | None = None
    profile_name: str | None = None
    invited_email: str | None = None
    inviter_name: str | None = None
    expires_at: datetime | None = None
    sign_in_url: str | None = None
    sign_up_url: str | None = None


class ValidateInvitationUseCase:
    """Use case for checking an invitation link before the visitor signs in.

    Read-only: it never changes the invitation.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        profile_service: ProfileService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        self.invitation_service = invitation_service
        self.profile_service = profile_service
        self.user_service = user_service
        self.settings = settings

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        flow = AcceptanceFlow()
        with logfire.span(
            "validate_invitation.execute", token=(request.token or "")[:8] + "..."
        ):
            invitation = await load_invitation(
                flow, request.token, self.invitation_service, utcnow()
            )
            if invitation is None:
                return ValidateInvitationResponse(
                    valid=False,
                    state=flow.state,
                    reason=flow.error.code if flow.error else None,
                    message=flow.error.message if flow.error else None,
                )

            flow.advance(AcceptanceState.AWAITING_AUTH)
            profile = await self.profile_service.get_by_id(invitation.profile_id)
            inviter = await self.user_service.find_by_id(invitation.invited_by)
            token = invitation.token.root
            return ValidateInvitationResponse(
                valid=True,
                state=flow.state,
                profile_name=profile.name,
                invited_email=invitation.invited_email.root,
                inviter_name=inviter.display_name if inviter else None,
                expires_at=invitation.expires_at,
                sign_in_url=self.settings.sign_in_url(token),
                sign_up_url=self.settings.sign_up_url(token),
            )
