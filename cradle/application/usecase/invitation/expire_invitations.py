"""Expire invitations use case."""

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.domain.model.common import utcnow
from cradle.domain.service import InvitationService


class ExpireInvitationsRequest(BaseModel):
    """Expire invitations request (no parameters)."""


class ExpireInvitationsResponse(BaseModel):
    """Expire invitations response."""

    expired_ids: list[str]


class ExpireInvitationsUseCase(BaseUseCase):
    """Persists the expired status of pending invitations past their expiry.

    Housekeeping only; acceptance already treats such invitations as expired.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: ExpireInvitationsRequest
    ) -> ExpireInvitationsResponse:
        with logfire.span("expire_invitations.execute"):
            expired = await self.invitation_service.expire_stale(utcnow())
            return ExpireInvitationsResponse(
                expired_ids=[str(invitation.id) for invitation in expired]
            )
