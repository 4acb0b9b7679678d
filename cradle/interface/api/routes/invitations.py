"""Invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from cradle.application.usecase.caregiver import (
    CancelInvitationRequest,
    CancelInvitationResponse,
    CancelInvitationUseCase,
)
from cradle.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from cradle.domain.service import JWTService
from cradle.interface.api.session import optional_principal, require_principal

router = APIRouter(
    prefix="/invitations", tags=["invitations"], route_class=DishkaRoute
)


class AcceptInvitationAPIRequest(BaseModel):
    """API request for accepting an invitation."""

    token: str | None = None


@router.get("/view", response_model=ValidateInvitationResponse)
async def view_invitation(
    validate_invitation_use_case: FromDishka[ValidateInvitationUseCase],
    token: str | None = Query(default=None),
) -> ValidateInvitationResponse:
    """Check an invitation link before signing in.

    No authentication required. Invalid links are reported in the body
    (``valid=false`` with a ``reason``) rather than as HTTP errors.
    """
    return await validate_invitation_use_case.execute(
        ValidateInvitationRequest(token=token)
    )


@router.post("/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    request: AcceptInvitationAPIRequest,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AcceptInvitationResponse:
    """Accept an invitation for the signed-in user.

    Without a session the response stops at ``state=awaiting_auth`` and
    carries sign-in and sign-up links that return here with the token.
    Repeating the call after success is harmless.
    """
    principal = optional_principal(jwt_service, auth_token, authorization)
    return await accept_invitation_use_case.execute(
        AcceptInvitationRequest(token=request.token, principal=principal)
    )


@router.post("/{invitation_id}/cancel", response_model=CancelInvitationResponse)
async def cancel_invitation(
    invitation_id: UUID,
    cancel_invitation_use_case: FromDishka[CancelInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CancelInvitationResponse:
    """Cancel a pending invitation."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await cancel_invitation_use_case.execute(
        CancelInvitationRequest(
            actor_id=str(principal.user_id), invitation_id=str(invitation_id)
        )
    )
