"""Profile and caregiver routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from cradle.application.usecase.caregiver import (
    InviteCaregiverRequest,
    InviteCaregiverResponse,
    InviteCaregiverUseCase,
    ListCaregiversRequest,
    ListCaregiversResponse,
    ListCaregiversUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    RevokeCaregiverRequest,
    RevokeCaregiverResponse,
    RevokeCaregiverUseCase,
)
from cradle.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
)
from cradle.domain.service import JWTService
from cradle.domain.value import InvitationStatus
from cradle.interface.api.session import require_principal

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class CreateProfileAPIRequest(BaseModel):
    """API request for creating a profile."""

    name: str


class InviteCaregiverAPIRequest(BaseModel):
    """API request for inviting a caregiver by email."""

    email: str


@router.post(
    "", response_model=CreateProfileResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    request: CreateProfileAPIRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateProfileResponse:
    """Create a profile owned by the signed-in user."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await create_profile_use_case.execute(
        CreateProfileRequest(actor_id=str(principal.user_id), name=request.name)
    )


@router.get("", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListProfilesResponse:
    """List profiles the signed-in user owns or cares for."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await list_profiles_use_case.execute(
        ListProfilesRequest(actor_id=str(principal.user_id))
    )


@router.get("/{profile_id}/caregivers", response_model=ListCaregiversResponse)
async def list_caregivers(
    profile_id: UUID,
    list_caregivers_use_case: FromDishka[ListCaregiversUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCaregiversResponse:
    """List everyone with access to the profile, owner first."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await list_caregivers_use_case.execute(
        ListCaregiversRequest(
            actor_id=str(principal.user_id), profile_id=str(profile_id)
        )
    )


@router.post(
    "/{profile_id}/caregivers",
    response_model=InviteCaregiverResponse,
    status_code=status.HTTP_201_CREATED,
)
async def invite_caregiver(
    profile_id: UUID,
    request: InviteCaregiverAPIRequest,
    invite_caregiver_use_case: FromDishka[InviteCaregiverUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteCaregiverResponse:
    """Invite a caregiver by email.

    Existing accounts are granted access immediately
    (``outcome=granted_directly``); other addresses receive an invitation
    (``outcome=invitation_created``) whose link is also returned for
    manual sharing.
    """
    principal = require_principal(jwt_service, auth_token, authorization)
    return await invite_caregiver_use_case.execute(
        InviteCaregiverRequest(
            actor_id=str(principal.user_id),
            profile_id=str(profile_id),
            email=request.email,
        )
    )


@router.delete(
    "/{profile_id}/caregivers/{user_id}", response_model=RevokeCaregiverResponse
)
async def revoke_caregiver(
    profile_id: UUID,
    user_id: UUID,
    revoke_caregiver_use_case: FromDishka[RevokeCaregiverUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> RevokeCaregiverResponse:
    """Remove a caregiver's access to the profile."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await revoke_caregiver_use_case.execute(
        RevokeCaregiverRequest(
            actor_id=str(principal.user_id),
            profile_id=str(profile_id),
            user_id=str(user_id),
        )
    )


@router.get("/{profile_id}/invitations", response_model=ListInvitationsResponse)
async def list_invitations(
    profile_id: UUID,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: InvitationStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListInvitationsResponse:
    """List the profile's invitations with their effective status."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(
            actor_id=str(principal.user_id),
            profile_id=str(profile_id),
            status=status_filter,
        )
    )
