"""Caregiver management use cases."""

from cradle.application.usecase.caregiver.cancel_invitation import (
    CancelInvitationRequest,
    CancelInvitationResponse,
    CancelInvitationUseCase,
)
from cradle.application.usecase.caregiver.invite_caregiver import (
    InviteCaregiverRequest,
    InviteCaregiverResponse,
    InviteCaregiverUseCase,
    InviteOutcome,
)
from cradle.application.usecase.caregiver.list_caregivers import (
    CaregiverItem,
    ListCaregiversRequest,
    ListCaregiversResponse,
    ListCaregiversUseCase,
)
from cradle.application.usecase.caregiver.list_invitations import (
    InvitationItem,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from cradle.application.usecase.caregiver.revoke_caregiver import (
    RevokeCaregiverRequest,
    RevokeCaregiverResponse,
    RevokeCaregiverUseCase,
)

__all__ = [
    "CancelInvitationRequest",
    "CancelInvitationResponse",
    "CancelInvitationUseCase",
    "CaregiverItem",
    "InvitationItem",
    "InviteCaregiverRequest",
    "InviteCaregiverResponse",
    "InviteCaregiverUseCase",
    "InviteOutcome",
    "ListCaregiversRequest",
    "ListCaregiversResponse",
    "ListCaregiversUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "RevokeCaregiverRequest",
    "RevokeCaregiverResponse",
    "RevokeCaregiverUseCase",
]
