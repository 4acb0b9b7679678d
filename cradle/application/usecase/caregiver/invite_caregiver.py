"""Invite caregiver use case."""

from datetime import datetime
from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cradle.application.usecase.base import BaseUseCase
from cradle.config import Settings
from cradle.domain.error import InvalidInputError
from cradle.domain.service import (
    AccessGrantService,
    AuthorizationService,
    InvitationService,
    NotificationService,
    ProfileService,
    UserService,
)
from cradle.domain.value import Email, ProfileId, UserId


class InviteOutcome(str, Enum):
    """What inviting an address resulted in."""

    GRANTED_DIRECTLY = "granted_directly"
    INVITATION_CREATED = "invitation_created"


class InviteCaregiverRequest(BaseModel):
    """Request to invite a caregiver."""

    actor_id: str
    profile_id: str
    email: str


class InviteCaregiverResponse(BaseModel):
    """Response after inviting a caregiver."""

    outcome: InviteOutcome
    email: str
    user_id: str | None = None  # Set when granted directly
    invitation_id: str | None = None
    token: str | None = None
    accept_url: str | None = None
    expires_at: datetime | None = None
    email_sent: bool = False
    warning: str | None = None


class InviteCaregiverUseCase(BaseUseCase):
    """Use case for granting a caregiver access to a profile by email.

    Existing accounts are granted immediately; unknown addresses get a
    pending invitation and an email carrying the accept link.
    """

    def __init__(
        self,
        authorization_service: AuthorizationService,
        access_grant_service: AccessGrantService,
        invitation_service: InvitationService,
        notification_service: NotificationService,
        profile_service: ProfileService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            authorization_service: Authorization guard
            access_grant_service: Access grant domain service
            invitation_service: Invitation domain service
            notification_service: Invitation email delivery
            profile_service: Profile domain service
            user_service: User domain service
            settings: Application settings
        """
        self.authorization_service = authorization_service
        self.access_grant_service = access_grant_service
        self.invitation_service = invitation_service
        self.notification_service = notification_service
        self.profile_service = profile_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: InviteCaregiverRequest) -> InviteCaregiverResponse:
        """Execute invite caregiver use case.

        Steps:
        1. Require the actor to own the profile
        2. Normalize the email
        3. Grant directly when the address has an account, otherwise
           replace any pending invitation with a new one
        4. Email the accept link; delivery failure becomes a warning

        Args:
            request: Invite request

        Returns:
            Outcome with the grant or invitation details

        Raises:
            ForbiddenError: If the actor does not own the profile
            InvalidInputError: If the email is not plausible
            AlreadyGrantedError: If the address already has access
        """
        actor_id = UserId(UUID(request.actor_id))
        profile_id = ProfileId(UUID(request.profile_id))

        with logfire.span(
            "invite_caregiver.execute",
            actor_id=str(actor_id),
            profile_id=str(profile_id),
        ):
            await self.authorization_service.require_manage_grants(
                actor_id, profile_id, action="invite caregivers"
            )

            try:
                email = Email(root=request.email)
            except PydanticValidationError as e:
                logfire.info("Rejected invite email", email=request.email)
                raise InvalidInputError("Please enter a valid email") from e

            profile = await self.profile_service.get_by_id(profile_id)

            existing_user = await self.user_service.lookup_by_email(email)
            if existing_user:
                await self.access_grant_service.grant_caregiver(
                    profile_id=profile_id,
                    user_id=existing_user.id,
                    granted_by=actor_id,
                    email=email.root,
                )
                logfire.info(
                    "Caregiver granted directly",
                    profile_id=str(profile_id),
                    user_id=str(existing_user.id),
                )
                return InviteCaregiverResponse(
                    outcome=InviteOutcome.GRANTED_DIRECTLY,
                    email=email.root,
                    user_id=str(existing_user.id),
                )

            invitation = await self.invitation_service.create_invitation(
                profile_id=profile_id, email=email, invited_by=actor_id
            )
            accept_url = self.settings.accept_url(invitation.token.root)

            inviter = await self.user_service.find_by_id(actor_id)
            failure = await self.notification_service.notify_invitation(
                email=email.root,
                accept_url=accept_url,
                profile_name=profile.name,
                inviter_name=inviter.display_name if inviter else "Someone",
            )

            return InviteCaregiverResponse(
                outcome=InviteOutcome.INVITATION_CREATED,
                email=email.root,
                invitation_id=str(invitation.id),
                token=invitation.token.root,
                accept_url=accept_url,
                expires_at=invitation.expires_at,
                email_sent=failure is None,
                warning=(
                    f"Invitation created, but the email could not be sent: "
                    f"{failure.reason}. Share the link manually."
                    if failure
                    else None
                ),
            )
