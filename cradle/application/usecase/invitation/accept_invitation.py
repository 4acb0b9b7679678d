"""Accept invitation use case."""

from collections.abc import Awaitable, Callable
from datetime import datetime

import logfire
from pydantic import BaseModel

from cradle.application.usecase.base import BaseUseCase
from cradle.application.usecase.invitation.acceptance import (
    AcceptanceFlow,
    AcceptanceRegistry,
    AcceptanceState,
    load_invitation,
)
from cradle.config import Settings
from cradle.domain.error import AlreadyGrantedError, EmailMismatchError
from cradle.domain.model import Invitation
from cradle.domain.model.common import utcnow
from cradle.domain.service import (
    AccessGrantService,
    InvitationService,
    ProfileService,
    UserService,
)
from cradle.domain.value import Principal


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request.

    ``principal`` is None when the visitor has no session yet.
    """

    token: str | None = None
    principal: Principal | None = None


class AcceptInvitationResponse(BaseModel):
    """Where the acceptance flow ended up."""

    state: AcceptanceState
    reason: str | None = None
    message: str | None = None
    recoverable: bool = False
    profile_id: str | None = None
    profile_name: str | None = None
    invited_email: str | None = None
    inviter_name: str | None = None
    already_had_access: bool = False
    warning: str | None = None
    sign_in_url: str | None = None
    sign_up_url: str | None = None


class AcceptInvitationUseCase(BaseUseCase):
    """Turns a pending invitation into a caregiver grant for the session user.

    Safe to trigger repeatedly: a user who already holds a grant on the
    profile gets a success with ``already_had_access`` set, and concurrent
    triggers for the same (token, user) share one attempt.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        access_grant_service: AccessGrantService,
        user_service: UserService,
        profile_service: ProfileService,
        registry: AcceptanceRegistry,
        settings: Settings,
    ) -> None:
        """Initialize accept invitation use case.

        Args:
            invitation_service: Invitation domain service
            access_grant_service: Access grant domain service
            user_service: User domain service
            profile_service: Profile domain service
            registry: Shared in-flight acceptance registry
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.access_grant_service = access_grant_service
        self.user_service = user_service
        self.profile_service = profile_service
        self.registry = registry
        self.settings = settings

    async def execute(
        self, request: AcceptInvitationRequest
    ) -> AcceptInvitationResponse:
        """Run the acceptance flow.

        Steps:
        1. Validate the token and load the invitation
        2. Without a session, stop in AWAITING_AUTH with sign-in links
        3. Check the session email against the invited email
        4. Short-circuit if the user already has access
        5. Create the caregiver grant, then mark the invitation accepted

        Args:
            request: Token and optional session principal

        Returns:
            Final state of the flow with any error or warning
        """
        now = utcnow()
        flow = AcceptanceFlow()
        with logfire.span(
            "accept_invitation.execute",
            token=(request.token or "")[:8] + "...",
            user_id=str(request.principal.user_id) if request.principal else None,
        ):
            invitation = await load_invitation(
                flow,
                request.token,
                self.invitation_service,
                now,
                has_access=self._access_check(request.principal),
            )
            if invitation is None:
                return self._respond(flow)

            if request.principal is None:
                flow.advance(AcceptanceState.AWAITING_AUTH)
                return await self._respond_with_context(
                    flow,
                    invitation,
                    sign_in_url=self.settings.sign_in_url(invitation.token.root),
                    sign_up_url=self.settings.sign_up_url(invitation.token.root),
                )

            flow.advance(AcceptanceState.ACCEPTING)
            principal = request.principal
            return await self.registry.run(
                (invitation.token.root, principal.user_id),
                lambda: self._accept(flow, invitation, principal, now),
            )

    def _access_check(
        self, principal: Principal | None
    ) -> Callable[[Invitation], Awaitable[bool]] | None:
        """Whether the session user is the invitee and already has access."""
        if principal is None:
            return None

        async def check(invitation: Invitation) -> bool:
            registered_email = await self._registered_email(principal)
            if not invitation.invited_email.matches(registered_email):
                return False
            grant = await self.access_grant_service.get_grant(
                invitation.profile_id, principal.user_id
            )
            return grant is not None

        return check

    async def _registered_email(self, principal: Principal) -> str:
        user = await self.user_service.find_by_id(principal.user_id)
        # Fall back to the session email when the account row is not there yet
        return user.email.root if user else principal.email

    async def _accept(
        self,
        flow: AcceptanceFlow,
        invitation: Invitation,
        principal: Principal,
        now: datetime,
    ) -> AcceptInvitationResponse:
        registered_email = await self._registered_email(principal)

        if not invitation.invited_email.matches(registered_email):
            logfire.warn(
                "Invitation email mismatch",
                invitation_id=str(invitation.id),
                user_id=str(principal.user_id),
            )
            flow.fail(
                AcceptanceState.ACCEPT_ERROR,
                EmailMismatchError(invitation.invited_email.root),
            )
            return await self._respond_with_context(flow, invitation)

        existing = await self.access_grant_service.get_grant(
            invitation.profile_id, principal.user_id
        )
        if existing:
            logfire.info(
                "User already has access",
                profile_id=str(invitation.profile_id),
                user_id=str(principal.user_id),
                role=existing.role.value,
            )
            flow.advance(AcceptanceState.ACCEPTED)
            return await self._respond_with_context(
                flow, invitation, already_had_access=True
            )

        try:
            await self.access_grant_service.grant_caregiver(
                profile_id=invitation.profile_id,
                user_id=principal.user_id,
                granted_by=invitation.invited_by,
                email=invitation.invited_email.root,
            )
        except AlreadyGrantedError:
            # Lost a race with another acceptance for the same user
            flow.advance(AcceptanceState.ACCEPTED)
            return await self._respond_with_context(
                flow, invitation, already_had_access=True
            )

        warning = None
        try:
            await self.invitation_service.mark_accepted(invitation, now)
        except Exception as e:
            # The grant is what matters; a stale status only affects the
            # invitation list
            logfire.warn(
                "Failed to mark invitation accepted",
                invitation_id=str(invitation.id),
                error=str(e),
            )
            warning = "Access granted, but the invitation could not be updated"

        flow.advance(AcceptanceState.ACCEPTED)
        logfire.info(
            "Invitation accepted",
            invitation_id=str(invitation.id),
            profile_id=str(invitation.profile_id),
            user_id=str(principal.user_id),
        )
        return await self._respond_with_context(flow, invitation, warning=warning)

    def _respond(self, flow: AcceptanceFlow, **extra) -> AcceptInvitationResponse:
        return AcceptInvitationResponse(
            state=flow.state,
            reason=flow.error.code if flow.error else None,
            message=flow.error.message if flow.error else None,
            recoverable=flow.recoverable,
            **extra,
        )

    async def _respond_with_context(
        self, flow: AcceptanceFlow, invitation: Invitation, **extra
    ) -> AcceptInvitationResponse:
        profile = await self.profile_service.get_by_id(invitation.profile_id)
        inviter = await self.user_service.find_by_id(invitation.invited_by)
        return self._respond(
            flow,
            profile_id=str(invitation.profile_id),
            profile_name=profile.name,
            invited_email=invitation.invited_email.root,
            inviter_name=inviter.display_name if inviter else None,
            **extra,
        )
