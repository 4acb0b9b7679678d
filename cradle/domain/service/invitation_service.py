"""Invitation domain service."""

import secrets
from datetime import datetime, timedelta
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from cradle.config import InvitationSettings
from cradle.domain.error import AlreadyInvitedError, NotFoundError
from cradle.domain.model import Invitation
from cradle.domain.model.common import utcnow
from cradle.domain.repository import InvitationRepository
from cradle.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    ProfileId,
    UserId,
)

from .base import Service


class InvitationService(Service):
    """Domain service for the invitation lifecycle.

    Expiry is lazy: nothing here depends on the sweep having run, every
    status check goes through ``Invitation.effective_status``.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            invitation_settings: Expiry and token settings
        """
        self.invitation_repository = invitation_repository
        self.settings = invitation_settings

    def generate_token(self) -> InvitationToken:
        """Generate a fresh unguessable token."""
        return InvitationToken(root=secrets.token_urlsafe(self.settings.token_bytes))

    async def create_invitation(
        self,
        profile_id: ProfileId,
        email: Email,
        invited_by: UserId,
        now: datetime | None = None,
    ) -> Invitation:
        """Create a pending invitation, replacing any earlier pending one.

        Re-inviting the same address cancels the previous invitation so only
        the newest token is usable.

        Args:
            profile_id: Profile the invitation grants access to
            email: Normalized invited email
            invited_by: Owner issuing the invitation
            now: Reference time (defaults to current UTC time)

        Returns:
            The new pending invitation

        Raises:
            AlreadyInvitedError: If a concurrent request created a pending
                invitation for the same address first
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.create_invitation",
            profile_id=str(profile_id),
            invited_by=str(invited_by),
            invited_email=email.root,
        ):
            replaced = await self._retire_pending(profile_id, email, now)

            invitation = Invitation(
                id=InvitationId(uuid4()),
                profile_id=profile_id,
                invited_email=email,
                invited_by=invited_by,
                token=self.generate_token(),
                status=InvitationStatus.PENDING,
                created_at=now,
                expires_at=now + timedelta(days=self.settings.expiry_days),
            )

            try:
                saved = await self.invitation_repository.add(invitation)
            except IntegrityError as e:
                logfire.warn(
                    "Invitation uniqueness violation",
                    profile_id=str(profile_id),
                    invited_email=email.root,
                    error=str(e.orig),
                )
                raise AlreadyInvitedError(email.root, str(profile_id)) from e

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                profile_id=str(profile_id),
                token=saved.token.redacted(),
                replaced=replaced,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def get_by_token(self, token: InvitationToken) -> Invitation | None:
        """Get invitation by token.

        Args:
            token: Invitation token

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span(
            "invitation_service.get_by_token", token=token.redacted()
        ):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
            else:
                logfire.warn("Invitation not found", token=token.redacted())
            return invitation

    async def get_by_id(self, invitation_id: InvitationId) -> Invitation:
        """Get invitation by ID.

        Raises:
            NotFoundError: If no invitation has this ID
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if not invitation:
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def list_for_profile(
        self, profile_id: ProfileId, status: InvitationStatus | None = None
    ) -> list[Invitation]:
        """List invitations for a profile, newest first.

        ``status`` filters on the effective status, so asking for pending
        invitations never returns lazily expired ones.
        """
        now = utcnow()
        with logfire.span(
            "invitation_service.list_for_profile",
            profile_id=str(profile_id),
            status=status.value if status else None,
        ):
            invitations = await self.invitation_repository.find_by_profile(profile_id)
            if status is not None:
                invitations = [
                    inv for inv in invitations if inv.effective_status(now) == status
                ]
            logfire.info(
                "Invitations listed",
                profile_id=str(profile_id),
                count=len(invitations),
            )
            return invitations

    async def cancel(
        self, invitation: Invitation, now: datetime | None = None
    ) -> Invitation:
        """Cancel a pending invitation.

        Cancelling an invitation that is no longer pending is a no-op.

        Args:
            invitation: Invitation to cancel
            now: Reference time

        Returns:
            The cancelled invitation, or the unchanged one
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.cancel", invitation_id=str(invitation.id)
        ):
            if not invitation.is_pending(now):
                logfire.info(
                    "Invitation not pending, nothing to cancel",
                    invitation_id=str(invitation.id),
                    status=invitation.effective_status(now).value,
                )
                return invitation

            cancelled = await self.invitation_repository.save(
                invitation.transition(InvitationStatus.CANCELLED, now)
            )
            logfire.info("Invitation cancelled", invitation_id=str(invitation.id))
            return cancelled

    async def mark_accepted(
        self, invitation: Invitation, now: datetime | None = None
    ) -> Invitation:
        """Move a pending invitation to accepted.

        Args:
            invitation: Invitation being accepted
            now: Acceptance time

        Returns:
            Updated invitation

        Raises:
            ValueError: If the invitation is no longer pending
        """
        now = now or utcnow()
        with logfire.span(
            "invitation_service.mark_accepted", invitation_id=str(invitation.id)
        ):
            accepted = await self.invitation_repository.save(
                invitation.transition(InvitationStatus.ACCEPTED, now)
            )
            logfire.info(
                "Invitation accepted",
                invitation_id=str(invitation.id),
                profile_id=str(invitation.profile_id),
            )
            return accepted

    async def expire_stale(self, now: datetime | None = None) -> list[Invitation]:
        """Persist the expired status of pending rows past their expiry.

        Purely housekeeping; lazy evaluation already treats these rows as
        expired.

        Args:
            now: Reference time

        Returns:
            Invitations that were flipped to expired
        """
        now = now or utcnow()
        with logfire.span("invitation_service.expire_stale", now=now.isoformat()):
            stale = await self.invitation_repository.find_pending_expired_before(now)
            expired = []
            for invitation in stale:
                expired.append(
                    await self.invitation_repository.save(
                        invitation.model_copy(
                            update={"status": InvitationStatus.EXPIRED}
                        )
                    )
                )
            logfire.info("Stale invitations expired", count=len(expired))
            return expired

    async def _retire_pending(
        self, profile_id: ProfileId, email: Email, now: datetime
    ) -> int:
        """Clear stored pending rows for (profile, email) before a new one."""
        retired = 0
        for existing in await self.invitation_repository.find_pending_for_email(
            profile_id, email
        ):
            if existing.is_pending(now):
                await self.invitation_repository.save(
                    existing.transition(InvitationStatus.CANCELLED, now)
                )
                logfire.info(
                    "Pending invitation replaced",
                    invitation_id=str(existing.id),
                    token=existing.token.redacted(),
                )
            else:
                await self.invitation_repository.save(
                    existing.model_copy(update={"status": InvitationStatus.EXPIRED})
                )
            retired += 1
        return retired
