"""In-memory invitation repository for testing."""

from datetime import datetime

from sqlalchemy.exc import IntegrityError

from cradle.domain.model import Invitation
from cradle.domain.repository.invitation import InvitationRepository
from cradle.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    ProfileId,
)

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID."""
        for invitation in self._store.invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by its token."""
        for invitation in self._store.invitations:
            if invitation.token == token:
                return invitation
        return None

    async def find_pending_for_email(
        self, profile_id: ProfileId, email: Email
    ) -> list[Invitation]:
        """Find rows stored as pending for (profile, email)."""
        return [
            inv
            for inv in self._store.invitations
            if inv.profile_id == profile_id
            and inv.invited_email == email
            and inv.status == InvitationStatus.PENDING
        ]

    async def find_by_profile(
        self, profile_id: ProfileId, status: InvitationStatus | None = None
    ) -> list[Invitation]:
        """List invitations for a profile, newest first."""
        matches = [
            inv
            for inv in self._store.invitations
            if inv.profile_id == profile_id and (status is None or inv.status == status)
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def find_pending_expired_before(self, now: datetime) -> list[Invitation]:
        """Find stale pending rows."""
        return [
            inv
            for inv in self._store.invitations
            if inv.status == InvitationStatus.PENDING and inv.expires_at < now
        ]

    async def add(self, invitation: Invitation) -> Invitation:
        """Insert an invitation.

        Raises:
            IntegrityError: If the token is taken or a pending invitation
                already exists for (profile, email)
        """
        for existing in self._store.invitations:
            if existing.id == invitation.id or existing.token == invitation.token:
                raise IntegrityError("Duplicate invitation token", None, Exception())
            if (
                invitation.status == InvitationStatus.PENDING
                and existing.status == InvitationStatus.PENDING
                and existing.profile_id == invitation.profile_id
                and existing.invited_email == invitation.invited_email
            ):
                raise IntegrityError("Duplicate pending invitation", None, Exception())

        self._store.invitations.append(invitation)
        return invitation

    async def save(self, invitation: Invitation) -> Invitation:
        """Update an existing invitation."""
        for i, existing in enumerate(self._store.invitations):
            if existing.id == invitation.id:
                self._store.invitations[i] = invitation
                return invitation
        raise KeyError(f"Invitation {invitation.id} does not exist")
