"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from cradle.domain.model.invitation import Invitation
from cradle.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    ProfileId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Statuses returned are the stored ones; callers apply lazy expiry.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when someone opens an accept link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_for_email(
        self, profile_id: ProfileId, email: Email
    ) -> list[Invitation]:
        """Find invitations stored as pending for a (profile, email) pair.

        Args:
            profile_id: The profile
            email: The normalized invited email

        Returns:
            Pending invitations, possibly including lazily expired ones
        """
        pass

    @abstractmethod
    async def find_by_profile(
        self, profile_id: ProfileId, status: InvitationStatus | None = None
    ) -> list[Invitation]:
        """List invitations for a profile, newest first.

        Args:
            profile_id: The profile
            status: Optional stored-status filter

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def find_pending_expired_before(self, now: datetime) -> list[Invitation]:
        """Find rows still stored as pending whose expiry has passed.

        Args:
            now: Reference time

        Returns:
            Stale pending invitations
        """
        pass

    @abstractmethod
    async def add(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Args:
            invitation: The invitation to insert

        Returns:
            The inserted invitation

        Raises:
            IntegrityError: If the token is taken or a pending invitation
                already exists for (profile, email)
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Update an existing invitation.

        Args:
            invitation: The invitation to update

        Returns:
            The saved invitation
        """
        pass
