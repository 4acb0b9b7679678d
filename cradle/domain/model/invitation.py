"""Invitation entity.

An invitation is a token-addressable offer of a caregiver grant to an email
address that has no account yet. Possession of the token is enough to view
it; accepting it requires signing in as the invited address.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cradle.domain.model.common import DomainModel, utcnow
from cradle.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    ProfileId,
    UserId,
)


def is_expired(invitation: "Invitation", now: datetime) -> bool:
    """Whether the invitation's expiry has passed.

    Expiry is derived from the timestamp, so a row still stored as
    ``pending`` is expired as soon as ``expires_at`` is in the past.
    """
    return invitation.expires_at < now


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Token is globally unique and never reused
    - At most one pending invitation per (profile, email); re-inviting
      cancels the previous one
    - pending -> accepted | cancelled | expired; terminal states are final
    - Expiry is evaluated lazily via ``effective_status``
    """

    id: InvitationId
    profile_id: ProfileId
    invited_email: Email
    invited_by: UserId
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime
    accepted_at: Optional[datetime] = None

    def effective_status(self, now: datetime) -> InvitationStatus:
        """Status with lazy expiry applied."""
        if self.status == InvitationStatus.PENDING and is_expired(self, now):
            return InvitationStatus.EXPIRED
        return self.status

    def is_pending(self, now: datetime) -> bool:
        return self.effective_status(now) == InvitationStatus.PENDING

    def transition(self, status: InvitationStatus, now: datetime) -> "Invitation":
        """Return a copy moved from pending to ``status``.

        Raises:
            ValueError: If the invitation is not effectively pending
        """
        current = self.effective_status(now)
        if current.is_terminal:
            raise ValueError(
                f"Invitation {self.id} is {current.value}, cannot become {status.value}"
            )
        update: dict = {"status": status}
        if status == InvitationStatus.ACCEPTED:
            update["accepted_at"] = now
        return self.model_copy(update=update)
