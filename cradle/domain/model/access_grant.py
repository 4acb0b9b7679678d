"""AccessGrant entity.

A grant is the only thing that lets a user act on a profile. Invitations
only ever promise one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cradle.domain.model.common import DomainModel, utcnow
from cradle.domain.value import AccessGrantId, ProfileId, Role, UserId


class AccessGrant(DomainModel):
    """Durable (profile, user) -> role mapping.

    Business rules:
    - At most one grant per (profile, user) pair, enforced by storage
    - Exactly one OWNER grant per profile, created with the profile
    - granted_by is None only for the owner grant
    - Grants are created or deleted, never updated
    """

    id: AccessGrantId
    profile_id: ProfileId
    user_id: UserId
    role: Role
    granted_at: datetime = Field(default_factory=utcnow)
    granted_by: Optional[UserId] = None

    @property
    def is_owner(self) -> bool:
        return self.role == Role.OWNER
