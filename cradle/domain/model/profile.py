"""Profile entity.

The shared resource access is granted to (a tracked baby). Its tracking
data lives elsewhere; only what invitations and listings need is kept here.
"""

from datetime import datetime

from pydantic import Field

from cradle.domain.model.common import DomainModel, utcnow
from cradle.domain.value import ProfileId, UserId


class Profile(DomainModel):
    """Profile aggregate root."""

    id: ProfileId
    name: str = Field(min_length=1, max_length=255)
    owner_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
