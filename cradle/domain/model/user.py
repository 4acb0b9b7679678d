"""User entity as seen through the identity directory.

Accounts are owned by the external authentication provider. Cradle reads
them to resolve emails to user IDs and to show caregiver names.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cradle.domain.model.common import DomainModel, utcnow
from cradle.domain.value import Email, UserId


class User(DomainModel):
    """Registered account."""

    id: UserId
    email: Email
    full_name: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def display_name(self) -> str:
        """Full name when known, else the email address."""
        return self.full_name or self.email.root
