"""Domain value objects for Cradle.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from cradle.domain.value.common import RootValueObject, ValueObject
from cradle.domain.value.identifiers import UserId

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Role(str, Enum):
    """Role an access grant confers on a profile."""

    OWNER = "owner"
    CAREGIVER = "caregiver"


class InvitationStatus(str, Enum):
    """Stored status of an invitation.

    ``PENDING`` is the only non-terminal status.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is allowed."""
        return self is not InvitationStatus.PENDING


class Email(RootValueObject[str]):
    """Email address, normalized to trimmed lowercase.

    Only plausibility is checked (one ``@`` and a dotted domain); the
    address is never verified here.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Trim and lowercase, then check the address looks plausible."""
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        normalized = v.strip().lower()
        if len(normalized) > 320 or not EMAIL_PATTERN.match(normalized):
            raise ValueError("Please enter a valid email")
        return normalized

    def matches(self, other: "Email | str") -> bool:
        """Case-insensitive comparison against another address."""
        other_value = other.root if isinstance(other, Email) else other
        return self.root == other_value.strip().lower()


class InvitationToken(RootValueObject[str]):
    """Opaque, URL-safe bearer token identifying one invitation."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Token prefix safe to put in logs."""
        return self.root[:8] + "..."


class Principal(ValueObject):
    """The authenticated session's identity."""

    user_id: UserId
    email: str
