"""Domain value objects for Cradle."""

from cradle.domain.value.identifiers import (
    AccessGrantId,
    InvitationId,
    ProfileId,
    UserId,
)
from cradle.domain.value.types import (
    Email,
    InvitationStatus,
    InvitationToken,
    Principal,
    Role,
)

__all__ = [
    # Identifiers
    "AccessGrantId",
    "InvitationId",
    "ProfileId",
    "UserId",
    # Types
    "Email",
    "InvitationStatus",
    "InvitationToken",
    "Principal",
    "Role",
]
