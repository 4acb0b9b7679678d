"""Domain model entities for Cradle."""

from cradle.domain.model.access_grant import AccessGrant
from cradle.domain.model.invitation import Invitation, is_expired
from cradle.domain.model.profile import Profile
from cradle.domain.model.user import User

__all__ = [
    "AccessGrant",
    "Invitation",
    "Profile",
    "User",
    "is_expired",
]
