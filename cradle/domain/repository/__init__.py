"""Repository interfaces for the Cradle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from cradle.domain.repository.access_grant import AccessGrantRepository
from cradle.domain.repository.invitation import InvitationRepository
from cradle.domain.repository.profile import ProfileRepository
from cradle.domain.repository.user import UserRepository

__all__ = [
    "AccessGrantRepository",
    "InvitationRepository",
    "ProfileRepository",
    "UserRepository",
]
