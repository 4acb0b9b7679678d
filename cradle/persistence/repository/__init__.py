"""PostgreSQL repository implementations."""

from cradle.persistence.repository.access_grant import PostgresAccessGrantRepository
from cradle.persistence.repository.invitation import PostgresInvitationRepository
from cradle.persistence.repository.profile import PostgresProfileRepository
from cradle.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAccessGrantRepository",
    "PostgresInvitationRepository",
    "PostgresProfileRepository",
    "PostgresUserRepository",
]
