"""In-memory repository implementations for testing."""

from .access_grant import InMemoryAccessGrantRepository
from .invitation import InMemoryInvitationRepository
from .profile import InMemoryProfileRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAccessGrantRepository",
    "InMemoryInvitationRepository",
    "InMemoryProfileRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
