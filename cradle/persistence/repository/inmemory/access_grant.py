"""In-memory access grant repository for testing."""

from sqlalchemy.exc import IntegrityError

from cradle.domain.model import AccessGrant
from cradle.domain.repository.access_grant import AccessGrantRepository
from cradle.domain.value import ProfileId, Role, UserId

from .store import InMemoryStore


class InMemoryAccessGrantRepository(AccessGrantRepository):
    """In-memory implementation of AccessGrantRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_profile_and_user(
        self, profile_id: ProfileId, user_id: UserId
    ) -> AccessGrant | None:
        """Find the grant for a (profile, user) pair."""
        for grant in self._store.access_grants:
            if grant.profile_id == profile_id and grant.user_id == user_id:
                return grant
        return None

    async def find_by_profile(self, profile_id: ProfileId) -> list[AccessGrant]:
        """List grants on a profile, owner first."""
        grants = [g for g in self._store.access_grants if g.profile_id == profile_id]
        grants.sort(key=lambda g: (g.role != Role.OWNER, g.granted_at))
        return grants

    async def find_owner(self, profile_id: ProfileId) -> AccessGrant | None:
        """Find the owner grant of a profile."""
        for grant in self._store.access_grants:
            if grant.profile_id == profile_id and grant.is_owner:
                return grant
        return None

    async def find_by_user(self, user_id: UserId) -> list[AccessGrant]:
        """List grants held by a user."""
        return [g for g in self._store.access_grants if g.user_id == user_id]

    async def add(self, grant: AccessGrant) -> AccessGrant:
        """Insert a grant.

        Raises:
            IntegrityError: If a grant already exists for (profile, user), or
                the profile already has an owner
        """
        for existing in self._store.access_grants:
            if existing.profile_id != grant.profile_id:
                continue
            if existing.user_id == grant.user_id:
                raise IntegrityError("Duplicate access grant", None, Exception())
            if existing.is_owner and grant.is_owner:
                raise IntegrityError("Duplicate owner grant", None, Exception())

        self._store.access_grants.append(grant)
        return grant

    async def delete(self, profile_id: ProfileId, user_id: UserId) -> bool:
        """Delete the grant for a (profile, user) pair."""
        before = len(self._store.access_grants)
        self._store.access_grants = [
            g
            for g in self._store.access_grants
            if not (g.profile_id == profile_id and g.user_id == user_id)
        ]
        return len(self._store.access_grants) < before
