"""In-memory profile repository for testing."""

from cradle.domain.model import Profile
from cradle.domain.repository.profile import ProfileRepository
from cradle.domain.value import ProfileId

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        for profile in self._store.profiles:
            if profile.id == profile_id:
                return profile
        return None

    async def find_by_ids(self, profile_ids: list[ProfileId]) -> list[Profile]:
        wanted = set(profile_ids)
        matches = [p for p in self._store.profiles if p.id in wanted]
        matches.sort(key=lambda p: p.created_at, reverse=True)
        return matches

    async def add(self, profile: Profile) -> Profile:
        self._store.profiles.append(profile)
        return profile
