"""Profile repository interface."""

from abc import ABC, abstractmethod

from cradle.domain.model.profile import Profile
from cradle.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, profile_ids: list[ProfileId]) -> list[Profile]:
        """Find profiles by IDs, newest first.

        Args:
            profile_ids: Profile identifiers

        Returns:
            Profiles that exist among the given IDs
        """
        pass

    @abstractmethod
    async def add(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Args:
            profile: The profile to insert

        Returns:
            The inserted profile
        """
        pass
