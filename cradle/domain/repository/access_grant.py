"""Access grant repository interface."""

from abc import ABC, abstractmethod

from cradle.domain.model.access_grant import AccessGrant
from cradle.domain.value import ProfileId, UserId


class AccessGrantRepository(ABC):
    """Repository for AccessGrant entity.

    Defines the contract for grant persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_profile_and_user(
        self, profile_id: ProfileId, user_id: UserId
    ) -> AccessGrant | None:
        """Find the grant for a (profile, user) pair.

        Args:
            profile_id: The profile
            user_id: The user

        Returns:
            The grant if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_profile(self, profile_id: ProfileId) -> list[AccessGrant]:
        """List all grants on a profile, owner first.

        Args:
            profile_id: The profile

        Returns:
            Grants ordered owner first, then by granted_at
        """
        pass

    @abstractmethod
    async def find_owner(self, profile_id: ProfileId) -> AccessGrant | None:
        """Find the owner grant of a profile.

        Args:
            profile_id: The profile

        Returns:
            The owner grant, None if the profile has none
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[AccessGrant]:
        """List all grants held by a user.

        Args:
            user_id: The user

        Returns:
            Grants held by the user
        """
        pass

    @abstractmethod
    async def add(self, grant: AccessGrant) -> AccessGrant:
        """Insert a new grant.

        Args:
            grant: The grant to insert

        Returns:
            The inserted grant

        Raises:
            IntegrityError: If a grant already exists for (profile, user)
        """
        pass

    @abstractmethod
    async def delete(self, profile_id: ProfileId, user_id: UserId) -> bool:
        """Delete the grant for a (profile, user) pair.

        Args:
            profile_id: The profile
            user_id: The user

        Returns:
            True if a grant was deleted
        """
        pass
