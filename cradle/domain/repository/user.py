"""User repository interface (identity directory read model)."""

from abc import ABC, abstractmethod

from cradle.domain.model.user import User
from cradle.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by IDs.

        Args:
            user_ids: User identifiers

        Returns:
            Users that exist among the given IDs
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> User | None:
        """Find a user by normalized email.

        Args:
            email: The email to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            IntegrityError: If the email is already registered
        """
        pass
