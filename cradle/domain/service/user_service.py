"""Identity directory domain service.

Resolves email addresses to accounts and accounts to display details. The
accounts themselves belong to the external authentication provider.
"""

from uuid import uuid4

import logfire

from cradle.domain.error import NotFoundError
from cradle.domain.model import User
from cradle.domain.model.common import utcnow
from cradle.domain.repository import UserRepository
from cradle.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for identity directory lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def lookup_by_email(self, email: Email) -> User | None:
        """Find the account registered with an email.

        Args:
            email: Normalized email

        Returns:
            User if an account exists, None otherwise
        """
        with logfire.span("user_service.lookup_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            logfire.info("Directory lookup", email=email.root, found=user is not None)
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID without raising."""
        return await self.user_repository.find_by_id(user_id)

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users keyed by ID; missing IDs are simply absent."""
        users = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}

    async def register_user(self, email: Email, full_name: str | None = None) -> User:
        """Return the account for an email, creating it when absent.

        Used by the development login endpoint and by tests; production
        accounts come from the authentication provider.
        """
        with logfire.span("user_service.register_user", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                return existing

            user = await self.user_repository.add(
                User(
                    id=UserId(uuid4()),
                    email=email,
                    full_name=full_name,
                    created_at=utcnow(),
                )
            )
            logfire.info("User registered", user_id=str(user.id), email=email.root)
            return user
