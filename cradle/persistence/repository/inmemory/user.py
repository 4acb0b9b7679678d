"""In-memory user repository for testing."""

from sqlalchemy.exc import IntegrityError

from cradle.domain.model import User
from cradle.domain.repository.user import UserRepository
from cradle.domain.value import Email, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> User | None:
        for user in self._store.users:
            if user.id == user_id:
                return user
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        wanted = set(user_ids)
        return [u for u in self._store.users if u.id in wanted]

    async def find_by_email(self, email: Email) -> User | None:
        for user in self._store.users:
            if user.email == email:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a user.

        Raises:
            IntegrityError: If the email is already registered
        """
        if await self.find_by_email(user.email):
            raise IntegrityError("Duplicate user email", None, Exception())
        self._store.users.append(user)
        return user
