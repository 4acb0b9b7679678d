"""Mock persistence providers for testing."""

from dishka import Scope, provide

from cradle.domain.repository import (
    AccessGrantRepository,
    InvitationRepository,
    ProfileRepository,
    UserRepository,
)
from cradle.persistence.repository.inmemory import (
    InMemoryAccessGrantRepository,
    InMemoryInvitationRepository,
    InMemoryProfileRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from cradle.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so that, like a database, it outlives a single
    request; each container (and so each test) gets a fresh one.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_access_grant_repository(
        self, store: InMemoryStore
    ) -> AccessGrantRepository:
        """Provide in-memory access grant repository."""
        return InMemoryAccessGrantRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, store: InMemoryStore) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository(store)
