"""PostgreSQL implementation of AccessGrant repository."""

from sqlalchemy import and_, case, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domain.model import AccessGrant
from cradle.domain.repository import AccessGrantRepository
from cradle.domain.value import ProfileId, UserId
from cradle.persistence.mappers import access_grant_to_dict, row_to_access_grant
from cradle.persistence.tables import access_grants_table


class PostgresAccessGrantRepository(AccessGrantRepository):
    """PostgreSQL implementation of AccessGrantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_profile_and_user(
        self, profile_id: ProfileId, user_id: UserId
    ) -> AccessGrant | None:
        """Find the grant for a (profile, user) pair.

        Served by the (profile_id, user_id) unique constraint's index.
        """
        stmt = select(access_grants_table).where(
            and_(
                access_grants_table.c.profile_id == profile_id,
                access_grants_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_grant(dict(row)) if row else None

    async def find_by_profile(self, profile_id: ProfileId) -> list[AccessGrant]:
        """List grants on a profile, owner first."""
        owner_first = case((access_grants_table.c.role == "owner", 0), else_=1)
        stmt = (
            select(access_grants_table)
            .where(access_grants_table.c.profile_id == profile_id)
            .order_by(owner_first, access_grants_table.c.granted_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_access_grant(dict(row)) for row in result.mappings().all()]

    async def find_owner(self, profile_id: ProfileId) -> AccessGrant | None:
        """Find the owner grant of a profile.

        Served by the partial unique index on owner grants.
        """
        stmt = select(access_grants_table).where(
            and_(
                access_grants_table.c.profile_id == profile_id,
                access_grants_table.c.role == "owner",
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_grant(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[AccessGrant]:
        """List grants held by a user."""
        stmt = select(access_grants_table).where(
            access_grants_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return [row_to_access_grant(dict(row)) for row in result.mappings().all()]

    async def add(self, grant: AccessGrant) -> AccessGrant:
        """Insert a grant inside a savepoint.

        A unique violation only rolls back the savepoint, so the request's
        transaction stays usable for the caller's fallback.

        Raises:
            IntegrityError: If a grant already exists for (profile, user)
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(access_grants_table).values(**access_grant_to_dict(grant))
            )
        return grant

    async def delete(self, profile_id: ProfileId, user_id: UserId) -> bool:
        """Delete the grant for a (profile, user) pair."""
        stmt = delete(access_grants_table).where(
            and_(
                access_grants_table.c.profile_id == profile_id,
                access_grants_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
