"""PostgreSQL implementation of Profile repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domain.model import Profile
from cradle.domain.repository import ProfileRepository
from cradle.domain.value import ProfileId
from cradle.persistence.mappers import profile_to_dict, row_to_profile
from cradle.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_ids(self, profile_ids: list[ProfileId]) -> list[Profile]:
        if not profile_ids:
            return []
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.id.in_(profile_ids))
            .order_by(profiles_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def add(self, profile: Profile) -> Profile:
        await self.session.execute(
            insert(profiles_table).values(**profile_to_dict(profile))
        )
        await self.session.flush()
        return profile
