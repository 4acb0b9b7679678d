"""PostgreSQL implementation of User repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domain.model import User
from cradle.domain.repository import UserRepository
from cradle.domain.value import Email, UserId
from cradle.persistence.mappers import row_to_user, user_to_dict
from cradle.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> User | None:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_email(self, email: Email) -> User | None:
        """Find a user by email.

        Emails are stored lowercased, so a plain equality match is
        case-insensitive.
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def add(self, user: User) -> User:
        async with self.session.begin_nested():
            await self.session.execute(insert(users_table).values(**user_to_dict(user)))
        return user
