"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cradle.domain.model import Invitation
from cradle.domain.repository import InvitationRepository
from cradle.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    ProfileId,
)
from cradle.persistence.mappers import invitation_to_dict, row_to_invitation
from cradle.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by its token.

        Args:
            token: Invitation token to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending_for_email(
        self, profile_id: ProfileId, email: Email
    ) -> list[Invitation]:
        """Find rows stored as pending for (profile, email)."""
        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.profile_id == profile_id,
                invitations_table.c.invited_email == email.root,
                invitations_table.c.status == InvitationStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def find_by_profile(
        self, profile_id: ProfileId, status: InvitationStatus | None = None
    ) -> list[Invitation]:
        """List invitations for a profile, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.profile_id == profile_id)
            .order_by(invitations_table.c.created_at.desc())
        )

        if status:
            stmt = stmt.where(invitations_table.c.status == status.value)

        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def find_pending_expired_before(self, now: datetime) -> list[Invitation]:
        """Find stale pending rows, using idx_invitations_status_expires_at."""
        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.status == InvitationStatus.PENDING.value,
                invitations_table.c.expires_at < now,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def add(self, invitation: Invitation) -> Invitation:
        """Insert an invitation inside a savepoint.

        Raises:
            IntegrityError: If the token is taken or a pending invitation
                already exists for (profile, email)
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(invitations_table).values(**invitation_to_dict(invitation))
            )
        return invitation

    async def save(self, invitation: Invitation) -> Invitation:
        """Update an existing invitation inside a savepoint.

        Keeping the update in its own savepoint means a failed status write
        after a grant insert does not take the grant down with it.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_to_dict(invitation))
            )
        return invitation
