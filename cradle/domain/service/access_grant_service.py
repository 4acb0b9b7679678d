"""Access grant domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from cradle.domain.error import (
    AlreadyGrantedError,
    CannotRemoveOwnerError,
    NotFoundError,
)
from cradle.domain.model import AccessGrant
from cradle.domain.model.common import utcnow
from cradle.domain.repository import AccessGrantRepository
from cradle.domain.value import AccessGrantId, ProfileId, Role, UserId

from .base import Service


class AccessGrantService(Service):
    """Domain service for creating, listing and revoking grants."""

    def __init__(self, access_grant_repository: AccessGrantRepository) -> None:
        """Initialize access grant service.

        Args:
            access_grant_repository: Access grant repository
        """
        self.access_grant_repository = access_grant_repository

    async def get_grant(
        self, profile_id: ProfileId, user_id: UserId
    ) -> AccessGrant | None:
        """Get the grant for a (profile, user) pair, if any."""
        return await self.access_grant_repository.find_by_profile_and_user(
            profile_id, user_id
        )

    async def list_for_profile(self, profile_id: ProfileId) -> list[AccessGrant]:
        """List grants on a profile, owner first."""
        with logfire.span(
            "access_grant_service.list_for_profile", profile_id=str(profile_id)
        ):
            grants = await self.access_grant_repository.find_by_profile(profile_id)
            logfire.info("Grants listed", profile_id=str(profile_id), count=len(grants))
            return grants

    async def list_for_user(self, user_id: UserId) -> list[AccessGrant]:
        """List grants a user holds."""
        return await self.access_grant_repository.find_by_user(user_id)

    async def grant_owner(self, profile_id: ProfileId, owner_id: UserId) -> AccessGrant:
        """Create the owner grant for a newly created profile.

        Args:
            profile_id: The new profile
            owner_id: Creating user

        Returns:
            The owner grant

        Raises:
            AlreadyGrantedError: If the profile already has an owner
        """
        with logfire.span(
            "access_grant_service.grant_owner",
            profile_id=str(profile_id),
            owner_id=str(owner_id),
        ):
            if await self.access_grant_repository.find_owner(profile_id):
                logfire.warn("Profile already owned", profile_id=str(profile_id))
                raise AlreadyGrantedError(
                    str(owner_id),
                    str(profile_id),
                    "This profile already has an owner",
                )
            return await self._add(
                AccessGrant(
                    id=AccessGrantId(uuid4()),
                    profile_id=profile_id,
                    user_id=owner_id,
                    role=Role.OWNER,
                    granted_at=utcnow(),
                    granted_by=None,
                ),
                subject=str(owner_id),
            )

    async def grant_caregiver(
        self,
        profile_id: ProfileId,
        user_id: UserId,
        granted_by: UserId,
        email: str,
    ) -> AccessGrant:
        """Create a caregiver grant.

        Args:
            profile_id: Profile to grant access to
            user_id: User receiving access
            granted_by: Owner who invited the user
            email: Grantee email, for error messages

        Returns:
            The new grant

        Raises:
            AlreadyGrantedError: If the user already has a grant on the profile
        """
        with logfire.span(
            "access_grant_service.grant_caregiver",
            profile_id=str(profile_id),
            user_id=str(user_id),
            granted_by=str(granted_by),
        ):
            existing = await self.access_grant_repository.find_by_profile_and_user(
                profile_id, user_id
            )
            if existing:
                logfire.warn(
                    "Grant already exists",
                    profile_id=str(profile_id),
                    user_id=str(user_id),
                    role=existing.role.value,
                )
                raise AlreadyGrantedError(email, str(profile_id))

            return await self._add(
                AccessGrant(
                    id=AccessGrantId(uuid4()),
                    profile_id=profile_id,
                    user_id=user_id,
                    role=Role.CAREGIVER,
                    granted_at=utcnow(),
                    granted_by=granted_by,
                ),
                subject=email,
            )

    async def revoke(self, profile_id: ProfileId, user_id: UserId) -> AccessGrant:
        """Delete a caregiver's grant.

        Args:
            profile_id: Profile to revoke access to
            user_id: Caregiver losing access

        Returns:
            The deleted grant

        Raises:
            NotFoundError: If the user has no grant on the profile
            CannotRemoveOwnerError: If the grant is the owner's
        """
        with logfire.span(
            "access_grant_service.revoke",
            profile_id=str(profile_id),
            user_id=str(user_id),
        ):
            grant = await self.access_grant_repository.find_by_profile_and_user(
                profile_id, user_id
            )
            if not grant:
                raise NotFoundError("AccessGrant", f"{profile_id}/{user_id}")
            if grant.is_owner:
                logfire.warn("Attempt to remove owner", profile_id=str(profile_id))
                raise CannotRemoveOwnerError(str(profile_id))

            await self.access_grant_repository.delete(profile_id, user_id)
            logfire.info(
                "Grant revoked", profile_id=str(profile_id), user_id=str(user_id)
            )
            return grant

    async def _add(self, grant: AccessGrant, subject: str) -> AccessGrant:
        try:
            saved = await self.access_grant_repository.add(grant)
        except IntegrityError as e:
            # Lost a race against a concurrent insert of the same pair
            logfire.warn(
                "Grant uniqueness violation",
                profile_id=str(grant.profile_id),
                user_id=str(grant.user_id),
                error=str(e.orig),
            )
            raise AlreadyGrantedError(subject, str(grant.profile_id)) from e

        logfire.info(
            "Grant created",
            grant_id=str(saved.id),
            profile_id=str(saved.profile_id),
            user_id=str(saved.user_id),
            role=saved.role.value,
        )
        return saved
