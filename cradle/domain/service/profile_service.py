"""Profile domain service."""

from uuid import uuid4

import logfire

from cradle.domain.error import NotFoundError
from cradle.domain.model import AccessGrant, Profile
from cradle.domain.model.common import utcnow
from cradle.domain.repository import ProfileRepository
from cradle.domain.value import ProfileId, UserId

from .access_grant_service import AccessGrantService
from .base import Service


class ProfileService(Service):
    """Domain service for profiles and their ownership."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        access_grant_service: AccessGrantService,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            access_grant_service: Grant service used for the owner grant
        """
        self.profile_repository = profile_repository
        self.access_grant_service = access_grant_service

    async def create_profile(
        self, owner_id: UserId, name: str
    ) -> tuple[Profile, AccessGrant]:
        """Create a profile together with its single owner grant.

        Args:
            owner_id: Creating user
            name: Profile display name

        Returns:
            Tuple of (profile, owner grant)
        """
        with logfire.span(
            "profile_service.create_profile", owner_id=str(owner_id), name=name
        ):
            profile = await self.profile_repository.add(
                Profile(
                    id=ProfileId(uuid4()),
                    name=name,
                    owner_id=owner_id,
                    created_at=utcnow(),
                )
            )
            grant = await self.access_grant_service.grant_owner(profile.id, owner_id)
            logfire.info(
                "Profile created", profile_id=str(profile.id), owner_id=str(owner_id)
            )
            return profile, grant

    async def get_by_id(self, profile_id: ProfileId) -> Profile:
        """Get profile by ID.

        Raises:
            NotFoundError: If profile not found
        """
        profile = await self.profile_repository.find_by_id(profile_id)
        if not profile:
            logfire.warn("Profile not found", profile_id=str(profile_id))
            raise NotFoundError("Profile", str(profile_id))
        return profile

    async def list_visible(
        self, user_id: UserId
    ) -> list[tuple[Profile, AccessGrant]]:
        """Profiles reachable through the user's grants, newest first.

        Args:
            user_id: Viewing user

        Returns:
            (profile, the user's grant on it) pairs
        """
        with logfire.span("profile_service.list_visible", user_id=str(user_id)):
            grants = {
                grant.profile_id: grant
                for grant in await self.access_grant_service.list_for_user(user_id)
            }
            if not grants:
                return []
            profiles = await self.profile_repository.find_by_ids(list(grants))
            logfire.info("Visible profiles", user_id=str(user_id), count=len(profiles))
            return [(profile, grants[profile.id]) for profile in profiles]
