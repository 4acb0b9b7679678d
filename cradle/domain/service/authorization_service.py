"""Authorization guard.

Who may act on a profile is decided here, from grants alone, so the policy
can be checked (and tested) without any storage-level row visibility rules.
"""

import logfire

from cradle.domain.error import ForbiddenError
from cradle.domain.repository import AccessGrantRepository
from cradle.domain.value import ProfileId, Role, UserId

from .base import Service


class AuthorizationService(Service):
    """Pure predicates over the current grant state."""

    def __init__(self, access_grant_repository: AccessGrantRepository) -> None:
        """Initialize authorization service.

        Args:
            access_grant_repository: Access grant repository
        """
        self.access_grant_repository = access_grant_repository

    async def get_role(self, actor_id: UserId, profile_id: ProfileId) -> Role | None:
        """Role the actor holds on the profile, if any."""
        grant = await self.access_grant_repository.find_by_profile_and_user(
            profile_id, actor_id
        )
        return grant.role if grant else None

    async def can_act(self, actor_id: UserId, profile_id: ProfileId) -> bool:
        """Whether the actor holds any grant on the profile.

        Args:
            actor_id: Acting user
            profile_id: Target profile

        Returns:
            True for owners and caregivers
        """
        with logfire.span(
            "authorization.can_act",
            actor_id=str(actor_id),
            profile_id=str(profile_id),
        ):
            allowed = await self.get_role(actor_id, profile_id) is not None
            logfire.debug("Act check", allowed=allowed)
            return allowed

    async def can_manage_grants(self, actor_id: UserId, profile_id: ProfileId) -> bool:
        """Whether the actor owns the profile.

        Only owners may invite, cancel invitations or remove caregivers.

        Args:
            actor_id: Acting user
            profile_id: Target profile

        Returns:
            True only for the owner
        """
        with logfire.span(
            "authorization.can_manage_grants",
            actor_id=str(actor_id),
            profile_id=str(profile_id),
        ):
            allowed = await self.get_role(actor_id, profile_id) == Role.OWNER
            logfire.debug("Manage grants check", allowed=allowed)
            return allowed

    async def require_act(self, actor_id: UserId, profile_id: ProfileId) -> None:
        """Raise unless ``can_act``.

        Raises:
            ForbiddenError: If the actor has no grant on the profile
        """
        if not await self.can_act(actor_id, profile_id):
            logfire.warn(
                "Access denied",
                actor_id=str(actor_id),
                profile_id=str(profile_id),
            )
            raise ForbiddenError("access", str(profile_id), str(actor_id))

    async def require_manage_grants(
        self, actor_id: UserId, profile_id: ProfileId, action: str = "manage caregivers"
    ) -> None:
        """Raise unless ``can_manage_grants``.

        Raises:
            ForbiddenError: If the actor is not the profile owner
        """
        if not await self.can_manage_grants(actor_id, profile_id):
            logfire.warn(
                "Grant management denied",
                actor_id=str(actor_id),
                profile_id=str(profile_id),
                action=action,
            )
            raise ForbiddenError(action, str(profile_id), str(actor_id))
