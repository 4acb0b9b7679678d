"""Tests for the authorization guard."""

from uuid import uuid4

import pytest

from cradle.domain.error import ForbiddenError
from cradle.domain.service import AccessGrantService, AuthorizationService
from cradle.domain.value import ProfileId, Role, UserId
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAuthorizationService:
    """Tests for AuthorizationService."""

    @pytest.mark.asyncio
    async def test_owner_can_act_and_manage(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        guard = await unit_env.get(AuthorizationService)

        assert await guard.get_role(owner.id, profile.id) == Role.OWNER
        assert await guard.can_act(owner.id, profile.id)
        assert await guard.can_manage_grants(owner.id, profile.id)

    @pytest.mark.asyncio
    async def test_caregiver_can_act_but_not_manage(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        caregiver = await make_user(unit_env, "carer@example.com")
        profile = await make_profile(unit_env, owner)
        grants = await unit_env.get(AccessGrantService)
        await grants.grant_caregiver(
            profile.id, caregiver.id, owner.id, "carer@example.com"
        )
        guard = await unit_env.get(AuthorizationService)

        assert await guard.can_act(caregiver.id, profile.id)
        assert not await guard.can_manage_grants(caregiver.id, profile.id)
        with pytest.raises(ForbiddenError):
            await guard.require_manage_grants(caregiver.id, profile.id)

    @pytest.mark.asyncio
    async def test_stranger_is_denied_everything(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        stranger = UserId(uuid4())
        guard = await unit_env.get(AuthorizationService)

        assert not await guard.can_act(stranger, profile.id)
        assert not await guard.can_manage_grants(stranger, profile.id)
        with pytest.raises(ForbiddenError) as exc_info:
            await guard.require_act(stranger, profile.id)
        assert exc_info.value.code == "forbidden"

    @pytest.mark.asyncio
    async def test_unknown_profile_is_denied(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        guard = await unit_env.get(AuthorizationService)

        assert not await guard.can_act(owner.id, ProfileId(uuid4()))
