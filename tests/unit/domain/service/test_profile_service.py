"""Tests for profile service."""

from uuid import uuid4

import pytest

from cradle.domain.error import NotFoundError
from cradle.domain.service import AccessGrantService, ProfileService
from cradle.domain.value import ProfileId, Role
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProfileService:
    """Tests for ProfileService."""

    @pytest.mark.asyncio
    async def test_create_profile_grants_owner(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        service = await unit_env.get(ProfileService)

        profile, grant = await service.create_profile(owner.id, "Ada")

        assert profile.owner_id == owner.id
        assert grant.role == Role.OWNER
        assert grant.user_id == owner.id
        assert grant.granted_by is None

    @pytest.mark.asyncio
    async def test_list_visible_includes_owned_and_cared_for(self, unit_env):
        alice = await make_user(unit_env, "alice@example.com")
        bob = await make_user(unit_env, "bob@example.com")
        service = await unit_env.get(ProfileService)
        grants = await unit_env.get(AccessGrantService)
        alices, _ = await service.create_profile(alice.id, "Ada")
        bobs, _ = await service.create_profile(bob.id, "Ben")
        await grants.grant_caregiver(bobs.id, alice.id, bob.id, "alice@example.com")

        visible = await service.list_visible(alice.id)

        roles = {profile.id: grant.role for profile, grant in visible}
        assert roles == {alices.id: Role.OWNER, bobs.id: Role.CAREGIVER}

    @pytest.mark.asyncio
    async def test_list_visible_empty(self, unit_env):
        stranger = await make_user(unit_env, "stranger@example.com")
        service = await unit_env.get(ProfileService)

        assert await service.list_visible(stranger.id) == []

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, unit_env):
        service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(ProfileId(uuid4()))
