"""Tests for list profiles use case."""

import pytest

from cradle.application.usecase.profile import (
    ListProfilesRequest,
    ListProfilesUseCase,
)
from cradle.domain.service import AccessGrantService
from cradle.domain.value import Role
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListProfilesUseCase:
    """Tests for ListProfilesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_owned_and_shared_profiles(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        carer = await make_user(unit_env, "carer@example.com")
        shared = await make_profile(unit_env, owner, name="Ada")
        own = await make_profile(unit_env, carer, name="Ben")
        await (await unit_env.get(AccessGrantService)).grant_caregiver(
            shared.id, carer.id, owner.id, "carer@example.com"
        )
        use_case = await unit_env.get(ListProfilesUseCase)

        response = await use_case.execute(ListProfilesRequest(actor_id=str(carer.id)))

        roles = {p.name: p.role for p in response.profiles}
        assert roles == {"Ada": Role.CAREGIVER, "Ben": Role.OWNER}
        assert response.profiles[0].profile_id == str(own.id)

    @pytest.mark.asyncio
    async def test_no_grants_no_profiles(self, unit_env):
        user = await make_user(unit_env, "lonely@example.com")
        use_case = await unit_env.get(ListProfilesUseCase)

        response = await use_case.execute(ListProfilesRequest(actor_id=str(user.id)))

        assert response.profiles == []
