"""Tests for expire invitations use case."""

from datetime import timedelta

import pytest

from cradle.application.usecase.invitation import (
    ExpireInvitationsRequest,
    ExpireInvitationsUseCase,
)
from cradle.domain.model.common import utcnow
from cradle.domain.repository import InvitationRepository
from cradle.domain.service import InvitationService
from cradle.domain.value import Email, InvitationStatus
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestExpireInvitationsUseCase:
    """Tests for ExpireInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_only_stale_pending_rows_are_expired(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        stale = await service.create_invitation(
            profile.id,
            Email(root="old@example.com"),
            owner.id,
            utcnow() - timedelta(days=10),
        )
        fresh = await service.create_invitation(
            profile.id, Email(root="new@example.com"), owner.id
        )
        use_case = await unit_env.get(ExpireInvitationsUseCase)

        response = await use_case.execute(ExpireInvitationsRequest())

        assert response.expired_ids == [str(stale.id)]
        repository = await unit_env.get(InvitationRepository)
        assert (await repository.find_by_id(stale.id)).status == InvitationStatus.EXPIRED
        assert (await repository.find_by_id(fresh.id)).status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        await (await unit_env.get(InvitationService)).create_invitation(
            profile.id,
            Email(root="old@example.com"),
            owner.id,
            utcnow() - timedelta(days=10),
        )
        use_case = await unit_env.get(ExpireInvitationsUseCase)

        await use_case.execute(ExpireInvitationsRequest())
        response = await use_case.execute(ExpireInvitationsRequest())

        assert response.expired_ids == []
