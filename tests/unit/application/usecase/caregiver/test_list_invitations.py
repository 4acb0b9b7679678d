"""Tests for list invitations use case."""

from datetime import timedelta

import pytest

from cradle.application.usecase.caregiver import (
    ListInvitationsRequest,
    ListInvitationsUseCase,
)
from cradle.domain.error import ForbiddenError
from cradle.domain.model.common import utcnow
from cradle.domain.service import AccessGrantService, InvitationService
from cradle.domain.value import Email, InvitationStatus
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListInvitationsUseCase:
    """Tests for ListInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_reports_effective_status(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        await service.create_invitation(
            profile.id,
            Email(root="late@example.com"),
            owner.id,
            utcnow() - timedelta(days=8),
        )
        fresh = await service.create_invitation(
            profile.id, Email(root="new@example.com"), owner.id
        )
        use_case = await unit_env.get(ListInvitationsUseCase)

        response = await use_case.execute(
            ListInvitationsRequest(actor_id=str(owner.id), profile_id=str(profile.id))
        )

        statuses = {i.invited_email: i.status for i in response.invitations}
        assert statuses == {
            "late@example.com": InvitationStatus.EXPIRED,
            "new@example.com": InvitationStatus.PENDING,
        }
        assert response.invitations[0].invitation_id == str(fresh.id)
        assert response.invitations[0].accept_url.endswith(f"?token={fresh.token.root}")

    @pytest.mark.asyncio
    async def test_filter_by_pending(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        await service.create_invitation(
            profile.id,
            Email(root="late@example.com"),
            owner.id,
            utcnow() - timedelta(days=8),
        )
        await service.create_invitation(
            profile.id, Email(root="new@example.com"), owner.id
        )
        use_case = await unit_env.get(ListInvitationsUseCase)

        response = await use_case.execute(
            ListInvitationsRequest(
                actor_id=str(owner.id),
                profile_id=str(profile.id),
                status=InvitationStatus.PENDING,
            )
        )

        assert [i.invited_email for i in response.invitations] == ["new@example.com"]

    @pytest.mark.asyncio
    async def test_caregiver_cannot_view(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        carer = await make_user(unit_env, "carer@example.com")
        profile = await make_profile(unit_env, owner)
        await (await unit_env.get(AccessGrantService)).grant_caregiver(
            profile.id, carer.id, owner.id, "carer@example.com"
        )
        use_case = await unit_env.get(ListInvitationsUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                ListInvitationsRequest(
                    actor_id=str(carer.id), profile_id=str(profile.id)
                )
            )
