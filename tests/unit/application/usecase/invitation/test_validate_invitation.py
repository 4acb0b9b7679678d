"""Tests for validate invitation use case."""

from datetime import timedelta

import pytest

from cradle.application.usecase.invitation import (
    AcceptanceState,
    ValidateInvitationRequest,
    ValidateInvitationUseCase,
)
from cradle.domain.model.common import utcnow
from cradle.domain.service import InvitationService
from cradle.domain.value import Email, InvitationStatus, InvitationToken
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestValidateInvitationUseCase:
    """Tests for ValidateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_valid_invitation_shows_context(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com", full_name="Olive Owner")
        profile = await make_profile(unit_env, owner, name="Ada")
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(
            profile.id, Email(root="carol@example.com"), owner.id
        )
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        assert response.valid is True
        assert response.state == AcceptanceState.AWAITING_AUTH
        assert response.profile_name == "Ada"
        assert response.invited_email == "carol@example.com"
        assert response.inviter_name == "Olive Owner"
        assert response.expires_at == invitation.expires_at
        assert response.sign_up_url.endswith(f"?invite={invitation.token.root}")

        # Viewing never changes the invitation
        stored = await service.get_by_token(invitation.token)
        assert stored.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(ValidateInvitationRequest())

        assert response.valid is False
        assert response.state == AcceptanceState.INVALID_LINK
        assert response.reason == "invalid_link"

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(ValidateInvitationRequest(token="missing"))

        assert response.valid is False
        assert response.reason == "not_found"
        assert response.profile_name is None

    @pytest.mark.asyncio
    async def test_expired_invitation(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        invitation = await (await unit_env.get(InvitationService)).create_invitation(
            profile.id,
            Email(root="carol@example.com"),
            owner.id,
            utcnow() - timedelta(days=30),
        )
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        assert response.valid is False
        assert response.state == AcceptanceState.INVITATION_INVALID
        assert response.reason == "expired"

    @pytest.mark.asyncio
    async def test_cancelled_invitation(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(
            profile.id, Email(root="carol@example.com"), owner.id
        )
        await service.cancel(invitation)
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        assert response.reason == "cancelled"
        assert await service.get_by_token(
            InvitationToken(root=invitation.token.root)
        ) is not None
