"""Tests for invitation service."""

from datetime import timedelta
from uuid import uuid4

import pytest

from cradle.domain.error import AlreadyInvitedError, NotFoundError
from cradle.domain.model.common import utcnow
from cradle.domain.repository import InvitationRepository
from cradle.domain.service import InvitationService
from cradle.domain.value import Email, InvitationId, InvitationStatus
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CAROL = Email(root="carol@example.com")


class TestInvitationService:
    """Tests for InvitationService."""

    @pytest.mark.asyncio
    async def test_create_invitation(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        now = utcnow()

        invitation = await service.create_invitation(profile.id, CAROL, owner.id, now)

        assert invitation.status == InvitationStatus.PENDING
        assert invitation.invited_email == CAROL
        assert invitation.expires_at == now + timedelta(days=7)
        # token_urlsafe(32) yields 43 characters
        assert len(invitation.token.root) >= 43
        assert await service.get_by_token(invitation.token) == invitation

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)

        tokens = {
            (await service.create_invitation(
                profile.id, Email(root=f"guest{i}@example.com"), owner.id
            )).token.root
            for i in range(20)
        }

        assert len(tokens) == 20

    @pytest.mark.asyncio
    async def test_reinvite_cancels_previous_pending(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)

        first = await service.create_invitation(profile.id, CAROL, owner.id)
        second = await service.create_invitation(profile.id, CAROL, owner.id)

        assert first.token != second.token
        old = await service.get_by_id(first.id)
        assert old.status == InvitationStatus.CANCELLED
        pending = await service.list_for_profile(profile.id, InvitationStatus.PENDING)
        assert [inv.id for inv in pending] == [second.id]

    @pytest.mark.asyncio
    async def test_reinvite_after_lazy_expiry_marks_old_row_expired(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        long_ago = utcnow() - timedelta(days=30)

        stale = await service.create_invitation(profile.id, CAROL, owner.id, long_ago)
        await service.create_invitation(profile.id, CAROL, owner.id)

        assert (await service.get_by_id(stale.id)).status == InvitationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_concurrent_pending_insert_maps_to_already_invited(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        repository = await unit_env.get(InvitationRepository)
        existing = await service.create_invitation(profile.id, CAROL, owner.id)

        # Simulate the other request's row landing after our cleanup step
        async def no_pending(*args):
            return []

        repository.find_pending_for_email = no_pending
        with pytest.raises(AlreadyInvitedError) as exc_info:
            await service.create_invitation(profile.id, CAROL, owner.id)

        assert exc_info.value.code == "already_invited"
        assert (await service.get_by_id(existing.id)).status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_cancel_pending(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(profile.id, CAROL, owner.id)

        cancelled = await service.cancel(invitation)

        assert cancelled.status == InvitationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_cancel_is_noop_when_not_pending(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(profile.id, CAROL, owner.id)
        accepted = await service.mark_accepted(invitation)

        result = await service.cancel(accepted)

        assert result.status == InvitationStatus.ACCEPTED
        stored = await service.get_by_id(invitation.id)
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_at is not None

    @pytest.mark.asyncio
    async def test_mark_accepted_twice_fails(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(profile.id, CAROL, owner.id)
        accepted = await service.mark_accepted(invitation)

        with pytest.raises(ValueError):
            await service.mark_accepted(accepted)

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, unit_env):
        service = await unit_env.get(InvitationService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(InvitationId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_for_profile_filters_on_effective_status(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        stale = await service.create_invitation(
            profile.id,
            Email(root="old@example.com"),
            owner.id,
            utcnow() - timedelta(days=8),
        )
        fresh = await service.create_invitation(profile.id, CAROL, owner.id)

        pending = await service.list_for_profile(profile.id, InvitationStatus.PENDING)
        expired = await service.list_for_profile(profile.id, InvitationStatus.EXPIRED)

        assert [inv.id for inv in pending] == [fresh.id]
        assert [inv.id for inv in expired] == [stale.id]

    @pytest.mark.asyncio
    async def test_expire_stale_persists_expired_status(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        service = await unit_env.get(InvitationService)
        stale = await service.create_invitation(
            profile.id,
            Email(root="old@example.com"),
            owner.id,
            utcnow() - timedelta(days=8),
        )
        fresh = await service.create_invitation(profile.id, CAROL, owner.id)

        expired = await service.expire_stale()

        assert [inv.id for inv in expired] == [stale.id]
        assert (await service.get_by_id(stale.id)).status == InvitationStatus.EXPIRED
        assert (await service.get_by_id(fresh.id)).status == InvitationStatus.PENDING
        assert await service.expire_stale() == []
