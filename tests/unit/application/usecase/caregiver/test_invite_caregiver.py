"""Tests for invite caregiver use case."""

from uuid import uuid4

import pytest

from cradle.adapter.resend import MockInvitationMailer
from cradle.application.usecase.caregiver import (
    InviteCaregiverRequest,
    InviteCaregiverUseCase,
    InviteOutcome,
)
from cradle.domain.error import AlreadyGrantedError, ForbiddenError, InvalidInputError
from cradle.domain.repository import InvitationRepository
from cradle.domain.service import AccessGrantService, InvitationService
from cradle.domain.value import InvitationStatus, InvitationToken, ProfileId, Role
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def invite(actor, profile, email: str) -> InviteCaregiverRequest:
    return InviteCaregiverRequest(
        actor_id=str(actor.id), profile_id=str(profile.id), email=email
    )


class TestInviteCaregiverUseCase:
    """Tests for InviteCaregiverUseCase."""

    @pytest.mark.asyncio
    async def test_existing_account_is_granted_directly(self, unit_env):
        """An address with an account gets a grant and no invitation record."""
        owner = await make_user(unit_env, "owner@example.com")
        carer = await make_user(unit_env, "carer@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)
        mailer = await unit_env.get(MockInvitationMailer)

        response = await use_case.execute(invite(owner, profile, " Carer@Example.com "))

        assert response.outcome == InviteOutcome.GRANTED_DIRECTLY
        assert response.user_id == str(carer.id)
        assert response.token is None
        grant = await (await unit_env.get(AccessGrantService)).get_grant(
            profile.id, carer.id
        )
        assert grant.role == Role.CAREGIVER
        assert grant.granted_by == owner.id
        invitations = await (await unit_env.get(InvitationService)).list_for_profile(
            profile.id
        )
        assert invitations == []
        assert mailer.sent == []

    @pytest.mark.asyncio
    async def test_unknown_address_gets_invitation_and_email(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com", full_name="Olive Owner")
        profile = await make_profile(unit_env, owner, name="Ada")
        use_case = await unit_env.get(InviteCaregiverUseCase)
        mailer = await unit_env.get(MockInvitationMailer)

        response = await use_case.execute(invite(owner, profile, "Carol@Example.com"))

        assert response.outcome == InviteOutcome.INVITATION_CREATED
        assert response.email == "carol@example.com"
        assert response.email_sent is True
        assert response.warning is None
        assert response.accept_url == (
            f"http://localhost:3000/accept-invite?token={response.token}"
        )
        stored = await (await unit_env.get(InvitationRepository)).find_by_token(
            InvitationToken(root=response.token)
        )
        assert stored.status == InvitationStatus.PENDING
        assert stored.invited_by == owner.id
        assert len(mailer.sent) == 1
        assert mailer.sent[0].email == "carol@example.com"
        assert mailer.sent[0].accept_url == response.accept_url
        assert mailer.sent[0].profile_name == "Ada"
        assert mailer.sent[0].inviter_name == "Olive Owner"

    @pytest.mark.asyncio
    async def test_inviter_name_falls_back_to_email(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)
        mailer = await unit_env.get(MockInvitationMailer)

        await use_case.execute(invite(owner, profile, "carol@example.com"))

        assert mailer.sent[0].inviter_name == "owner@example.com"

    @pytest.mark.asyncio
    async def test_delivery_failure_keeps_invitation(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)
        mailer = await unit_env.get(MockInvitationMailer)
        mailer.fail_with = "Email service not configured"

        response = await use_case.execute(invite(owner, profile, "carol@example.com"))

        assert response.outcome == InviteOutcome.INVITATION_CREATED
        assert response.email_sent is False
        assert "Email service not configured" in response.warning
        assert response.accept_url is not None
        pending = await (await unit_env.get(InvitationService)).list_for_profile(
            profile.id, InvitationStatus.PENDING
        )
        assert len(pending) == 1

    @pytest.mark.asyncio
    async def test_unexpected_mailer_error_keeps_invitation(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)
        mailer = await unit_env.get(MockInvitationMailer)

        async def crash(**kwargs):
            raise RuntimeError("connection pool exhausted")

        mailer.send_invitation = crash

        response = await use_case.execute(invite(owner, profile, "carol@example.com"))

        assert response.outcome == InviteOutcome.INVITATION_CREATED
        assert response.email_sent is False
        assert response.warning is not None
        pending = await (await unit_env.get(InvitationService)).list_for_profile(
            profile.id, InvitationStatus.PENDING
        )
        assert len(pending) == 1

    @pytest.mark.asyncio
    async def test_reinvite_replaces_pending_invitation(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)

        first = await use_case.execute(invite(owner, profile, "carol@example.com"))
        second = await use_case.execute(invite(owner, profile, "CAROL@example.com"))

        assert first.token != second.token
        invitations = await (await unit_env.get(InvitationService)).list_for_profile(
            profile.id
        )
        statuses = {str(inv.id): inv.status for inv in invitations}
        assert statuses == {
            first.invitation_id: InvitationStatus.CANCELLED,
            second.invitation_id: InvitationStatus.PENDING,
        }

    @pytest.mark.asyncio
    async def test_existing_grant_is_rejected(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        await make_user(unit_env, "carer@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)
        await use_case.execute(invite(owner, profile, "carer@example.com"))

        with pytest.raises(AlreadyGrantedError):
            await use_case.execute(invite(owner, profile, "carer@example.com"))

        grants = await (await unit_env.get(AccessGrantService)).list_for_profile(
            profile.id
        )
        assert len(grants) == 2

    @pytest.mark.asyncio
    async def test_owner_inviting_themselves_is_rejected(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)

        with pytest.raises(AlreadyGrantedError):
            await use_case.execute(invite(owner, profile, "OWNER@example.com"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["", "not-an-email", "carol@", "carol@example"])
    async def test_invalid_email_is_rejected(self, unit_env, email):
        owner = await make_user(unit_env, "owner@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)

        with pytest.raises(InvalidInputError, match="Please enter a valid email"):
            await use_case.execute(invite(owner, profile, email))

    @pytest.mark.asyncio
    async def test_caregiver_cannot_invite(self, unit_env):
        owner = await make_user(unit_env, "owner@example.com")
        carer = await make_user(unit_env, "carer@example.com")
        profile = await make_profile(unit_env, owner)
        use_case = await unit_env.get(InviteCaregiverUseCase)
        await use_case.execute(invite(owner, profile, "carer@example.com"))
        mailer = await unit_env.get(MockInvitationMailer)

        with pytest.raises(ForbiddenError):
            await use_case.execute(invite(carer, profile, "dave@example.com"))

        assert mailer.sent == []

    @pytest.mark.asyncio
    async def test_authorization_is_checked_before_email(self, unit_env):
        stranger = await make_user(unit_env, "stranger@example.com")
        use_case = await unit_env.get(InviteCaregiverUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                InviteCaregiverRequest(
                    actor_id=str(stranger.id),
                    profile_id=str(ProfileId(uuid4())),
                    email="garbage",
                )
            )
