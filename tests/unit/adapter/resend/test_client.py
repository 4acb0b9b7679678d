"""Tests for the Resend invitation mailer."""

import json

import httpx
import pytest

from cradle.adapter.resend import ResendInvitationMailer
from cradle.adapter.resend.client import render_invitation_html
from cradle.domain.error import DeliveryFailedError


def mailer_with(handler) -> ResendInvitationMailer:
    return ResendInvitationMailer(
        api_key="re_test",
        from_address="Baby Tracker <noreply@example.com>",
        transport=httpx.MockTransport(handler),
    )


class TestResendInvitationMailer:
    """Tests for ResendInvitationMailer."""

    @pytest.mark.asyncio
    async def test_sends_invitation(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "msg_123"})

        await mailer_with(handler).send_invitation(
            "carol@example.com",
            "http://localhost:3000/accept-invite?token=abc",
            "Ada",
            "Olive",
        )

        assert captured["auth"] == "Bearer re_test"
        assert captured["body"]["to"] == ["carol@example.com"]
        assert captured["body"]["subject"] == "Invitation to track Ada on Baby Tracker"
        assert "accept-invite?token=abc" in captured["body"]["html"]

    @pytest.mark.asyncio
    async def test_non_json_success_reply_counts_as_sent(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="OK")

        mailer = mailer_with(handler)

        assert await mailer._post({"to": ["carol@example.com"]}) is None
        await mailer.send_invitation(
            "carol@example.com", "http://x/accept-invite?token=abc", "Ada", "Olive"
        )

    @pytest.mark.asyncio
    async def test_rejection_reports_provider_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"message": "Invalid `to` field"})

        with pytest.raises(DeliveryFailedError) as exc_info:
            await mailer_with(handler).send_invitation(
                "carol@example.com", "http://x/accept-invite?token=abc", "Ada", "Olive"
            )

        assert "Invalid `to` field" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DeliveryFailedError):
            await mailer_with(handler).send_invitation(
                "carol@example.com", "http://x/accept-invite?token=abc", "Ada", "Olive"
            )

    @pytest.mark.asyncio
    async def test_unconfigured(self):
        mailer = ResendInvitationMailer(api_key=None, from_address="noreply@example.com")

        with pytest.raises(DeliveryFailedError) as exc_info:
            await mailer.send_invitation(
                "carol@example.com", "http://x/accept-invite?token=abc", "Ada", "Olive"
            )

        assert "not configured" in exc_info.value.message


def test_html_escapes_names():
    html = render_invitation_html("http://x/?token=a&b", "<Ada>", "Olive")
    assert "&lt;Ada&gt;" in html
    assert "token=a&amp;b" in html
