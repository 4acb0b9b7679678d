"""Resend email client for invitation delivery.

Sends invitation emails through Resend's HTTP API. Failures are reported as
DeliveryFailedError so callers can fall back to sharing the link by hand.
"""

from dataclasses import dataclass
from html import escape

import httpx
import logfire

from cradle.adapter.error import ProviderError
from cradle.domain.error import DeliveryFailedError
from cradle.domain.service.notification_service import InvitationMailer


def render_invitation_html(
    accept_url: str, profile_name: str, inviter_name: str
) -> str:
    """Minimal HTML body with a button and a copyable fallback link."""
    url = escape(accept_url, quote=True)
    return (
        "<!DOCTYPE html><html><body>"
        "<h1>Baby Tracker</h1>"
        f"<p><strong>{escape(inviter_name)}</strong> has invited you to be a "
        f"caregiver for <strong>{escape(profile_name)}</strong> on Baby Tracker!</p>"
        f'<p><a href="{url}">Accept Invitation</a></p>'
        "<p>Or copy and paste this link into your browser:<br>"
        f'<a href="{url}">{url}</a></p>'
        "<p>If you weren't expecting this invitation, you can safely ignore "
        "this email.</p>"
        "</body></html>"
    )


class ResendInvitationMailer(InvitationMailer):
    """Invitation mailer backed by the Resend API."""

    def __init__(
        self,
        api_key: str | None,
        from_address: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Resend mailer.

        Args:
            api_key: Resend API key; None leaves email unconfigured
            from_address: Sender, e.g. "Baby Tracker <noreply@example.com>"
            api_url: Resend send endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.from_address = from_address
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def send_invitation(
        self,
        email: str,
        accept_url: str,
        profile_name: str,
        inviter_name: str,
    ) -> None:
        """Send an invitation email.

        Raises:
            DeliveryFailedError: If email is not configured, the request
                fails, or Resend rejects the message
        """
        if not self.api_key:
            raise DeliveryFailedError(email, "Email service not configured")

        payload = {
            "from": self.from_address,
            "to": [email],
            "subject": f"Invitation to track {profile_name or 'a baby'} on Baby Tracker",
            "html": render_invitation_html(accept_url, profile_name, inviter_name),
        }

        try:
            message_id = await self._post(payload)
        except ProviderError as e:
            raise DeliveryFailedError(email, str(e)) from e

        logfire.info("Resend accepted invitation email", id=message_id)

    async def _post(self, payload: dict) -> str | None:
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Resend HTTP error", error=str(e))
            raise ProviderError("resend", f"HTTP error sending email: {e}") from e

        if response.status_code >= 400:
            reason = _error_message(response)
            logfire.error(
                "Resend rejected invitation email",
                status_code=response.status_code,
                error=reason,
            )
            raise ProviderError("resend", reason, response.status_code)

        # The message id is only logged; an unexpected body is not a failure
        try:
            return response.json().get("id")
        except ValueError:
            logfire.warn(
                "Resend reply was not JSON", status_code=response.status_code
            )
            return None


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json().get("message") or "Failed to send email"
    except ValueError:
        return response.text or "Failed to send email"


@dataclass
class SentInvitation:
    """An invitation email captured by the mock mailer."""

    email: str
    accept_url: str
    profile_name: str
    inviter_name: str


class MockInvitationMailer(InvitationMailer):
    """Mock mailer for testing.

    Records every message instead of sending it. Set ``fail_with`` to make
    the next sends fail with that reason.
    """

    def __init__(self) -> None:
        self.sent: list[SentInvitation] = []
        self.fail_with: str | None = None

    async def send_invitation(
        self,
        email: str,
        accept_url: str,
        profile_name: str,
        inviter_name: str,
    ) -> None:
        if self.fail_with:
            raise DeliveryFailedError(email, self.fail_with)
        self.sent.append(
            SentInvitation(
                email=email,
                accept_url=accept_url,
                profile_name=profile_name,
                inviter_name=inviter_name,
            )
        )
