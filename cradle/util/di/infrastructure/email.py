"""Email infrastructure providers."""

from dishka import Scope, provide

from cradle.adapter.resend import ResendInvitationMailer
from cradle.config import Settings
from cradle.domain.service import InvitationMailer
from cradle.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider using Resend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invitation_mailer(self, settings: Settings) -> InvitationMailer:
        """Provide Resend invitation mailer.

        Without an API key the mailer still loads; every send then fails and
        the invite response carries the link for manual sharing.
        """
        return ResendInvitationMailer(
            api_key=settings.email.resend_api_key,
            from_address=settings.email.from_address,
            api_url=settings.email.api_url,
            timeout=settings.email.timeout_seconds,
        )
