"""Mock email providers for testing."""

from dishka import Scope, provide

from cradle.adapter.resend import MockInvitationMailer
from cradle.domain.service import InvitationMailer
from cradle.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording invitations instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_mailer(self) -> MockInvitationMailer:
        """Provide the recording mailer, so tests can inspect what was sent."""
        return MockInvitationMailer()

    @provide(scope=Scope.APP)
    def get_invitation_mailer(self, mailer: MockInvitationMailer) -> InvitationMailer:
        """Provide the recording mailer as the invitation mailer."""
        return mailer
