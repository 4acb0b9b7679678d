"""Invitation notification domain service.

Delivery is best effort: the invitation already exists when the email is
sent, and its link can always be shared by hand.
"""

from abc import ABC, abstractmethod

import logfire

from cradle.domain.error import DeliveryFailedError

from .base import Service


class InvitationMailer(ABC):
    """Interface for the transactional email collaborator."""

    @abstractmethod
    async def send_invitation(
        self,
        email: str,
        accept_url: str,
        profile_name: str,
        inviter_name: str,
    ) -> None:
        """Send an invitation email.

        Args:
            email: Recipient address
            accept_url: Link carrying the invitation token
            profile_name: Name of the shared profile
            inviter_name: Who is inviting

        Raises:
            DeliveryFailedError: If the email could not be sent
        """
        pass


class NotificationService(Service):
    """Domain service wrapping the mailer with the non-fatal failure policy."""

    def __init__(self, mailer: InvitationMailer) -> None:
        """Initialize notification service.

        Args:
            mailer: Email delivery collaborator
        """
        self.mailer = mailer

    async def notify_invitation(
        self,
        email: str,
        accept_url: str,
        profile_name: str,
        inviter_name: str,
    ) -> DeliveryFailedError | None:
        """Send the invitation email.

        Returns:
            None when sent, otherwise the delivery failure to surface as a
            warning
        """
        with logfire.span(
            "notification_service.notify_invitation",
            email=email,
            profile_name=profile_name,
        ):
            try:
                await self.mailer.send_invitation(
                    email=email,
                    accept_url=accept_url,
                    profile_name=profile_name,
                    inviter_name=inviter_name,
                )
            except DeliveryFailedError as e:
                logfire.warn(
                    "Invitation email failed",
                    email=email,
                    reason=e.reason,
                )
                return e
            except Exception as e:
                # Delivery must never undo the invitation it announces
                logfire.error(
                    "Invitation mailer crashed",
                    email=email,
                    error_type=type(e).__name__,
                    _exc_info=True,
                )
                return DeliveryFailedError(email, "Unexpected email service error")

            logfire.info("Invitation email sent", email=email)
            return None
