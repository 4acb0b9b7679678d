"""Resend transactional email adapter."""

from .client import MockInvitationMailer, ResendInvitationMailer, SentInvitation

__all__ = ["MockInvitationMailer", "ResendInvitationMailer", "SentInvitation"]
