"""Domain services."""

from .access_grant_service import AccessGrantService
from .authorization_service import AuthorizationService
from .base import Service
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .notification_service import InvitationMailer, NotificationService
from .profile_service import ProfileService
from .user_service import UserService

__all__ = [
    "AccessGrantService",
    "AuthorizationService",
    "InvitationMailer",
    "InvitationService",
    "JWTService",
    "NotificationService",
    "ProfileService",
    "Service",
    "UserService",
]
