"""Domain layer DI providers."""

from dishka import Scope, provide

from cradle.config import AuthSettings, InvitationSettings
from cradle.domain.repository import (
    AccessGrantRepository,
    InvitationRepository,
    ProfileRepository,
    UserRepository,
)
from cradle.domain.service import (
    AccessGrantService,
    AuthorizationService,
    InvitationMailer,
    InvitationService,
    JWTService,
    NotificationService,
    ProfileService,
    UserService,
)
from cradle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authorization_service(
        self, access_grant_repository: AccessGrantRepository
    ) -> AuthorizationService:
        """Provide authorization guard."""
        return AuthorizationService(access_grant_repository=access_grant_repository)

    @provide
    def get_access_grant_service(
        self, access_grant_repository: AccessGrantRepository
    ) -> AccessGrantService:
        """Provide access grant domain service."""
        return AccessGrantService(access_grant_repository=access_grant_repository)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            invitation_settings=invitation_settings,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        access_grant_service: AccessGrantService,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            access_grant_service=access_grant_service,
        )

    @provide
    def get_notification_service(self, mailer: InvitationMailer) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(mailer=mailer)
