"""Application layer DI providers."""

from dishka import Scope, provide

from cradle.application.usecase.auth import DevLoginUseCase, GetCurrentUserUseCase
from cradle.application.usecase.caregiver import (
    CancelInvitationUseCase,
    InviteCaregiverUseCase,
    ListCaregiversUseCase,
    ListInvitationsUseCase,
    RevokeCaregiverUseCase,
)
from cradle.application.usecase.invitation import (
    AcceptanceRegistry,
    AcceptInvitationUseCase,
    ExpireInvitationsUseCase,
    ValidateInvitationUseCase,
)
from cradle.application.usecase.profile import (
    CreateProfileUseCase,
    ListProfilesUseCase,
)
from cradle.config import Settings
from cradle.domain.service import (
    AccessGrantService,
    AuthorizationService,
    InvitationService,
    JWTService,
    NotificationService,
    ProfileService,
    UserService,
)
from cradle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_acceptance_registry(self) -> AcceptanceRegistry:
        """Provide the process-wide in-flight acceptance registry."""
        return AcceptanceRegistry()

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_dev_login_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> DevLoginUseCase:
        """Provide development login use case."""
        return DevLoginUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(profile_service=profile_service)

    # Caregiver use cases
    @provide(scope=Scope.REQUEST)
    def get_invite_caregiver_use_case(
        self,
        authorization_service: AuthorizationService,
        access_grant_service: AccessGrantService,
        invitation_service: InvitationService,
        notification_service: NotificationService,
        profile_service: ProfileService,
        user_service: UserService,
        settings: Settings,
    ) -> InviteCaregiverUseCase:
        """Provide invite caregiver use case."""
        return InviteCaregiverUseCase(
            authorization_service=authorization_service,
            access_grant_service=access_grant_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
            profile_service=profile_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_caregivers_use_case(
        self,
        authorization_service: AuthorizationService,
        access_grant_service: AccessGrantService,
        user_service: UserService,
    ) -> ListCaregiversUseCase:
        """Provide list caregivers use case."""
        return ListCaregiversUseCase(
            authorization_service=authorization_service,
            access_grant_service=access_grant_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_revoke_caregiver_use_case(
        self,
        authorization_service: AuthorizationService,
        access_grant_service: AccessGrantService,
    ) -> RevokeCaregiverUseCase:
        """Provide revoke caregiver use case."""
        return RevokeCaregiverUseCase(
            authorization_service=authorization_service,
            access_grant_service=access_grant_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_cancel_invitation_use_case(
        self,
        authorization_service: AuthorizationService,
        invitation_service: InvitationService,
    ) -> CancelInvitationUseCase:
        """Provide cancel invitation use case."""
        return CancelInvitationUseCase(
            authorization_service=authorization_service,
            invitation_service=invitation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self,
        authorization_service: AuthorizationService,
        invitation_service: InvitationService,
        settings: Settings,
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            authorization_service=authorization_service,
            invitation_service=invitation_service,
            settings=settings,
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self,
        invitation_service: InvitationService,
        profile_service: ProfileService,
        user_service: UserService,
        settings: Settings,
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(
            invitation_service=invitation_service,
            profile_service=profile_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self,
        invitation_service: InvitationService,
        access_grant_service: AccessGrantService,
        user_service: UserService,
        profile_service: ProfileService,
        registry: AcceptanceRegistry,
        settings: Settings,
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            invitation_service=invitation_service,
            access_grant_service=access_grant_service,
            user_service=user_service,
            profile_service=profile_service,
            registry=registry,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_expire_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ExpireInvitationsUseCase:
        """Provide expire invitations use case."""
        return ExpireInvitationsUseCase(invitation_service=invitation_service)
