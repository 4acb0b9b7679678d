"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from cradle.config import AuthSettings, InvitationSettings, Settings
from cradle.util.di.base import ProviderBase
from cradle.util.error import ConfigurationError

DEFAULT_JWT_SECRET = AuthSettings().jwt_secret


def check_settings(settings: Settings) -> Settings:
    """Refuse production settings that would be unsafe to serve with.

    Raises:
        ConfigurationError: If production runs with the default JWT secret
            or with the development login enabled
    """
    if settings.environment != "production":
        return settings
    if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    if settings.auth.dev_login_enabled:
        raise ConfigurationError("Development login cannot be enabled in production")
    return settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return check_settings(Settings())

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations
