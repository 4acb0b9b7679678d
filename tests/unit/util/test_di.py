"""Tests for DI configuration checks and provider selection."""

import pytest

from cradle.config import AuthSettings, Settings
from cradle.util.di import (
    EmailProvider,
    ProdConfigProvider,
    ProdEmailProvider,
    get_provider,
)
from cradle.util.di.core import check_settings
from cradle.util.error import ConfigurationError
from tests.di.email import MockEmailProvider


def production(**auth) -> Settings:
    return Settings(environment="production", auth=AuthSettings(**auth))


class TestCheckSettings:
    """Tests for check_settings."""

    def test_production_requires_secret(self):
        with pytest.raises(ConfigurationError):
            check_settings(production(dev_login_enabled=False))

    def test_production_rejects_dev_login(self):
        with pytest.raises(ConfigurationError):
            check_settings(
                production(jwt_secret="a-real-secret-value", dev_login_enabled=True)
            )

    def test_production_with_secret(self):
        settings = production(jwt_secret="a-real-secret-value", dev_login_enabled=False)
        assert check_settings(settings) is settings

    def test_non_production_is_not_checked(self):
        settings = Settings(
            environment="development",
            auth=AuthSettings(jwt_secret=AuthSettings().jwt_secret),
        )
        assert check_settings(settings) is settings


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(EmailProvider, use_mock=False) is ProdEmailProvider
        assert get_provider(EmailProvider, use_mock=True) is MockEmailProvider
