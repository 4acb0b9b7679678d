"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from cradle.util.di import PROVIDERS, get_provider


def create_container(web: bool = True) -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables automatically.

    Args:
        web: Include the FastAPI integration provider. Scripts that run
            use cases outside a request (the invitation sweep) pass False.

    Returns:
        Configured DI container with production providers
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    if web:
        providers.append(FastapiProvider())
    return make_async_container(*providers)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; routes resolve with FromDishka."""
    setup_dishka(container, app)
