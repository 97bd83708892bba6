"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from guess.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Settings are loaded from environment variables when first resolved.

    Args:
        mocked: Components to replace with their mock implementations.
            Mock providers must be imported before calling this.

    Returns:
        Container ready to serve FastAPI requests
    """
    mocked = set(mocked)
    provider_instances = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use FromDishka.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
